"""
Terminal information for an output sink

Reports whether a stream is an interactive terminal and, if it is,
how many columns and lines it has.
"""

import os
from dataclasses import dataclass
from typing import Any

from humanize_module.errors import TerminalQueryError


@dataclass(frozen=True)
class TermInfo:
    """
    Snapshot of a sink's terminal capabilities.

    Non-terminal sinks report zero width and height; those values must
    not be used to constrain wrapping.
    """

    is_terminal: bool = False
    width_cols: int = 0
    height_lines: int = 0


def get_term_info(stream: Any) -> TermInfo:
    """
    Inspect a stream for terminal information.

    Args:
        stream: Output sink. Anything without a usable file descriptor
                (StringIO, closed files, ...) is treated as a non-terminal.

    Returns:
        TermInfo for the stream

    Raises:
        TerminalQueryError: If the stream is a terminal but its size
                            cannot be read
    """
    try:
        fd = stream.fileno()
    except (AttributeError, ValueError, OSError):
        return TermInfo()

    if not os.isatty(fd):
        return TermInfo()

    try:
        size = os.get_terminal_size(fd)
    except OSError as e:
        raise TerminalQueryError(f"Cannot read terminal size: {e}") from e

    return TermInfo(
        is_terminal=True,
        width_cols=size.columns,
        height_lines=size.lines,
    )
