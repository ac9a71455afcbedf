"""
Text layout for humanized log entries

Pure rendering functions. The long layout puts one aligned field per line
under a "Fields:" heading:

    2024-05-01T09:30:00 [info]: message
              Fields:
                        dance:         flhargunstow
                        power_level:   9000
    ERROR: the error is never wrapped

The compact layout packs tab-separated "key: value" groups onto lines no
wider than the terminal, each line indented by four spaces.
"""

import sys
from datetime import datetime
from typing import Any, List, Mapping, Optional

from humanize_module.core.log_entry import ERROR_KEY
from humanize_module.core.log_level import LogLevel

COMPACT_OFFSET = 4
# Each key is followed by a colon and a single space
FIELD_PADDING = 2


def new_line_with_offset(offset: int) -> str:
    return "\n" + " " * offset


def field_order(fields: Mapping[str, Any]) -> List[str]:
    """Keys of ``fields`` in ascending, case-sensitive order."""
    return sorted(fields)


def longest_key_len(fields: Mapping[str, Any]) -> int:
    return max((len(key) for key in fields), default=0)


def render_header(
    timestamp: datetime,
    level: LogLevel,
    message: str,
    date_time_format: str,
    colored: bool = False,
) -> str:
    """
    Render the first line of an entry.

    Args:
        timestamp: Entry timestamp
        level: Entry level
        message: Log message
        date_time_format: strftime pattern for the timestamp
        colored: Wrap the level name in its ANSI color

    Returns:
        "\\n<timestamp> [<level>]: <message>"
    """
    level_name = level.colorize(str(level)) if colored else str(level)
    return f"\n{timestamp.strftime(date_time_format)} [{level_name}]: {message}"


def render_fields_long(fields: Mapping[str, Any], timestamp_width: int) -> str:
    """
    Render fields one per line, values aligned in a single column.

    Args:
        fields: Entry fields; the error field is skipped
        timestamp_width: Printed width of the header timestamp, used to
                         indent fields under it

    Returns:
        The fields block, starting with a newline
    """
    offset = 1 + timestamp_width
    spacer = " " * offset

    # Width counts every key, the error included, even though the error
    # is rendered elsewhere
    max_field_width = longest_key_len(fields) + FIELD_PADDING

    lines = "\n" + " " * (offset // 2) + "Fields:"

    for key in field_order(fields):
        if key == ERROR_KEY:
            continue

        padding = " " * (max_field_width - len(key))
        # TODO: wrap values longer than the terminal width
        lines += f"\n{spacer}{key}: {padding}{fields[key]}"

    return lines


def render_fields_compact(fields: Mapping[str, Any], wrap_width: Optional[int]) -> str:
    """
    Render fields tab-separated, wrapping before a field would cross
    ``wrap_width``.

    A single field is never split: one wider than ``wrap_width`` takes a
    line of its own and overflows it.

    Args:
        fields: Entry fields; the error field is skipped
        wrap_width: Terminal width in columns. 0 or None means unconstrained.

    Returns:
        The fields block, starting with a newline
    """
    if not wrap_width:
        wrap_width = sys.maxsize

    lines = new_line_with_offset(COMPACT_OFFSET)
    current_line = " " * COMPACT_OFFSET

    for key in field_order(fields):
        if key == ERROR_KEY:
            continue

        line = f"{key}: {fields[key]}"

        if len(line) + len(current_line) > wrap_width:
            lines += current_line
            current_line = new_line_with_offset(COMPACT_OFFSET) + line
        else:
            current_line += "\t" + line

    if current_line:
        lines += current_line

    return lines


def render_error(fields: Mapping[str, Any]) -> str:
    """Render the error field on a line of its own, or "" without one."""
    if ERROR_KEY in fields:
        return f"\nERROR: {fields[ERROR_KEY]}"
    return ""
