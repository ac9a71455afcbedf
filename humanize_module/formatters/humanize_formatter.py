"""
Humanize formatter

Renders log entries in a multi-line layout meant for people rather than
log shippers, in either a long or a compact form.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Callable, Optional, Any
import sys
import threading

from humanize_module.core.log_entry import LogEntry
from humanize_module.core.formatter_config import FormatterConfig
from humanize_module.errors import RenderError
from humanize_module.formatters.base_formatter import BaseFormatter
from humanize_module.formatters.json_formatter import JSONFormatter
from humanize_module.formatters.layout import (
    render_error,
    render_fields_compact,
    render_fields_long,
    render_header,
)
from humanize_module.terminal.term_info import TermInfo, get_term_info


class HumanizeFormatter(BaseFormatter):
    """
    Format log entries for humans.

    The terminal behind the first entry's sink is probed once and cached
    for the formatter's lifetime, so later resizes are not picked up.
    Instances may be shared between threads.
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        fallback: Optional[BaseFormatter] = None,
        term_info_provider: Callable[[Any], TermInfo] = get_term_info,
        **overrides: Any,
    ):
        """
        Initialize humanize formatter.

        Args:
            config: Formatter configuration (default: FormatterConfig.default())
            fallback: Formatter to use when a human isn't looking
                      (default: JSONFormatter)
            term_info_provider: Callable returning TermInfo for a sink
            **overrides: FormatterConfig fields to override,
                         e.g. compact=True

        Example:
            formatter = HumanizeFormatter(compact=True)

            # Toggle between calls
            formatter.compact = False
        """
        self.config = config or FormatterConfig.default()
        if overrides:
            self.config = replace(self.config, **overrides)

        self.fallback = fallback or JSONFormatter()
        self._term_info_provider = term_info_provider
        self._term_info = TermInfo()
        self._term_info_resolved = False
        self._term_info_lock = threading.Lock()

    @property
    def compact(self) -> bool:
        return self.config.compact

    @compact.setter
    def compact(self, value: bool) -> None:
        self.config.compact = value

    @property
    def date_time_format(self) -> str:
        return self.config.date_time_format

    @date_time_format.setter
    def date_time_format(self, value: str) -> None:
        self.config.date_time_format = value

    @property
    def term_info(self) -> TermInfo:
        """Cached terminal information (zero-valued until the first format call)."""
        return self._term_info

    def _init_term_info(self, entry: LogEntry) -> None:
        """Probe the entry's sink exactly once, however many threads call in."""
        if self._term_info_resolved:
            return

        with self._term_info_lock:
            if self._term_info_resolved:
                return
            try:
                if entry.out is not None:
                    self._term_info = self._term_info_provider(entry.out)
            except Exception as e:
                print(f"Failed to initialize terminal with err {e}", file=sys.stderr)
            finally:
                self._term_info_resolved = True

    def _wrap_width(self) -> int:
        """Compact wrap width; 0 (unconstrained) off a terminal."""
        if self._term_info.is_terminal:
            return self._term_info.width_cols
        return 0

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry in the humanized layout.

        Args:
            entry: Log entry to format

        Returns:
            Header line, fields block and error line, concatenated

        Raises:
            RenderError: If any part of the entry cannot be rendered;
                         nothing partial is returned
        """
        self._init_term_info(entry)

        config = self.config
        colored = config.colored and self._term_info.is_terminal

        try:
            line = render_header(
                entry.timestamp,
                entry.level,
                entry.message,
                config.date_time_format,
                colored=colored,
            )
            fields = self._render_fields(entry, config)
            error = render_error(entry.fields)
        except Exception as e:
            raise RenderError(f"Failed to render log entry: {e}") from e

        return line + fields + error

    def _render_fields(self, entry: LogEntry, config: FormatterConfig) -> str:
        # No sense in rendering if only the error is present
        if not entry.has_plain_fields():
            return ""

        if config.compact:
            return render_fields_compact(entry.fields, self._wrap_width())

        return render_fields_long(entry.fields, config.timestamp_width)

    def __repr__(self) -> str:
        """String representation."""
        layout = "compact" if self.config.compact else "long"
        return f"HumanizeFormatter(layout={layout}, date_time_format='{self.config.date_time_format}')"
