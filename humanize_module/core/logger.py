"""
Minimal host logger

Builds log entries, hands them to a formatter and writes the result to
its output stream.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, TextIO, TYPE_CHECKING
import sys
import threading

from humanize_module.core.log_level import LogLevel
from humanize_module.core.log_entry import LogEntry, ERROR_KEY
from humanize_module.errors import HumanizeError

if TYPE_CHECKING:
    from humanize_module.formatters.base_formatter import BaseFormatter


class Logger:
    """Synchronous logger writing formatted entries to a single stream."""

    def __init__(self, formatter: Optional["BaseFormatter"] = None, out: Optional[TextIO] = None):
        """
        Initialize logger.

        Args:
            formatter: Entry formatter (default: HumanizeFormatter)
            out: Output stream (default: sys.stderr)
        """
        if formatter is None:
            from humanize_module.formatters.humanize_formatter import HumanizeFormatter
            formatter = HumanizeFormatter()

        self.formatter = formatter
        self.out = out if out is not None else sys.stderr
        self._lock = threading.Lock()
        self._metrics = {"logged": 0, "format_errors": 0}

    def set_formatter(self, formatter: "BaseFormatter") -> None:
        """Replace the formatter."""
        self.formatter = formatter

    def log(self, level: LogLevel, message: str, /, **fields: Any) -> None:
        """Log a message with fields."""
        entry = LogEntry(
            level=level,
            message=message,
            fields=fields,
            out=self.out,
        )
        self._write(entry)

    def _write(self, entry: LogEntry) -> None:
        try:
            text = self.formatter.format(entry)
        except HumanizeError as e:
            with self._lock:
                self._metrics["format_errors"] += 1
            print(f"Failed to obtain reader, {e}", file=sys.stderr)
            return

        with self._lock:
            self.out.write(text + "\n")
            self.out.flush()
            self._metrics["logged"] += 1

    def with_fields(self, /, **fields: Any) -> "FieldLogger":
        """Return a logger that adds ``fields`` to every entry."""
        return FieldLogger(self, fields)

    def with_error(self, err: Any) -> "FieldLogger":
        """Return a logger that attaches ``err`` to every entry."""
        return FieldLogger(self, {ERROR_KEY: err})

    def trace(self, message: str, /, **fields: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, **fields)

    def debug(self, message: str, /, **fields: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message: str, /, **fields: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **fields)

    def warn(self, message: str, /, **fields: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, **fields)

    def error(self, message: str, /, **fields: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, **fields)

    def fatal(self, message: str, /, **fields: Any) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, **fields)

    def panic(self, message: str, /, **fields: Any) -> None:
        """Log panic message."""
        self.log(LogLevel.PANIC, message, **fields)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()


class FieldLogger:
    """A logger with fields bound to every entry it logs."""

    def __init__(self, logger: Logger, fields: Dict[str, Any]):
        self._logger = logger
        self.fields = dict(fields)

    def with_fields(self, /, **fields: Any) -> "FieldLogger":
        return FieldLogger(self._logger, {**self.fields, **fields})

    def with_error(self, err: Any) -> "FieldLogger":
        return self.with_fields(**{ERROR_KEY: err})

    def log(self, level: LogLevel, message: str, /, **fields: Any) -> None:
        self._logger.log(level, message, **{**self.fields, **fields})

    def trace(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.TRACE, message, **fields)

    def debug(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.INFO, message, **fields)

    def warn(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.WARN, message, **fields)

    def error(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.ERROR, message, **fields)

    def fatal(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.FATAL, message, **fields)

    def panic(self, message: str, /, **fields: Any) -> None:
        self.log(LogLevel.PANIC, message, **fields)
