"""
JSON formatter for structured logging

Used when no human is reading: formats log entries as one JSON object
per line, with fields at the top level.
"""

import json
from typing import Any, Dict

from humanize_module.core.log_entry import LogEntry, ERROR_KEY
from humanize_module.errors import RenderError
from humanize_module.formatters.base_formatter import BaseFormatter

# Keys the formatter writes itself; clashing fields are prefixed
RESERVED_KEYS = ("time", "level", "msg")


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        timestamp_format: str = None,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            timestamp_format: strftime pattern (None for ISO-8601)
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.timestamp_format = timestamp_format
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string

        Raises:
            RenderError: If a field value cannot be serialized
        """
        log_dict: Dict[str, Any] = {}

        for key, value in entry.fields.items():
            if key == ERROR_KEY:
                # Exceptions are not JSON serializable; keep their message
                value = str(value)
            if key in RESERVED_KEYS:
                key = f"fields.{key}"
            log_dict[key] = value

        if self.timestamp_format:
            log_dict["time"] = entry.timestamp.strftime(self.timestamp_format)
        else:
            log_dict["time"] = entry.timestamp.isoformat()
        log_dict["level"] = str(entry.level)
        log_dict["msg"] = entry.message

        try:
            return json.dumps(
                log_dict,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                default=str,
                sort_keys=True,
            )
        except (TypeError, ValueError) as e:
            raise RenderError(f"Failed to marshal fields to JSON: {e}") from e

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
