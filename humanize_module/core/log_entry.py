"""
Log entry data structure

One structured record: timestamp, level, message and key/value fields.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Dict, Any, TextIO

from humanize_module.core.log_level import LogLevel

# Fields stored under this key are rendered on their own line
ERROR_KEY = "error"


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Produced by the logger for every log call and discarded once it has
    been rendered. ``out`` is the sink the rendered text is headed for;
    formatters may inspect it but never write to it.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    fields: Dict[str, Any] = field(default_factory=dict)
    out: Optional[TextIO] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def error(self) -> Optional[Any]:
        """The value bound under the reserved error key, if any."""
        return self.fields.get(ERROR_KEY)

    def has_plain_fields(self) -> bool:
        """True if any field other than the error is present."""
        return any(key != ERROR_KEY for key in self.fields)

    def with_fields(self, **fields: Any) -> "LogEntry":
        """Return a copy of this entry with extra fields merged in."""
        return replace(self, fields={**self.fields, **fields})

    def with_error(self, err: Any) -> "LogEntry":
        """Return a copy of this entry carrying ``err`` as its error."""
        return self.with_fields(**{ERROR_KEY: err})

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": str(self.level),
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "fields": dict(self.fields),
        }
