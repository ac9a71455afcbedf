"""
Formatter configuration management
"""

from dataclasses import dataclass
from datetime import datetime

# ISO-8601, without fractional seconds or zone
DEFAULT_DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Rendering this instant measures how wide a date/time pattern prints
_REFERENCE_TIME = datetime(2006, 1, 2, 15, 4, 5)


@dataclass
class FormatterConfig:
    """
    Humanize formatter configuration.

    Fields may be changed between format calls; the formatter reads them
    on every call.
    """

    # strftime pattern for the header timestamp
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    # Pack fields onto as few lines as the terminal allows
    compact: bool = False
    # Color the level name when writing to a terminal
    colored: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.date_time_format:
            raise ValueError("date_time_format must not be empty")

    @property
    def timestamp_width(self) -> int:
        """Number of characters a timestamp rendered with the pattern takes."""
        return len(_REFERENCE_TIME.strftime(self.date_time_format))

    @classmethod
    def default(cls) -> "FormatterConfig":
        """Create default (long layout) configuration."""
        return cls()

    @classmethod
    def compact_config(cls) -> "FormatterConfig":
        """Create configuration for the compact layout."""
        return cls(compact=True)
