"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from humanize_module.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings. They never
    write anything themselves; the logger writes the returned text.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry

        Raises:
            RenderError: If the entry cannot be rendered
        """
        pass

    def format_bytes(self, entry: LogEntry, encoding: str = "utf-8") -> bytes:
        """Format a log entry and encode the result."""
        return self.format(entry).encode(encoding)

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
