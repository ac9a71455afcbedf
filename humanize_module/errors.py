"""
Exception hierarchy for the humanize formatter
"""

from typing import Optional, Any


class HumanizeError(Exception):
    """Base class for all humanize errors."""


class TerminalQueryError(HumanizeError):
    """Probing the output sink for terminal information failed."""


class RenderError(HumanizeError):
    """A log entry could not be rendered to text."""


class UnrecognizedConfigValueError(HumanizeError, ValueError):
    """
    The environment did not name a known output format.

    Carries a usable default formatter so the caller can decide whether
    to continue with it or abort.
    """

    def __init__(self, message: str, value: Optional[str] = None, default_formatter: Any = None):
        super().__init__(message)
        self.value = value
        self.default_formatter = default_formatter
