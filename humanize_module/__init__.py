"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Humanize - multi-line, human-readable rendering of structured log entries
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from humanize_module.core.logger import Logger, FieldLogger
from humanize_module.core.log_entry import LogEntry, ERROR_KEY
from humanize_module.core.log_level import LogLevel
from humanize_module.core.formatter_config import FormatterConfig
from humanize_module.errors import (
    HumanizeError,
    TerminalQueryError,
    RenderError,
    UnrecognizedConfigValueError,
)
from humanize_module.formatters import (
    HumanizeFormatter,
    JSONFormatter,
    formatter_from_env,
)

# Import submodules (not all classes by default)
from humanize_module import formatters
from humanize_module import terminal

__all__ = [
    "Logger",
    "FieldLogger",
    "LogEntry",
    "ERROR_KEY",
    "LogLevel",
    "FormatterConfig",
    "HumanizeError",
    "TerminalQueryError",
    "RenderError",
    "UnrecognizedConfigValueError",
    "HumanizeFormatter",
    "JSONFormatter",
    "formatter_from_env",
    "formatters",
    "terminal",
]
