"""
Core module for the humanize formatter

This module contains the fundamental classes:
- Logger: Minimal host logger that owns the output sink
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- FormatterConfig: Formatter configuration
"""

from humanize_module.core.log_entry import LogEntry, ERROR_KEY
from humanize_module.core.log_level import LogLevel
from humanize_module.core.formatter_config import FormatterConfig
from humanize_module.core.logger import Logger, FieldLogger

__all__ = ["Logger", "FieldLogger", "LogEntry", "ERROR_KEY", "LogLevel", "FormatterConfig"]
