"""
Log formatters module

Provides the humanized formatter, its JSON fallback and environment-driven
selection between them.
"""

from humanize_module.formatters.base_formatter import BaseFormatter
from humanize_module.formatters.json_formatter import JSONFormatter
from humanize_module.formatters.humanize_formatter import HumanizeFormatter
from humanize_module.formatters.env_config import (
    HUMANIZE_FORMAT_VAR,
    FORMAT_FULL,
    FORMAT_COMPACT,
    FORMAT_JSON,
    parse_format_from_env,
    formatter_from_env,
)

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "HumanizeFormatter",
    "HUMANIZE_FORMAT_VAR",
    "FORMAT_FULL",
    "FORMAT_COMPACT",
    "FORMAT_JSON",
    "parse_format_from_env",
    "formatter_from_env",
]
