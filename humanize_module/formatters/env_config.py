"""
Formatter selection from the environment

The ``HUMANIZE`` variable picks the output format:
  1. FULL    -> long humanized layout (the default)
  2. COMPACT -> compact humanized layout
  3. JSON    -> the fallback JSON formatter
"""

import os
from typing import Mapping, Optional

from humanize_module.errors import UnrecognizedConfigValueError
from humanize_module.formatters.base_formatter import BaseFormatter
from humanize_module.formatters.humanize_formatter import HumanizeFormatter

HUMANIZE_FORMAT_VAR = "HUMANIZE"
FORMAT_FULL = "FULL"
FORMAT_COMPACT = "COMPACT"
FORMAT_JSON = "JSON"

FORMATS = (FORMAT_FULL, FORMAT_COMPACT, FORMAT_JSON)


def parse_format_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read the output format name from the environment.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        One of FORMAT_FULL, FORMAT_COMPACT, FORMAT_JSON

    Raises:
        UnrecognizedConfigValueError: If the variable is unset or names
                                      no known format
    """
    environ = os.environ if environ is None else environ

    value = environ.get(HUMANIZE_FORMAT_VAR)
    if value is None:
        raise UnrecognizedConfigValueError(
            f"{HUMANIZE_FORMAT_VAR} not set in env, no format value could be read"
        )

    fmt = value.upper()
    if fmt not in FORMATS:
        raise UnrecognizedConfigValueError(f"No such format as {value}", value=value)

    return fmt


def formatter_from_env(environ: Optional[Mapping[str, str]] = None) -> BaseFormatter:
    """
    Build the formatter named by the environment.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        HumanizeFormatter for FULL and COMPACT, its fallback
        formatter for JSON

    Raises:
        UnrecognizedConfigValueError: If the format cannot be read. The
            exception's ``default_formatter`` holds a long-layout
            HumanizeFormatter the caller may carry on with.

    Example:
        try:
            formatter = formatter_from_env()
        except UnrecognizedConfigValueError as e:
            print(e, file=sys.stderr)
            formatter = e.default_formatter
    """
    formatter = HumanizeFormatter()

    try:
        fmt = parse_format_from_env(environ)
    except UnrecognizedConfigValueError as e:
        e.default_formatter = formatter
        raise

    if fmt == FORMAT_JSON:
        return formatter.fallback

    formatter.compact = fmt == FORMAT_COMPACT
    return formatter
