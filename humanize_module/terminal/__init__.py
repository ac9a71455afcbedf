"""Terminal capability detection"""

from humanize_module.terminal.term_info import TermInfo, get_term_info

__all__ = ["TermInfo", "get_term_info"]
