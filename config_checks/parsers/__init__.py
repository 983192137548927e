"""
Parsers for configuration text.
"""

from .line import normalize_line, normalize_lines

__all__ = ["normalize_line", "normalize_lines"]
