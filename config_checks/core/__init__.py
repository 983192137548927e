"""
Core file checks.

This package contains the required-pattern check for configuration files.
"""

from .file_checker import FilePatternChecker, require_file_contains_any, require_profile

__all__ = ["FilePatternChecker", "require_file_contains_any", "require_profile"]
