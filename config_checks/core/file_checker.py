"""
File Checker - Required pattern checks for configuration files

This module verifies that a file contains every one of a set of literal
patterns, e.g. that a TSIG key file mentions "key", "algorithm" and
"secret" and has its braces and semicolons. Patterns are plain substrings,
not regular expressions, and need not appear on the same line.

Progress is reported through an injected log(level, message) callable.
Without one, nothing is logged.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..config import get_default_config, get_profile
from ..utils.logging import LogFunc, null_log

logger = logging.getLogger(__name__)


class FilePatternChecker:
    """Checks that files contain all required literal patterns."""

    def __init__(self, log: Optional[LogFunc] = None):
        """Initialize checker with an optional log collaborator."""
        self.log = log or null_log

    def check(self, file_path, patterns: Iterable[str]) -> bool:
        """
        Check that a file contains every pattern at least once.

        All patterns are examined even after one is missing, so that each
        missing pattern gets its own log line.

        Args:
            file_path: Path of the file to inspect
            patterns: Literal substrings that must all be present

        Returns:
            True if the file exists and contains every pattern
        """
        path = Path(file_path)

        if not path.is_file():
            self.log("ERROR", f"File not found: {file_path}")
            return False

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.debug(f"Failed to read {file_path}: {e}")
            self.log("ERROR", f"File could not be read: {file_path}: {e}")
            return False

        missing = False
        for pattern in patterns:
            if pattern.encode("utf-8") in content:
                self.log("DEBUG", f"Pattern '{pattern}' found in: {file_path}")
            else:
                self.log(
                    "ERROR",
                    f"Required pattern '{pattern}' not found in file: {file_path}",
                )
                missing = True

        if missing:
            self.log("ERROR", f"One or more required patterns missing in: {file_path}")
            return False

        self.log("INFO", f"All required patterns found in: {file_path}")
        return True


def require_file_contains_any(
    file_path, *patterns: str, log: Optional[LogFunc] = None
) -> bool:
    """
    Check that a file contains all given literal patterns.

    Example:
        require_file_contains_any("/etc/bind/tsig.key", "key", "secret", "{", "}")
    """
    return FilePatternChecker(log).check(file_path, patterns)


def require_profile(
    file_path,
    profile: str,
    config: Optional[Dict] = None,
    log: Optional[LogFunc] = None,
) -> bool:
    """
    Check a file against a named pattern set from configuration.

    Raises:
        ConfigError: If the profile is not defined
    """
    patterns = get_profile(config or get_default_config(), profile)
    logger.debug(f"Checking {file_path} against profile '{profile}'")
    return FilePatternChecker(log).check(file_path, patterns)
