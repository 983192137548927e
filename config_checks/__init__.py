"""
Config Checks - Validation helpers for network and name server configuration

Stateless checks for IPv4/IPv6 addresses, CIDR prefixes, natural numbers
and required file contents, plus a configuration line normalizer.
"""

__version__ = "1.0.0"
__author__ = "Config Checks Team"
__description__ = "Validation and normalization helpers for configuration files"

from .config import ConfigError, load_config
from .core.file_checker import (
    FilePatternChecker,
    require_file_contains_any,
    require_profile,
)
from .parsers.line import normalize_line, normalize_lines
from .utils.cidr import is_valid_cidr, is_valid_v4_cidr, is_valid_v6_cidr
from .utils.ipv6 import expand_ipv6, is_valid_ipv6
from .utils.validators import is_natural_number, is_valid_ipv4

__all__ = [
    "ConfigError",
    "load_config",
    "FilePatternChecker",
    "require_file_contains_any",
    "require_profile",
    "normalize_line",
    "normalize_lines",
    "is_valid_cidr",
    "is_valid_v4_cidr",
    "is_valid_v6_cidr",
    "expand_ipv6",
    "is_valid_ipv6",
    "is_natural_number",
    "is_valid_ipv4",
]
