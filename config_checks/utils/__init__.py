"""
Utility functions and helpers.

This package contains the address, prefix and number validators and
the logging helpers shared by the checks.
"""

from .cidr import is_valid_cidr, is_valid_v4_cidr, is_valid_v6_cidr
from .ipv6 import expand_ipv6, is_valid_ipv6
from .logging import configure_logging, logger_sink, null_log
from .validators import is_natural_number, is_valid_ipv4

__all__ = [
    "is_valid_cidr",
    "is_valid_v4_cidr",
    "is_valid_v6_cidr",
    "expand_ipv6",
    "is_valid_ipv6",
    "configure_logging",
    "logger_sink",
    "null_log",
    "is_natural_number",
    "is_valid_ipv4",
]
