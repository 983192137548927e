"""
Validators - Basic input validation for configuration values

This module provides validation functions for natural numbers and IPv4
addresses. All checks are whole-string and ASCII only; invalid input
yields False instead of raising.
"""

import re

_DIGITS_RE = re.compile(r"[0-9]+")
_OCTET_RE = re.compile(r"0|[1-9][0-9]*")


def is_natural_number(value: str) -> bool:
    """
    Check whether a string is a natural number (0, 1, 2, ...).

    Args:
        value: The string to check

    Returns:
        True if value is non-empty and made only of the digits 0-9
    """
    if not isinstance(value, str):
        return False

    return _DIGITS_RE.fullmatch(value) is not None


def is_valid_ipv4(address: str) -> bool:
    """
    Validate IPv4 address.

    The address must have exactly four dot-separated octets, each in the
    range 0-255. Leading zeros are rejected unless the octet is "0".

    Args:
        address: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not address or not isinstance(address, str):
        return False

    octets = address.split(".")
    if len(octets) != 4:
        return False

    return all(_is_valid_octet(octet) for octet in octets)


def _is_valid_octet(octet: str) -> bool:
    # "0" or no leading zero, and at most 255
    if len(octet) > 3 or _OCTET_RE.fullmatch(octet) is None:
        return False

    return int(octet) <= 255
