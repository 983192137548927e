"""
CIDR - Validation of IPv4 and IPv6 network prefixes

Supports full notation ("192.168.1.0/24", "2001:db8::/64") as well as
bare masks ("/24", "/64"). The focus is on the prefix length; IPv6
addresses inside a CIDR only get a colon-group shape check. Use
is_valid_ipv6 for strict address validation.
"""

import re

from .validators import is_valid_ipv4

_V4_BARE_MASK_RE = re.compile(r"/([0-9]{1,2})")
_V4_CIDR_RE = re.compile(r"((?:[0-9]{1,3}\.){3}[0-9]{1,3})/([0-9]{1,2})")

_V6_BARE_MASK_RE = re.compile(r"/([0-9]{1,3})")
_V6_CIDR_RE = re.compile(r"([^/]+)/([0-9]{1,3})")
_V6_SHAPE_RE = re.compile(r"(?:[0-9a-fA-F]{0,4}:){2,7}[0-9a-fA-F]{0,4}")

# Shapes used by is_valid_cidr, tried in order
_DISPATCH_V4_RE = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+/[0-9]+")
_DISPATCH_V6_RE = re.compile(r"(?:[0-9a-fA-F]{0,4}:){2,7}[0-9a-fA-F]{0,4}/[0-9]+")

V4_MAX_PREFIX = 32
V6_MAX_PREFIX = 128


def is_valid_v4_cidr(cidr: str) -> bool:
    """
    Validate IPv4 CIDR notation or a bare IPv4 mask.

    Args:
        cidr: The CIDR to validate (e.g., "10.0.0.1/8" or "/16")

    Returns:
        True if valid, False otherwise

    Example:
        >>> is_valid_v4_cidr("192.168.1.0/24")
        True
        >>> is_valid_v4_cidr("192.168.1.0/33")
        False
    """
    if not isinstance(cidr, str):
        return False

    match = _V4_BARE_MASK_RE.fullmatch(cidr)
    if match:
        mask = match.group(1)
    else:
        match = _V4_CIDR_RE.fullmatch(cidr)
        if not match:
            return False
        address, mask = match.groups()
        if not is_valid_ipv4(address):
            return False

    return int(mask) <= V4_MAX_PREFIX


def is_valid_v6_cidr(cidr: str) -> bool:
    """
    Validate IPv6 CIDR notation or a bare IPv6 mask.

    Args:
        cidr: The CIDR to validate (e.g., "2001:db8::/64" or "/128")

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(cidr, str):
        return False

    match = _V6_BARE_MASK_RE.fullmatch(cidr)
    if match:
        mask = match.group(1)
    else:
        match = _V6_CIDR_RE.fullmatch(cidr)
        if not match:
            return False
        address, mask = match.groups()
        if _V6_SHAPE_RE.fullmatch(address) is None:
            return False

    return int(mask) <= V6_MAX_PREFIX


def is_valid_cidr(value: str) -> bool:
    """
    Detect whether a CIDR is IPv4 or IPv6 and validate it accordingly.

    A bare mask of one or two digits is always judged as IPv4, so "/64"
    is invalid here while "/128" is accepted as an IPv6 mask.

    Args:
        value: The CIDR or bare mask to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(value, str):
        return False

    if _DISPATCH_V4_RE.fullmatch(value):
        return is_valid_v4_cidr(value)
    if _DISPATCH_V6_RE.fullmatch(value):
        return is_valid_v6_cidr(value)
    if _V4_BARE_MASK_RE.fullmatch(value):
        return is_valid_v4_cidr(value)
    if _V6_BARE_MASK_RE.fullmatch(value):
        return is_valid_v6_cidr(value)

    return False
