"""
IPv6 - Strict IPv6 address validation and expansion

This module validates textual IPv6 addresses (RFC 4291 forms with at most
one "::" zero compression) and expands them to their canonical full form.

Zone identifiers (fe80::1%eth0), CIDR suffixes (2001:db8::/64) and bracket
framing ([2001:db8::1]) are always rejected; callers strip such framing
before validating. Addresses ending in a dotted quad (::ffff:192.0.2.1)
are only accepted when allow_ipv4_mapped is set; the leading hextets may
be compressed (2001:db8::192.0.2.1). Pure hex addresses that start with
::ffff: (::ffff:1) are ordinary IPv6 addresses and need no flag.
"""

import re
from typing import List, Optional, Tuple

from .validators import is_valid_ipv4

_HEXTET_RE = re.compile(r"[0-9a-fA-F]{1,4}")

HEXTET_COUNT = 8


def is_valid_ipv6(address: str, allow_ipv4_mapped: bool = False) -> bool:
    """
    Validate IPv6 address.

    Args:
        address: The IPv6 address to validate
        allow_ipv4_mapped: Accept an embedded IPv4 tail such as
            ::ffff:192.0.2.128

    Returns:
        True if valid, False otherwise

    Example:
        >>> is_valid_ipv6("2001:db8::1")
        True
        >>> is_valid_ipv6("::ffff:192.0.2.128")
        False
        >>> is_valid_ipv6("::ffff:192.0.2.128", allow_ipv4_mapped=True)
        True
    """
    return _split_address(address, allow_ipv4_mapped) is not None


def expand_ipv6(address: str, allow_ipv4_mapped: bool = False) -> Optional[str]:
    """
    Expand an IPv6 address to eight zero-padded hextets.

    The hextets omitted by "::" are inserted as "0000". Hex digit case is
    kept as given; an embedded IPv4 tail is converted to two hextets.

    Args:
        address: The IPv6 address to expand
        allow_ipv4_mapped: Accept an embedded IPv4 tail

    Returns:
        The expanded address, or None if the address is not valid

    Example:
        >>> expand_ipv6("2001:db8::1")
        '2001:0db8:0000:0000:0000:0000:0000:0001'
    """
    parts = _split_address(address, allow_ipv4_mapped)
    if parts is None:
        return None

    head, tail = parts
    if tail is None:
        hextets = head
    else:
        missing = HEXTET_COUNT - (len(head) + len(tail))
        hextets = head + ["0"] * missing + tail

    return ":".join(hextet.zfill(4) for hextet in hextets)


def _split_address(
    address: str, allow_ipv4_mapped: bool
) -> Optional[Tuple[List[str], Optional[List[str]]]]:
    """
    Split an address into the hextets left and right of "::".

    Returns:
        (head, tail) where tail is None when the address has no "::",
        or None if the address is invalid
    """
    if not address or not isinstance(address, str):
        return None

    # Zone index, CIDR suffix and brackets belong to the caller
    if "%" in address or "/" in address:
        return None
    if address.startswith("[") or address.endswith("]"):
        return None

    body = _replace_ipv4_tail(address, allow_ipv4_mapped)
    if body is None:
        return None

    compressions = body.count("::")
    if compressions > 1:
        return None

    if compressions == 1:
        head_text, tail_text = body.split("::")
        head = head_text.split(":") if head_text else []
        tail = tail_text.split(":") if tail_text else []
        # "::" has to stand for at least one hextet
        if len(head) + len(tail) > HEXTET_COUNT - 1:
            return None
    else:
        head = body.split(":")
        tail = None
        if len(head) != HEXTET_COUNT:
            return None

    segments = head + (tail or [])
    if not all(_HEXTET_RE.fullmatch(segment) for segment in segments):
        return None

    return head, tail


def _replace_ipv4_tail(address: str, allow_ipv4_mapped: bool) -> Optional[str]:
    """Rewrite a trailing dotted quad as two hextets, or None if not allowed."""
    if ":" not in address:
        return None

    prefix, last = address.rsplit(":", 1)
    if "." not in last:
        return address

    if not allow_ipv4_mapped or not is_valid_ipv4(last):
        return None

    octets = [int(octet) for octet in last.split(".")]
    high = (octets[0] << 8) | octets[1]
    low = (octets[2] << 8) | octets[3]
    return f"{prefix}:{high:x}:{low:x}"
