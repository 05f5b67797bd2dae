"""Non-raising integer conversions shared by every decoder."""

from __future__ import annotations

from typing import Optional

DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

IP_HEX_LENGTH = 8


def parse_optional_int(value: Optional[str], base: int = 10) -> Optional[int]:
    """Parse an unsigned integer string, or return ``None``.

    Only ASCII digits valid for ``base`` (10 or 16) are accepted; empty or
    malformed input degrades to ``None`` rather than raising.
    """
    if not value:
        return None
    allowed = HEX_DIGITS if base == 16 else DECIMAL_DIGITS
    if not all(ch in allowed for ch in value):
        return None
    try:
        return int(value, base)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None


def parse_optional_hex(value: Optional[str]) -> Optional[int]:
    return parse_optional_int(value, 16)


def get_ip(ip_hex: Optional[str]) -> Optional[str]:
    """Decode 8 hex characters into a dotted 4-segment string.

    Each 2-character group is one unsigned byte, kept in order:
    ``c0a80001`` -> ``'192.168.0.1'``. Returns ``None`` unless all four
    groups decode.
    """
    if ip_hex is None or len(ip_hex) != IP_HEX_LENGTH:
        return None
    segments = [parse_optional_hex(ip_hex[i:i + 2]) for i in range(0, IP_HEX_LENGTH, 2)]
    if any(segment is None for segment in segments):
        return None
    return ".".join(str(segment) for segment in segments)


def encode_ip(b0: int, b1: int, b2: int, b3: int) -> str:
    """Inverse of :func:`get_ip`: pack four byte values into 8 hex chars."""
    octets = (b0, b1, b2, b3)
    for octet in octets:
        if not 0 <= octet <= 255:
            raise ValueError(f"IP segment out of range: {octet}")
    return "".join(f"{octet:02x}" for octet in octets)
