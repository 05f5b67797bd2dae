"""Per-scheme payload decoders.

Each decoder takes the payload (the line without its ``<id>,`` prefix) and
returns only the fields its scheme defines, ready to merge into a
:class:`~usageparser.models.usage_record.UsageRecord`.

- basic:    ``<bytes_used>``
- extended: ``<dmcc>,<mnc>,<bytes_used>,<cellid>``
- hex:      24 hex chars, ``mnc(2B) bytes_used(2B) cellid(4B) ip(4B)``
"""

from __future__ import annotations

from typing import Optional

from usageparser.core.exceptions import FormatMismatchError
from usageparser.core.types import JsonDict
from usageparser.parsing.conversions import (
    DECIMAL_DIGITS,
    get_ip,
    parse_optional_hex,
    parse_optional_int,
)

LINE_BREAKS = frozenset("\n\r\u2028\u2029")

EXTENDED_NUMERIC_FIELDS = 3

# (start, end) hex-character offsets within the hex payload
HEX_MNC = (0, 4)
HEX_BYTES_USED = (4, 8)
HEX_CELLID = (8, 16)
HEX_IP = (16, 24)


def decode_basic(payload: str) -> JsonDict:
    return {"bytes_used": parse_optional_int(payload)}


def _numeric_tail(tail: str) -> Optional[list[str]]:
    """Split ``tail`` into exactly three numeric groups, or ``None``.

    Accepted shape: optional leading comma, then at most three digit runs
    separated by single commas. Missing trailing groups are empty strings.
    """
    body = tail[1:] if tail.startswith(",") else tail
    groups = body.split(",")
    if len(groups) > EXTENDED_NUMERIC_FIELDS:
        return None
    if not all(ch in DECIMAL_DIGITS for group in groups for ch in group):
        return None
    return groups + [""] * (EXTENDED_NUMERIC_FIELDS - len(groups))


def _tail_start(payload: str) -> int:
    """Index where the shortest-prefix ``dmcc`` ends, found in one right-to-left pass.

    Every valid tail lies inside the longest suffix of digits and at most
    three commas. With three commas the tail has to open with the first one.
    """
    start = len(payload)
    commas = 0
    while start > 0:
        ch = payload[start - 1]
        if ch == ",":
            if commas == EXTENDED_NUMERIC_FIELDS:
                break
            commas += 1
        elif ch not in DECIMAL_DIGITS:
            break
        start -= 1
    if commas == EXTENDED_NUMERIC_FIELDS and not payload.startswith(",", start):
        start = payload.index(",", start)
    return start


def split_extended(payload: str) -> tuple[str, str, str, str]:
    """Tokenize an extended payload into ``(dmcc, mnc, bytes_used, cellid)``.

    ``dmcc`` is the shortest prefix whose remainder is a valid numeric tail,
    so it keeps any embedded text. Numeric groups are raw strings, possibly
    empty.

    Raises:
        FormatMismatchError: If the payload spans more than one line.
    """
    if any(ch in LINE_BREAKS for ch in payload):
        raise FormatMismatchError(payload)

    start = _tail_start(payload)
    groups = _numeric_tail(payload[start:])
    if groups is None:
        raise FormatMismatchError(payload)
    mnc, bytes_used, cellid = groups
    return payload[:start], mnc, bytes_used, cellid


def decode_extended(payload: str) -> JsonDict:
    dmcc, mnc, bytes_used, cellid = split_extended(payload)
    return {
        "dmcc": dmcc,
        "mnc": parse_optional_int(mnc),
        "bytes_used": parse_optional_int(bytes_used),
        "cellid": parse_optional_int(cellid),
    }


def _hex_slice(payload: str, offsets: tuple[int, int]) -> str:
    start, end = offsets
    return payload[start:end]


def decode_hex(payload: str) -> JsonDict:
    """Decode the fixed-layout hex payload; characters past 24 are ignored.

    Short payloads leave the missing fields ``None``.
    """
    return {
        "mnc": parse_optional_hex(_hex_slice(payload, HEX_MNC)),
        "bytes_used": parse_optional_hex(_hex_slice(payload, HEX_BYTES_USED)),
        "cellid": parse_optional_hex(_hex_slice(payload, HEX_CELLID)),
        "ip": get_ip(_hex_slice(payload, HEX_IP)),
    }
