"""Line parser — splits ``<id>,<payload>`` and dispatches on the id's last digit.

- ids ending in 4 use the extended scheme
- ids ending in 6 use the hex scheme
- every other id uses the basic scheme
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from usageparser.core.exceptions import InvalidInputError
from usageparser.core.types import JsonDict, RawLine
from usageparser.models.usage_record import UsageRecord
from usageparser.parsing.conversions import DECIMAL_DIGITS
from usageparser.parsing.decoders import LINE_BREAKS, decode_basic, decode_extended, decode_hex

Decoder = Callable[[str], JsonDict]

DECODERS_BY_LAST_DIGIT: dict[str, Decoder] = {
    "4": decode_extended,
    "6": decode_hex,
}
DEFAULT_DECODER: Decoder = decode_basic


@dataclass(frozen=True)
class ParseContext:
    """Id and raw payload of one line, alive for a single decode."""

    id: int
    payload: str


def split_line(line: RawLine) -> ParseContext:
    """Split a raw line on its first comma.

    The id must be one or more ASCII digits. The payload runs up to the first
    line break and must not be empty.

    Raises:
        InvalidInputError: If the line does not have that shape.
    """
    if not isinstance(line, str):
        raise InvalidInputError(line)
    id_str, sep, rest = line.partition(",")
    if not sep or not id_str or not all(ch in DECIMAL_DIGITS for ch in id_str):
        raise InvalidInputError(line)

    end = next((i for i, ch in enumerate(rest) if ch in LINE_BREAKS), len(rest))
    payload = rest[:end]
    if not payload:
        raise InvalidInputError(line)
    try:
        line_id = int(id_str)
    except ValueError as exc:
        raise InvalidInputError(line) from exc
    return ParseContext(id=line_id, payload=payload)


def select_decoder(last_digit: str) -> Decoder:
    return DECODERS_BY_LAST_DIGIT.get(last_digit, DEFAULT_DECODER)


class LineParser:
    """Decodes one usage line into a :class:`UsageRecord`."""

    def __init__(self, line: RawLine) -> None:
        self.context = split_line(line)
        self.record = UsageRecord.create({"id": self.context.id})

    @property
    def payload(self) -> str:
        return self.context.payload

    def last_digit_of_id(self) -> str:
        return self.record.last_digit_of_id()

    def parse_line(self) -> UsageRecord:
        decoder = select_decoder(self.last_digit_of_id())
        return self.record.merge(decoder(self.payload))


def create_parser(line: RawLine) -> LineParser:
    return LineParser(line)
