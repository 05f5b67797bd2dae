"""Batch entry point — decodes one or many lines with per-line failure isolation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from usageparser.core.exceptions import UsageParserError
from usageparser.core.types import LineInput, RawLine
from usageparser.models.usage_record import UsageRecord
from usageparser.parsing.line_parser import create_parser

logger = logging.getLogger(__name__)


def parse_one(line: RawLine, *, log_level: int = logging.WARNING) -> UsageRecord:
    """Decode a single line, substituting a placeholder record on failure."""
    try:
        return create_parser(line).parse_line()
    except UsageParserError as exc:
        logger.log(log_level, "Skipping parsing of line=%r message=%s", line, exc)
        return UsageRecord.placeholder(str(exc))


def parse(lines: LineInput, *, log_failures: bool = True) -> list[UsageRecord]:
    """Decode a usage line or an ordered sequence of them.

    A single string is treated as a one-element batch. The result has one
    record per input line, in input order; lines that fail carry a non-empty
    ``error`` and null data fields. Never raises for bad lines.

    Each record is built fresh for its line and never touched again by the
    parser, but it is a mutable model: callers that keep merging into a
    returned record own that change.

    Args:
        lines: A raw line or a sequence of raw lines.
        log_failures: Log skipped lines at WARNING (True) or DEBUG (False).
    """
    if isinstance(lines, str) or not isinstance(lines, Iterable):
        lines = [lines]
    log_level = logging.WARNING if log_failures else logging.DEBUG
    return [parse_one(line, log_level=log_level) for line in lines]
