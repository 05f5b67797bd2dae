"""Usage parser exception hierarchy."""

from __future__ import annotations


class UsageParserError(Exception):
    """Base exception for all usage parsing errors."""


class InvalidInputError(UsageParserError):
    """Raw line does not have the ``<digits>,<payload>`` shape."""

    def __init__(self, line: object) -> None:
        self.line = line
        super().__init__(f"Invalid input. Unable to find id and value in line={line!r}")


class FormatMismatchError(UsageParserError):
    """Extended payload could not be decomposed into its fields."""

    def __init__(self, payload: str) -> None:
        self.payload = payload
        super().__init__(
            f"Invalid input. Unable to match the extended data pattern to the value={payload!r}"
        )


class ConversionError(UsageParserError):
    """A required numeric derivation is impossible."""
