"""Usage Record — the value bag every decoder merges its fields into.

All known fields default to ``None``. Decoders only overwrite the fields their
scheme defines; unknown keys are accepted and kept as extra fields.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from usageparser.core.exceptions import ConversionError
from usageparser.core.types import JsonDict


class UsageRecord(BaseModel):
    """Decoded fields of a single usage line."""

    id: Optional[int] = None
    dmcc: Optional[str] = None
    ip: Optional[str] = None  # dotted, e.g. "192.168.0.1"
    mnc: Optional[int] = None
    bytes_used: Optional[int] = None
    cellid: Optional[int] = None

    # Set only on line-level failure
    error: Optional[str] = None

    model_config = {"extra": "allow"}

    @classmethod
    def create(cls, fields: Mapping[str, Any] | None = None) -> UsageRecord:
        """Build an all-null record and overlay ``fields`` on it."""
        return cls().merge(fields)

    @classmethod
    def placeholder(cls, message: str) -> UsageRecord:
        """Record standing in for a line that could not be decoded."""
        return cls.create({"error": message or "Unable to parse line"})

    def merge(self, fields: Mapping[str, Any] | None) -> UsageRecord:
        """Overwrite matching keys and add unknown ones, in place.

        Values are stored as given; decoders have already converted them.
        """
        if fields:
            for key, value in fields.items():
                setattr(self, key, value)
        return self

    def last_digit_of_id(self) -> str:
        """Final character of the decimal form of ``id``."""
        value = self.id
        if isinstance(value, bool) or value is None:
            raise ConversionError(f"Cannot take last digit of id={value!r}")
        if isinstance(value, int):
            id_str = str(abs(value) % 10)
        elif isinstance(value, str) and value.isascii() and value.isdigit():
            id_str = value
        else:
            raise ConversionError(f"Cannot take last digit of id={value!r}")
        return id_str[-1]

    @property
    def extra_fields(self) -> JsonDict:
        return dict(self.model_extra or {})

    @property
    def failed(self) -> bool:
        return isinstance(self.error, str) and self.error != ""

    def to_dict(self) -> JsonDict:
        """Flat field-name to value-or-null mapping for JSON encoding.

        ``error`` is present only on failed lines.
        """
        data: JsonDict = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name != "error"
        }
        data.update(self.extra_fields)
        if self.error is not None:
            data["error"] = self.error
        return data
