"""Telecom usage record decoding."""

from __future__ import annotations

from usageparser.models.usage_record import UsageRecord
from usageparser.parsing.batch import parse

__all__ = ["UsageRecord", "parse"]
