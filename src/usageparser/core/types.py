"""Type aliases used across the usage parser."""

from __future__ import annotations

from typing import Any, Sequence, Union

JsonDict = dict[str, Any]
RawLine = str
LineInput = Union[RawLine, Sequence[RawLine]]
