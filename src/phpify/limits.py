"""Split limits and the offset/length normalization shared by the string functions.

PHP encodes three different requests in the single integer ``limit`` argument
of ``explode``: ``0``/``1`` mean "do not split", positive values cap the number
of pieces and negative values drop pieces from the end. :data:`Limit` names
those cases explicitly; :func:`coerce_limit` maps PHP integers onto them so
callers may keep passing plain ints.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final, Union

from .errors import PhpifyTypeError, PhpifyValueError
from .values import validate_integer


@dataclass(frozen=True)
class Unbounded:
    """Split on every occurrence of the delimiter."""


@dataclass(frozen=True)
class AtMost:
    """Return at most ``count`` pieces; the last one holds the unsplit rest."""

    count: int

    def __post_init__(self) -> None:
        validate_integer(self.count, where="AtMost.count")
        if self.count < 1:
            raise PhpifyValueError("AtMost.count must be at least 1")


@dataclass(frozen=True)
class AllButLast:
    """Split fully, then drop the last ``count`` pieces."""

    count: int

    def __post_init__(self) -> None:
        validate_integer(self.count, where="AllButLast.count")
        if self.count < 1:
            raise PhpifyValueError("AllButLast.count must be at least 1")


Limit = Union[Unbounded, AtMost, AllButLast]

UNBOUNDED: Final[Unbounded] = Unbounded()


def coerce_limit(value: int | Limit) -> Limit:
    if isinstance(value, (Unbounded, AtMost, AllButLast)):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise PhpifyTypeError(f"limit must be int or Limit, got {type(value).__name__}")
    if value >= sys.maxsize:
        return UNBOUNDED
    if value < 0:
        return AllButLast(-value)
    return AtMost(max(value, 1))


def resolve_offset(offset: int, size: int) -> int | None:
    """Normalize a search offset against a text of ``size`` bytes.

    Non-negative offsets are used as-is and may equal ``size``; negative offsets
    count back from the end. Returns None when the offset falls outside
    ``[-size, size]``.
    """
    if offset > size:
        return None
    if offset < 0:
        if offset < -size:
            return None
        offset += size
    return offset


def resolve_span(start: int, length: int | None, size: int) -> tuple[int, int] | None:
    """Turn ``substr``-style ``start``/``length`` into ``(begin, end)`` slice bounds.

    Returns None for a positive start at or past the end, for a zero length,
    and for a negative length whose truncation point does not lie after the
    start. A negative start is clamped to the beginning of the text.
    """
    if start > 0 and start >= size:
        return None
    if length == 0:
        return None

    if start < 0:
        start = max(size + start, 0)

    if length is None:
        return start, size
    if length < 0:
        boundary = size + length
        if start >= boundary:
            return None
        return start, boundary
    return start, min(start + length, size)
