"""PHP string functions over Python ``str``.

https://www.php.net/manual/en/ref.strings.php

:func:`strlen`, :func:`strpos` and :func:`stripos` work on the UTF-8 encoding:
lengths, offsets and returned positions are byte counts, as in PHP.
:func:`substr` counts characters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .limits import UNBOUNDED, AllButLast, AtMost, Limit, coerce_limit, resolve_offset, resolve_span
from .values import validate_integer, validate_pieces, validate_text

logger = logging.getLogger(__name__)


def explode(delimiter: str, string: str, limit: int | Limit = UNBOUNDED) -> list[str] | None:
    """Split ``string`` on every ``delimiter``.

    ``limit`` is either a :data:`~phpify.limits.Limit` or a PHP-style integer:

    >>> explode("|", "one|two|three", 2)
    ['one', 'two|three']
    >>> explode("|", "one|two|three", -1)
    ['one', 'two']

    Returns None when ``delimiter`` is empty.
    """
    validate_text(delimiter, where="explode delimiter")
    validate_text(string, where="explode string")
    limit = coerce_limit(limit)

    if not delimiter:
        logger.debug("explode called with an empty delimiter")
        return None

    if isinstance(limit, AtMost):
        return string.split(delimiter, limit.count - 1)

    pieces = string.split(delimiter)
    if isinstance(limit, AllButLast):
        if limit.count >= len(pieces):
            return []
        return pieces[: -limit.count]
    return pieces


def implode(glue: str, pieces: Iterable[str]) -> str:
    validate_text(glue, where="implode glue")
    return glue.join(validate_pieces(pieces, where="implode pieces"))


def strlen(string: str) -> int:
    """Length of ``string`` in UTF-8 bytes, not characters."""
    return len(validate_text(string, where="strlen").encode("utf-8"))


def strpos(haystack: str, needle: str, offset: int = 0) -> int | None:
    """Byte position of the first ``needle`` in ``haystack`` at or after ``offset``.

    Both operands are searched in their UTF-8 encoding, so ``offset`` and the
    result are byte counts: ``strpos("äbc", "b")`` is 2. A negative ``offset``
    starts the search that many bytes before the end. The result always counts
    from the start of ``haystack``. Returns None when the needle is missing or
    the offset lies outside the haystack.
    """
    validate_text(haystack, where="strpos haystack")
    validate_text(needle, where="strpos needle")
    validate_integer(offset, where="strpos offset")

    haystack_bytes = haystack.encode("utf-8")
    start = resolve_offset(offset, len(haystack_bytes))
    if start is None:
        logger.debug("strpos offset %d is outside a haystack of %d bytes", offset, len(haystack_bytes))
        return None

    position = haystack_bytes.find(needle.encode("utf-8"), start)
    if position < 0:
        return None
    return position


def stripos(haystack: str, needle: str, offset: int = 0) -> int | None:
    """Case-insensitive :func:`strpos`.

    Both operands are lowercased before searching and the byte position is
    taken in the lowercased haystack. It matches ``haystack`` only when
    lowercasing keeps the UTF-8 length (always true for ASCII; not for e.g.
    ``"İ"``).
    """
    validate_text(haystack, where="stripos haystack")
    validate_text(needle, where="stripos needle")
    return strpos(haystack.lower(), needle.lower(), offset)


def substr(string: str, start: int, length: int | None = None) -> str | None:
    """Return the part of ``string`` given by ``start`` and ``length``.

    Unlike slicing, a zero ``length`` yields None rather than an empty string.
    A negative ``length`` leaves that many characters off the end; None is
    returned if that cut point does not lie after ``start``. ``length=None``
    runs to the end of the string.
    """
    validate_text(string, where="substr string")
    validate_integer(start, where="substr start")
    if length is not None:
        validate_integer(length, where="substr length")

    span = resolve_span(start, length, len(string))
    if span is None:
        logger.debug("substr(start=%d, length=%s) is outside a string of length %d", start, length, len(string))
        return None
    begin, end = span
    return string[begin:end]


def ucfirst(string: str) -> str:
    """Uppercase the first character of ``string``.

    Characters whose uppercase form is longer (``"ß"`` becomes ``"SS"``)
    are expanded.
    """
    validate_text(string, where="ucfirst")
    if not string:
        return string
    return string[0].upper() + string[1:]


def lcfirst(string: str) -> str:
    validate_text(string, where="lcfirst")
    if not string:
        return string
    return string[0].lower() + string[1:]
