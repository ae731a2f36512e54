"""Structured error types for argument misuse and opt-in absent-result checks."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class PhpifyError(Exception):
    """Base class for structured phpify errors."""


class PhpifyTypeError(PhpifyError, TypeError):
    """Argument of the wrong kind (non-text haystack, non-integer offset, ...)."""


class PhpifyValueError(PhpifyError, ValueError):
    """Argument of the right kind but outside the values a constructor accepts."""


class PhpifyRuntimeError(PhpifyError, RuntimeError):
    """A caller-supplied callback broke an invariant of the running operation."""


class AbsentResultError(PhpifyError, LookupError):
    """Raised by :func:`require` when an operation produced no result."""

    def __init__(self, where: str, message: str | None = None) -> None:
        self.where = where
        super().__init__(message or f"{where} produced no result")


def require(value: T | None, *, where: str, message: str | None = None) -> T:
    """Return ``value`` unchanged, raising :class:`AbsentResultError` if it is None.

    All phpify operations report out-of-range and not-found conditions by
    returning None. Callers that would rather fail loudly wrap the call::

        position = require(strpos(haystack, "World"), where="strpos")
    """
    if value is None:
        raise AbsentResultError(where, message)
    return value
