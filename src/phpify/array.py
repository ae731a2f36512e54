"""PHP array functions over Python lists.

https://www.php.net/manual/en/ref.array.php
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

from .errors import PhpifyRuntimeError
from .values import validate_callback, validate_mutable_sequence, validate_sequence

T = TypeVar("T")


def array_pop(array: MutableSequence[T]) -> T | None:
    """Pop the element off the end of ``array``; None if it is empty."""
    validate_mutable_sequence(array, where="array_pop")
    if not array:
        return None
    return array.pop()


def array_push(array: MutableSequence[T], value: T) -> None:
    validate_mutable_sequence(array, where="array_push")
    array.append(value)


def array_shift(array: MutableSequence[T]) -> T | None:
    """Shift the first element off ``array``; None if it is empty."""
    validate_mutable_sequence(array, where="array_shift")
    if not array:
        return None
    return array.pop(0)


def array_unshift(array: MutableSequence[T], value: T) -> None:
    validate_mutable_sequence(array, where="array_unshift")
    array.insert(0, value)


def array_search(needle: T, haystack: Sequence[T]) -> int | None:
    """Index of the first element of ``haystack`` equal to ``needle``, or None."""
    validate_sequence(haystack, where="array_search")
    for idx, candidate in enumerate(haystack):
        if candidate == needle:
            return idx
    return None


def array_unique(array: Sequence[T]) -> list[T]:
    """Drop repeated values, keeping the first occurrence of each.

    The result holds the original element objects. Elements only need to
    support ``==``, so unhashable values such as lists are accepted.
    """
    validate_sequence(array, where="array_unique")
    out: list[T] = []
    for value in array:
        if not any(existing == value for existing in out):
            out.append(value)
    return out


def array_walk(array: MutableSequence[T], callback: Callable[[T, int], T | None]) -> None:
    """Apply ``callback(value, index)`` to every element of ``array`` in order.

    A non-None return value replaces the element at that index; returning None
    leaves the slot alone, so callbacks that mutate elements in place need not
    return anything. The callback must not add or remove elements.

    Any non-None result is stored, including the return value of an in-place
    method: ``lambda row, i: row.pop()`` replaces each row with its popped
    item, and ``lambda d, i: d.setdefault("k", i)`` replaces each dict with
    the value. Such callbacks should mutate in a statement and return None.
    For the same reason a callback cannot store None in a slot.
    """
    validate_mutable_sequence(array, where="array_walk")
    validate_callback(callback, where="array_walk callback")

    size = len(array)
    for idx in range(size):
        replacement = callback(array[idx], idx)
        if len(array) != size:
            raise PhpifyRuntimeError(
                f"array_walk callback changed the array length from {size} to {len(array)} at index {idx}"
            )
        if replacement is not None:
            array[idx] = replacement
