"""Argument validators for the array and string functions."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

from .errors import PhpifyTypeError


def validate_text(value: object, *, where: str = "value") -> str:
    if isinstance(value, str):
        return value
    raise PhpifyTypeError(f"{where} must be str, got {type(value).__name__}")


def validate_integer(value: object, *, where: str = "value") -> int:
    # bool is an int subclass but never a meaningful offset or length.
    if isinstance(value, bool) or not isinstance(value, int):
        raise PhpifyTypeError(f"{where} must be int, got {type(value).__name__}")
    return value


def validate_sequence(value: object, *, where: str = "array") -> Sequence:
    if isinstance(value, (str, bytes, bytearray)):
        raise PhpifyTypeError(f"{where} must be a sequence of elements, not {type(value).__name__}")
    if not isinstance(value, Sequence):
        raise PhpifyTypeError(f"{where} must be a sequence, got {type(value).__name__}")
    return value


def validate_mutable_sequence(value: object, *, where: str = "array") -> MutableSequence:
    if not isinstance(value, MutableSequence):
        raise PhpifyTypeError(f"{where} must be a mutable sequence, got {type(value).__name__}")
    return value


def validate_pieces(value: object, *, where: str = "pieces") -> list[str]:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise PhpifyTypeError(f"{where} must be an iterable of str, got {type(value).__name__}")
    pieces = list(value)
    for idx, item in enumerate(pieces):
        validate_text(item, where=f"{where}[{idx}]")
    return pieces


def validate_callback(value: object, *, where: str = "callback"):
    if not callable(value):
        raise PhpifyTypeError(f"{where} must be callable, got {type(value).__name__}")
    return value
