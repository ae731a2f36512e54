"""phpify public API: PHP array and string built-ins for Python."""

from .array import array_pop, array_push, array_search, array_shift, array_unique, array_unshift, array_walk
from .errors import (
    AbsentResultError,
    PhpifyError,
    PhpifyRuntimeError,
    PhpifyTypeError,
    PhpifyValueError,
    require,
)
from .limits import UNBOUNDED, AllButLast, AtMost, Limit, Unbounded, coerce_limit
from .string import explode, implode, lcfirst, stripos, strlen, strpos, substr, ucfirst

try:
    from .rand import array_rand
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def array_rand(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for array_rand(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "array_pop",
    "array_push",
    "array_rand",
    "array_search",
    "array_shift",
    "array_unique",
    "array_unshift",
    "array_walk",
    "explode",
    "implode",
    "lcfirst",
    "stripos",
    "strlen",
    "strpos",
    "substr",
    "ucfirst",
    "Limit",
    "Unbounded",
    "AtMost",
    "AllButLast",
    "UNBOUNDED",
    "coerce_limit",
    "require",
    "PhpifyError",
    "PhpifyTypeError",
    "PhpifyValueError",
    "PhpifyRuntimeError",
    "AbsentResultError",
]
