"""Random index selection on top of ``jax.random``.

The generator is a counter-based PRNG and is not suitable for choosing
anything security sensitive.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Sequence
from typing import Final

import jax

from .errors import PhpifyValueError
from .values import validate_sequence

logger = logging.getLogger(__name__)

# jax draws in int32 unless x64 mode is enabled.
MAX_RAND_LENGTH: Final[int] = 2**31 - 1


def _seed_from_env() -> int | None:
    raw = os.environ.get("PHPIFY_RAND_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw) & 0x7FFFFFFF
    except ValueError as err:
        raise PhpifyValueError(f"PHPIFY_RAND_SEED must be an integer, got {raw!r}") from err


_key_lock = threading.Lock()
_key_state: jax.Array | None = None


def _next_key() -> jax.Array:
    global _key_state
    with _key_lock:
        if _key_state is None:
            seed = _seed_from_env()
            if seed is None:
                seed = int.from_bytes(os.urandom(4), "little") & 0x7FFFFFFF
                logger.debug("seeding array_rand key stream from os.urandom")
            else:
                logger.debug("seeding array_rand key stream from PHPIFY_RAND_SEED=%d", seed)
            _key_state = jax.random.PRNGKey(seed)
        _key_state, subkey = jax.random.split(_key_state)
    return subkey


def reset_key_stream() -> None:
    """Forget the module key stream; the next draw reseeds it from the environment."""
    global _key_state
    with _key_lock:
        _key_state = None


def array_rand(array: Sequence, *, key: jax.Array | None = None) -> int | None:
    """Pick a uniformly distributed index of ``array``.

    Returns None for an empty sequence and 0 for a single element without
    drawing. ``key`` makes the draw reproducible and leaves the module key
    stream untouched. Sequences longer than :data:`MAX_RAND_LENGTH` raise
    :class:`~phpify.errors.PhpifyValueError`, since jax draws int32 indices.
    """
    validate_sequence(array, where="array_rand")
    length = len(array)
    if length == 0:
        return None
    if length == 1:
        return 0
    if length > MAX_RAND_LENGTH:
        raise PhpifyValueError(f"array_rand supports at most {MAX_RAND_LENGTH} elements, got {length}")

    if key is None:
        key = _next_key()
    return int(jax.random.randint(key, (), 0, length))
