from __future__ import annotations

import importlib
import importlib.util
import os
import unittest
from collections.abc import Sequence
from unittest import mock


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for array_rand tests")
class ArrayRandTests(unittest.TestCase):
    def test_empty_array_is_absent(self) -> None:
        from phpify import array_rand

        self.assertIsNone(array_rand([]))

    def test_single_element_always_returns_zero(self) -> None:
        from phpify import array_rand

        for _ in range(5):
            self.assertEqual(array_rand(["a"]), 0)

    def test_index_is_within_bounds(self) -> None:
        from phpify import array_rand

        values = ["a", "b", "c"]
        for _ in range(20):
            index = array_rand(values)
            self.assertIsInstance(index, int)
            self.assertGreaterEqual(index, 0)
            self.assertLess(index, len(values))

    def test_every_index_is_reachable(self) -> None:
        import jax

        from phpify import array_rand

        values = ["a", "b", "c"]
        keys = jax.random.split(jax.random.PRNGKey(1234), 200)
        seen = {array_rand(values, key=keys[i]) for i in range(200)}
        self.assertEqual(seen, {0, 1, 2})

    def test_explicit_key_is_reproducible(self) -> None:
        import jax

        from phpify import array_rand

        values = list(range(100))
        key = jax.random.PRNGKey(7)
        self.assertEqual(array_rand(values, key=key), array_rand(values, key=key))

    def test_reset_key_stream_reseeds_from_configured_seed(self) -> None:
        from phpify import rand

        self.addCleanup(rand.reset_key_stream)
        values = list(range(1000))
        with mock.patch.dict(os.environ, {"PHPIFY_RAND_SEED": "1234"}):
            rand.reset_key_stream()
            first = [rand.array_rand(values) for _ in range(5)]
            rand.reset_key_stream()
            second = [rand.array_rand(values) for _ in range(5)]
        self.assertEqual(first, second)

    def test_malformed_seed_fails_on_first_draw_not_on_import(self) -> None:
        import jax

        from phpify import rand
        from phpify.errors import PhpifyValueError

        self.addCleanup(rand.reset_key_stream)
        with mock.patch.dict(os.environ, {"PHPIFY_RAND_SEED": "abc"}):
            rand = importlib.reload(rand)
            with self.assertRaisesRegex(PhpifyValueError, "PHPIFY_RAND_SEED"):
                rand.array_rand([1, 2, 3])
            self.assertIn(rand.array_rand([1, 2, 3], key=jax.random.PRNGKey(0)), {0, 1, 2})

    def test_lengths_beyond_int32_are_rejected(self) -> None:
        from phpify import rand
        from phpify.errors import PhpifyValueError

        class Huge(Sequence):
            def __len__(self) -> int:
                return rand.MAX_RAND_LENGTH + 1

            def __getitem__(self, index):
                return index

        with self.assertRaises(PhpifyValueError):
            rand.array_rand(Huge())

    def test_key_stream_advances_between_draws(self) -> None:
        from phpify import rand

        values = list(range(1000))
        draws = {rand.array_rand(values) for _ in range(10)}
        self.assertGreater(len(draws), 1)


if __name__ == "__main__":
    unittest.main()
