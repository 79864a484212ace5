"""Tests for gridimport_core.ordering -- fractional sheet ordering keys."""

from __future__ import annotations

import pytest

from gridimport_core.ordering import first_key, key_after, key_between


class TestOrderingKeys:
    def test_first_key(self):
        assert first_key() == "a0"

    def test_key_after_sorts_after(self):
        key = first_key()
        assert key_after(key) > key

    def test_chain_is_strictly_increasing(self):
        keys = [first_key()]
        for _ in range(50):
            keys.append(key_after(keys[-1]))
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)

    def test_between(self):
        low, high = "a0", "a1"
        mid = key_between(low, high)
        assert low < mid < high

    def test_before_open_start(self):
        assert key_between(None, "a0") < "a0"

    @pytest.mark.parametrize("before,after", [("a1", "a0"), ("a0", "a0")])
    def test_invalid_neighbours(self, before, after):
        with pytest.raises(ValueError):
            key_between(before, after)
