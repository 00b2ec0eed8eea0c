"""Tests for coin flips."""

import random
from collections import Counter

import pytest

from polydice.domain.coin import coin_flip
from polydice.domain.enums import CoinFace


class FixedSource:
    """Random source whose randrange always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value

    def randint(self, a: int, b: int) -> int:
        return self.value

    def randrange(self, stop: int) -> int:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return float(self.value)


class TestCoinFlip:
    """Tests for coin_flip."""

    def test_flip_1000_coins(self):
        """Test every flip is heads or tails and both come up."""
        results = [coin_flip() for _ in range(1000)]
        assert all(r in (CoinFace.HEADS, CoinFace.TAILS) for r in results)
        assert set(results) == {CoinFace.HEADS, CoinFace.TAILS}

    def test_draw_mapping(self):
        """Test zero maps to heads and one to tails."""
        assert coin_flip(rng=FixedSource(0)) is CoinFace.HEADS
        assert coin_flip(rng=FixedSource(1)) is CoinFace.TAILS

    def test_impossible_draw_is_internal_error(self):
        """Test an out-of-range draw is an invariant violation."""
        with pytest.raises(AssertionError, match="expected 0 or 1"):
            coin_flip(rng=FixedSource(2))

    def test_fair_over_many_flips(self):
        """Test a seeded coin lands about evenly."""
        rng = random.Random(8)
        counts = Counter(coin_flip(rng=rng) for _ in range(20000))
        assert 9500 < counts[CoinFace.HEADS] < 10500

    def test_faces_compare_equal(self):
        """Test coin faces are plain comparable values."""
        assert CoinFace.HEADS == CoinFace("heads")
        assert CoinFace.HEADS != CoinFace.TAILS
        assert str(CoinFace.TAILS) == "tails"
