"""Coin flips."""

from __future__ import annotations

from polydice.domain.enums import CoinFace
from polydice.interfaces.die import RandomSource
from polydice.utils.rng import get_rng


def coin_flip(*, rng: RandomSource | None = None) -> CoinFace:
    """Flip a fair coin.

    Args:
        rng: Explicit source to use instead of the thread's default one

    Returns:
        CoinFace.HEADS or CoinFace.TAILS
    """
    source = rng if rng is not None else get_rng()
    draw = source.randrange(2)
    if draw == 0:
        return CoinFace.HEADS
    if draw == 1:
        return CoinFace.TAILS
    raise AssertionError(f"coin flip drew {draw}, expected 0 or 1")
