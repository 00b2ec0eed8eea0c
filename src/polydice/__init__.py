"""Simulated die rolls and coin flips for tabletop-style probability modelling."""

from polydice.domain.coin import coin_flip
from polydice.domain.dice import (
    STANDARD_DICE,
    DieConstructionError,
    GenericDie,
    RangeDie,
    d2,
    d4,
    d6,
    d8,
    d10,
    d12,
    d20,
    d100,
    n_sided,
)
from polydice.domain.enums import CoinFace
from polydice.interfaces import RandomSource, RollableDie
from polydice.utils.rng import get_rng, n_rolls, reset_rng, roll

__all__ = [
    "STANDARD_DICE",
    "CoinFace",
    "DieConstructionError",
    "GenericDie",
    "RandomSource",
    "RangeDie",
    "RollableDie",
    "coin_flip",
    "d2",
    "d4",
    "d6",
    "d8",
    "d10",
    "d12",
    "d20",
    "d100",
    "get_rng",
    "n_rolls",
    "n_sided",
    "reset_rng",
    "roll",
]
