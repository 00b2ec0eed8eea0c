"""Utility functions for rolling polydice dice."""

from polydice.utils.rng import (
    get_rng,
    n_rolls,
    reset_rng,
    roll,
)

__all__ = [
    "get_rng",
    "n_rolls",
    "reset_rng",
    "roll",
]
