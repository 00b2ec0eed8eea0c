"""Protocol-based interfaces for polydice.

This module exports the die and random-source protocols, providing a clear
contract for die implementations and enabling dependency injection of
randomness in tests.
"""

from polydice.interfaces.die import RandomSource, RollableDie

__all__ = [
    "RandomSource",
    "RollableDie",
]
