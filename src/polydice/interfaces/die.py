"""Rollable Die Protocol Interface.

This module defines the protocols shared by every die in polydice: the
random source a roll consumes and the die contract itself. Dice never own a
source; one is passed into each roll, which keeps dice cheap immutable values
and lets callers supply seeded sources in tests.
"""

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the randomness consumed by a roll.

    ``random.Random`` (and therefore ``random.SystemRandom``) satisfies it.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer in ``[a, b]``, both ends inclusive."""
        ...

    def randrange(self, stop: int) -> int:
        """Return an integer in ``[0, stop)``."""
        ...

    def uniform(self, a: float, b: float) -> float:
        """Return a float between ``a`` and ``b``."""
        ...


@runtime_checkable
class RollableDie(Protocol[T_co]):
    """Protocol for anything that can be rolled.

    Dice may be marked with numbers, letters or arbitrary symbols, so the
    protocol is generic on the type a roll produces.
    """

    def roll(self, rng: RandomSource) -> T_co:
        """Roll the die once using ``rng``.

        Args:
            rng: Source of randomness for this roll only; it is never retained.

        Returns:
            The face that came up
        """
        ...
