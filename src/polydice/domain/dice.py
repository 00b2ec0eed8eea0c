"""Die implementations and the standard polyhedral dice.

Two dice satisfy :class:`~polydice.interfaces.die.RollableDie`:

* :class:`RangeDie` covers every value of an inclusive numeric interval.
* :class:`GenericDie` covers an explicit list of faces. Faces may repeat,
  which is how "averaging" dice and other lopsided dice are expressed
  without a weighted sampler.

Both are frozen values; rolling never mutates or consumes them.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from polydice.interfaces.die import RandomSource

T = TypeVar("T")
N = TypeVar("N", int, float)


class DieConstructionError(ValueError):
    """Raised when a die cannot be built from the given arguments."""


def _check_bound(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be an int or float, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise DieConstructionError(f"{name} must be finite, got {value}")


@dataclass(frozen=True, slots=True)
class RangeDie(Generic[N]):
    """A die whose faces are numbered ``min_val..max_val`` inclusive.

    Integer bounds give a classic numbered die. Float bounds give a
    continuous uniform draw over the closed interval.
    """

    min_val: N
    max_val: N

    def __post_init__(self) -> None:
        _check_bound("min_val", self.min_val)
        _check_bound("max_val", self.max_val)
        if self.min_val > self.max_val:
            raise DieConstructionError(
                f"min_val ({self.min_val}) cannot be greater than max_val ({self.max_val})"
            )
        if not self.is_integral:
            try:
                width = float(self.max_val) - float(self.min_val)
            except OverflowError:
                raise DieConstructionError(
                    f"bounds of a float die must fit in a float, got {self.min_val}..{self.max_val}"
                ) from None
            if not math.isfinite(width):
                raise DieConstructionError(
                    f"range {self.min_val}..{self.max_val} is too wide to sample uniformly"
                )

    @classmethod
    def new(cls, min_val: N, max_val: N) -> RangeDie[N]:
        """Create a die with the given minimum and maximum values."""

        return cls(min_val, max_val)

    @property
    def is_integral(self) -> bool:
        """Whether both bounds are integers, so the die has countable faces."""

        return isinstance(self.min_val, int) and isinstance(self.max_val, int)

    @property
    def faces(self) -> tuple[int, ...]:
        """Every reachable value of an integer die, in ascending order."""

        if not self.is_integral:
            raise TypeError("a die with float bounds has no countable faces")
        return tuple(range(self.min_val, self.max_val + 1))

    def roll(self, rng: RandomSource) -> N:
        """Roll the die once.

        Integer dice draw with ``randint``, which includes both bounds.

        Args:
            rng: Source of randomness for this roll

        Returns:
            A value in ``[min_val, max_val]``
        """
        if self.is_integral:
            return rng.randint(self.min_val, self.max_val)

        value = rng.uniform(float(self.min_val), float(self.max_val))
        # uniform() may round past the upper bound
        return min(max(value, self.min_val), self.max_val)

    def __len__(self) -> int:
        if not self.is_integral:
            raise TypeError("a die with float bounds has no countable faces")
        return self.max_val - self.min_val + 1

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.is_integral and not isinstance(value, int):
            return False
        return self.min_val <= value <= self.max_val


@dataclass(frozen=True, slots=True)
class GenericDie(Generic[T]):
    """A die with arbitrary data or symbols on its faces.

    Faces need not be unique. A face listed twice is twice as likely to come
    up, e.g. the averaging die ``GenericDie.new_from([2, 3, 3, 4, 4, 5])``.

    Examples:
        >>> import random
        >>> abc = GenericDie.new_from("abc")
        >>> abc.roll(random.Random(1)) in "abc"
        True
    """

    faces: tuple[T, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.faces, tuple):
            object.__setattr__(self, "faces", tuple(self.faces))
        if not self.faces:
            raise DieConstructionError("a die needs at least one face")

    @classmethod
    def new_from(cls, faces: Iterable[T]) -> GenericDie[T]:
        """Create a die from the possible results of a roll, in order.

        Args:
            faces: Face values; duplicates are kept

        Returns:
            A die over exactly those faces

        Raises:
            DieConstructionError: If ``faces`` is empty
        """
        return cls(tuple(faces))

    def roll(self, rng: RandomSource) -> T:
        """Pick one face at random; every position is equally likely.

        Args:
            rng: Source of randomness for this roll

        Returns:
            A shallow copy of the chosen face
        """
        index = rng.randrange(len(self.faces))
        return copy.copy(self.faces[index])

    def __len__(self) -> int:
        return len(self.faces)

    def __contains__(self, value: object) -> bool:
        return value in self.faces


def n_sided(n: int) -> RangeDie[int]:
    """Create an n-sided die numbered 1..n inclusive.

    Results are plain signed ints so they can be used directly in
    calculations that may go negative after bonuses or penalties.

    Args:
        n: Number of sides

    Returns:
        Die over ``[1, n]``

    Raises:
        DieConstructionError: If n is less than 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"number of sides must be an int, got {type(n).__name__}")
    if n < 1:
        raise DieConstructionError(f"Invalid number of sides for a die: {n}")
    return RangeDie(1, n)


def d100() -> RangeDie[int]:
    """Percentile die."""
    return n_sided(100)


def d20() -> RangeDie[int]:
    return n_sided(20)


def d12() -> RangeDie[int]:
    return n_sided(12)


def d10() -> RangeDie[int]:
    return n_sided(10)


def d8() -> RangeDie[int]:
    return n_sided(8)


def d6() -> RangeDie[int]:
    return n_sided(6)


def d4() -> RangeDie[int]:
    return n_sided(4)


def d2() -> RangeDie[int]:
    """Two-sided die, a coin flip with a numeric value (1 or 2)."""
    return n_sided(2)


STANDARD_DICE = {
    "d2": d2,
    "d4": d4,
    "d6": d6,
    "d8": d8,
    "d10": d10,
    "d12": d12,
    "d20": d20,
    "d100": d100,
}
