"""Dice and coins for polydice.

This package hosts the concrete dice:

* :mod:`dice` with the range and face dice plus the standard polyhedral set.
* :mod:`enums` with result types such as :class:`CoinFace`.
* :mod:`coin` with the coin flip.
"""

from . import coin, dice, enums

__all__ = [
    "coin",
    "dice",
    "enums",
]
