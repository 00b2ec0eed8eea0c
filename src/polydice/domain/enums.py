"""Enumerations for polydice results."""

from __future__ import annotations

from enum import StrEnum


class CoinFace(StrEnum):
    """The two sides of a flipped coin."""

    HEADS = "heads"
    TAILS = "tails"
