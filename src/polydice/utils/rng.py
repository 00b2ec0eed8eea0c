"""Default random source and roll drivers for polydice.

Each thread lazily gets its own ``random.Random`` the first time it rolls
without an explicit source, so concurrent callers never share generator
state and no locking is needed. When ``POLYDICE_SEED`` is configured, every
thread's source is seeded from the base seed and the thread's name, which
makes a given thread's sequence reproducible from run to run. Threads that
share a name share a seed, so give rolling threads unique names when a seed
is set.

Examples:
    >>> from polydice.domain.dice import d20
    >>> 1 <= roll(d20()) <= 20
    True

    >>> len(n_rolls(3, d20()))
    3
"""

from __future__ import annotations

import hashlib
import logging
import random
import threading
from typing import TypeVar

from polydice.config import get_settings
from polydice.interfaces.die import RandomSource, RollableDie

logger = logging.getLogger(__name__)

T = TypeVar("T")

_local = threading.local()


def _seed_to_int(seed: str) -> int:
    """Turn ``"{base seed}:{thread name}"`` into a per-thread Random seed.

    Hashing keeps the derived seeds of neighbouring base seeds and similar
    thread names unrelated.

    Args:
        seed: Base seed joined with the thread name

    Returns:
        First 64 bits of SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def _new_rng() -> random.Random:
    base_seed = get_settings().seed
    thread_name = threading.current_thread().name
    if base_seed is None:
        logger.debug("creating default random source for thread %s", thread_name)
        return random.Random()

    logger.debug(
        "creating default random source for thread %s seeded from %d", thread_name, base_seed
    )
    return random.Random(_seed_to_int(f"{base_seed}:{thread_name}"))


def get_rng() -> random.Random:
    """Return the calling thread's default random source, creating it on first use."""

    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = _new_rng()
        _local.rng = rng
    return rng


def reset_rng() -> None:
    """Discard the calling thread's default source.

    The next roll in this thread builds a fresh one from the current settings.
    """

    _local.rng = None


def roll(die: RollableDie[T], *, rng: RandomSource | None = None) -> T:
    """Roll a die once.

    Args:
        die: Any rollable die; it is not consumed and can be rolled again
        rng: Explicit source to use instead of the thread's default one

    Returns:
        The face that came up
    """
    return die.roll(rng if rng is not None else get_rng())


def n_rolls(n: int, die: RollableDie[T], *, rng: RandomSource | None = None) -> list[T]:
    """Roll a die ``n`` times and return every result.

    The source is obtained once and advanced by each roll in turn, so the
    results are in generation order.

    Args:
        n: Number of rolls (zero gives an empty list)
        die: Any rollable die
        rng: Explicit source to use instead of the thread's default one

    Returns:
        List of ``n`` results

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"number of rolls must be non-negative, got {n}")

    source = rng if rng is not None else get_rng()
    return [die.roll(source) for _ in range(n)]
