"""
Shared pseudo-random source for Markovian walks.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """
    Minimal random source used by the walk generator.

    :class:`random.Random` satisfies this protocol.
    """

    def randrange(self, stop: int) -> int:
        """
        Return a uniform random integer in ``[0, stop)``.

        :param stop: Exclusive upper bound.
        :type stop: int
        :return: Random integer.
        :rtype: int
        """
        ...


_SHARED_RANDOM = random.Random()


def seed_random(seed: Optional[int]) -> None:
    """
    Reseed the process-wide random source.

    :param seed: Seed value, or None to seed from operating system entropy.
    :type seed: int or None
    :return: None.
    :rtype: None
    """
    _SHARED_RANDOM.seed(seed)


def get_random() -> random.Random:
    """
    Return the process-wide random source.

    :return: Shared random generator.
    :rtype: random.Random
    """
    return _SHARED_RANDOM


def resolve_random(rng: Optional[RandomSource]) -> RandomSource:
    """
    Resolve an optional injected random source.

    :param rng: Injected source, or None for the shared source.
    :type rng: RandomSource or None
    :return: Random source to draw from.
    :rtype: RandomSource
    """
    return _SHARED_RANDOM if rng is None else rng
