"""Random sources split by synchronization domain.

Draws that must agree between networked participants go through
:class:`SyncedRandom`; one-off local decisions (such as generating hire
candidates, which are stored in the campaign save afterwards) go through
:class:`UnsyncedRandom`. The two are separate types so that code demanding one
domain can reject the other with :func:`require_domain`.
"""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable wrapper around :class:`random.Random`."""

    domain = "base"

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def seed(self, seed: int | None) -> None:
        self._random.seed(seed)

    def int_range(self, minimum: int, maximum: int) -> int:
        """Return an int in ``[minimum, maximum)``; ``minimum`` when the range is empty."""
        if maximum <= minimum:
            return minimum
        return self._random.randrange(minimum, maximum)

    def float_range(self, minimum: float, maximum: float) -> float:
        if maximum <= minimum:
            return minimum
        return self._random.uniform(minimum, maximum)

    def choice(self, items: Sequence[T]) -> T | None:
        if not items:
            return None
        return items[self._random.randrange(len(items))]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T | None:
        pairs = [(item, weight) for item, weight in zip(items, weights) if weight > 0]
        if not pairs:
            return None
        population, cleaned = zip(*pairs)
        return self._random.choices(population, weights=cleaned, k=1)[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SyncedRandom(RandomSource):
    """Draws that every networked participant must reproduce identically."""

    domain = "synced"


class UnsyncedRandom(RandomSource):
    """Local-only draws."""

    domain = "unsynced"


def require_domain(rng: RandomSource, expected: type[RandomSource]) -> RandomSource:
    """Raise ``TypeError`` when ``rng`` belongs to the wrong random domain."""
    if not isinstance(rng, expected):
        raise TypeError(
            f"expected a {expected.__name__} ({expected.domain} domain), "
            f"got {type(rng).__name__}"
        )
    return rng


__all__ = ["RandomSource", "SyncedRandom", "UnsyncedRandom", "require_domain"]
