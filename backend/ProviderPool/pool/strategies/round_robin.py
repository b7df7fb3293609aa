"""Round-robin selection over the current available set."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy


class RoundRobinStrategy(BaseSelectionStrategy):
    """
    Rotate through available providers with a single cursor.

    The cursor indexes into whatever the available set is at call time,
    not a fixed provider ordering. When providers become unavailable
    or come back between calls, the next pick can skip or repeat one.
    """

    strategy = SelectionStrategy.ROUND_ROBIN

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self._cursor = 0

    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        index = self._cursor % len(available)
        self._cursor = (self._cursor + 1) % len(available)
        return available[index]
