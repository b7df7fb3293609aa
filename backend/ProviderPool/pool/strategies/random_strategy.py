"""Uniform random selection."""

from __future__ import annotations

from typing import Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy


class RandomStrategy(BaseSelectionStrategy):
    """Pick any available provider with equal probability."""

    strategy = SelectionStrategy.RANDOM

    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        return self._rng.choice(available)
