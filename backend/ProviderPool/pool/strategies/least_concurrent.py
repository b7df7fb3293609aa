"""Least-concurrent selection."""

from __future__ import annotations

from typing import Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy


class LeastConcurrentStrategy(BaseSelectionStrategy):
    """
    Pick the provider with the fewest current holders.

    Ties go to the earliest-registered provider.
    """

    strategy = SelectionStrategy.LEAST_CONCURRENT

    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        # min() keeps the first of equal keys
        return min(available, key=lambda entry: entry.current_concurrent)
