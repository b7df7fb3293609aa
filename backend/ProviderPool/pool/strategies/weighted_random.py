"""Weighted random selection."""

from __future__ import annotations

from typing import Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy


class WeightedRandomStrategy(BaseSelectionStrategy):
    """
    Pick providers in proportion to their weight.

    The weight of a provider is its max_concurrent_requests, or
    DEFAULT_PROVIDER_WEIGHT when no ceiling is configured. A uniform draw
    in [0, total) is matched against the running sum of weights in
    registration order.
    """

    strategy = SelectionStrategy.WEIGHTED_RANDOM

    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        total_weight = sum(entry.config.weight for entry in available)
        draw = self._rng.random() * total_weight

        cumulative = 0
        for entry in available:
            cumulative += entry.config.weight
            if draw <= cumulative:
                return entry

        # Float rounding left the draw unmatched
        return available[0]
