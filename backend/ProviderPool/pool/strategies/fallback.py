"""Fallback selection."""

from __future__ import annotations

from typing import Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy


class FallbackStrategy(BaseSelectionStrategy):
    """
    Prefer providers in registration order.

    Returns the first idle provider. When every provider is busy, the
    first available one is returned regardless of its load.
    """

    strategy = SelectionStrategy.FALLBACK

    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        return next(
            (entry for entry in available if entry.current_concurrent == 0),
            available[0],
        )
