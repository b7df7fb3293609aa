"""
Base Selection Strategy

Abstract base class for all provider selection strategies.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ProviderPool.pool.base import ProviderEntry, SelectionStrategy


class BaseSelectionStrategy(ABC):
    """
    Abstract base for provider selection strategies.

    Subclasses implement select() to pick one entry out of the current
    available set. The pool creates one instance per strategy, so any
    state a strategy keeps (such as a rotation cursor) belongs to that pool.

    select() is only ever called with a non-empty sequence, while the
    pool holds its lock. It must not call back into the pool.
    """

    #: Strategy this implementation answers to
    strategy: SelectionStrategy

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source. Defaults to a fresh OS-seeded generator.
        """
        self._rng = rng or random.Random()

    @abstractmethod
    def select(self, available: Sequence[ProviderEntry]) -> ProviderEntry:
        """
        Pick one entry.

        Args:
            available: Non-empty, ordered sequence of available entries.

        Returns:
            The chosen entry (one of the elements of available).
        """
        pass
