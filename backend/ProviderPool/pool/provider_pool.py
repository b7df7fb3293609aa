"""
Provider Pool - admission control and selection over interchangeable providers.

This module provides the pool facade that:
- Holds several provider configurations (credential/endpoint pairs)
- Admits callers under a per-provider concurrency ceiling
- Picks which provider to hand out with a pluggable strategy

The pool never performs network I/O and never retries. It only decides
which configuration a caller may use right now and tracks how many
callers currently hold each one.

Usage:
    from ProviderPool import create_pool

    pool = create_pool("least-concurrent", name="openai")
    pool.add_provider({"api_key": "sk-1", "max_concurrent_requests": 4})
    pool.add_provider({"api_key": "sk-2", "base_url": "https://proxy/v1"})

    with pool.get_provider() as handle:
        do_request(handle.config)
"""

import logging
import random
import threading
from typing import Any, Mapping, Optional, Union

from .base import PoolExhaustedError, ProviderConfig, SelectionStrategy
from .handle import ProviderHandle
from .registry import ProviderRegistry
from .strategies import build_strategies, resolve_strategy

logger = logging.getLogger(__name__)

StrategyName = Union[SelectionStrategy, str]
ConfigLike = Union[ProviderConfig, Mapping[str, Any]]


class ProviderPool:
    """
    Thread-safe pool of provider configurations.

    One lock guards the registry, the per-pool strategy state (the
    round-robin cursor) and the default strategy. No operation waits
    on anything but that lock: get_provider() either returns a handle
    right away or raises PoolExhaustedError.

    Example:
        pool = ProviderPool(SelectionStrategy.ROUND_ROBIN, name="groq")
        pool.add_provider(ProviderConfig(api_key="k1"))
        pool.add_provider(ProviderConfig(api_key="k2"))

        handle = pool.get_provider()
        try:
            ...
        finally:
            handle.release()
    """

    def __init__(
        self,
        strategy: StrategyName = SelectionStrategy.ROUND_ROBIN,
        name: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the pool.

        Args:
            strategy: Default selection strategy.
            name: Pool name used in diagnostics.
            rng: Random source shared by the random-based strategies.
        """
        self._name = name
        self._strategy = resolve_strategy(strategy)
        self._registry = ProviderRegistry()
        self._strategies = build_strategies(rng)
        self._lock = threading.Lock()

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def strategy(self) -> SelectionStrategy:
        """Default strategy for unqualified get_provider() calls."""
        with self._lock:
            return self._strategy

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __repr__(self) -> str:
        return f"ProviderPool(name={self._name!r}, strategy={self._strategy.value!r})"

    # ==================== Registry operations ====================

    def add_provider(self, config: ConfigLike) -> str:
        """
        Register a provider configuration.

        Adding a configuration equal to one already present is a no-op.

        Args:
            config: ProviderConfig or mapping of config fields.

        Returns:
            The provider id.

        Raises:
            pydantic.ValidationError: If a mapping is not a valid config.
        """
        with self._lock:
            known = len(self._registry)
            entry = self._registry.add(config)
            added = len(self._registry) > known
        if added:
            logger.info(f"[{self._name}] Added provider {entry.id[:8]}")
        return entry.id

    def remove_provider(self, provider_id: str) -> None:
        """Remove a provider. Unknown ids are ignored."""
        with self._lock:
            removed = self._registry.remove(provider_id)
        if removed:
            logger.info(f"[{self._name}] Removed provider {provider_id[:8]}")

    def enable_provider(self, provider_id: str) -> None:
        """Make a provider selectable again. Unknown ids are ignored."""
        self.set_provider_status(provider_id, True)

    def disable_provider(self, provider_id: str) -> None:
        """Exclude a provider from selection. Unknown ids are ignored."""
        self.set_provider_status(provider_id, False)

    def set_provider_status(self, provider_id: str, enabled: bool) -> None:
        """Set a provider's enabled flag. Unknown ids are ignored."""
        with self._lock:
            changed = self._registry.set_enabled(provider_id, enabled)
        if changed:
            state = "enabled" if enabled else "disabled"
            logger.info(f"[{self._name}] Provider {provider_id[:8]} {state}")

    # ==================== Acquisition ====================

    def get_provider(self, strategy: Optional[StrategyName] = None) -> ProviderHandle:
        """
        Acquire a provider slot.

        Args:
            strategy: Optional strategy for this call only. Defaults to
                the pool's current strategy.

        Returns:
            Handle bound to the chosen provider. Release it when done.

        Raises:
            PoolExhaustedError: If no provider is enabled and under its ceiling.
            ValueError: If strategy is not a known strategy name.
        """
        override = resolve_strategy(strategy) if strategy is not None else None

        with self._lock:
            available = self._registry.available()
            if not available:
                logger.warning(f"[{self._name}] No available providers "
                               f"({len(self._registry)} registered)")
                raise PoolExhaustedError(self._name)

            selector = self._strategies[override or self._strategy]
            entry = selector.select(available)
            entry.current_concurrent += 1
            handle = ProviderHandle(entry, self._lock)
            in_flight = entry.current_concurrent

        logger.debug(f"[{self._name}] Acquired provider {entry.id[:8]} "
                     f"via {selector.strategy.value} ({in_flight} in flight)")
        return handle

    def set_strategy(self, strategy: StrategyName) -> None:
        """
        Change the default strategy for future get_provider() calls.

        Handles already issued are unaffected.

        Raises:
            ValueError: If strategy is not a known strategy name.
        """
        strategy = resolve_strategy(strategy)
        with self._lock:
            self._strategy = strategy
        logger.info(f"[{self._name}] Strategy set to {strategy.value}")

    # ==================== Status ====================

    def get_status(self) -> list[dict[str, Any]]:
        """
        Point-in-time view of every provider.

        Returns:
            One flat dict per provider, in registration order, holding
            every config field plus id, enabled and current_concurrent.
        """
        with self._lock:
            return self._registry.snapshot()

    def get_summary(self) -> dict[str, Any]:
        """
        Strategy, availability and provider records read in one step.

        Returns:
            Dict with name, strategy, available_count and providers (the
            same records get_status() returns).
        """
        with self._lock:
            return {
                "name": self._name,
                "strategy": self._strategy,
                "available_count": len(self._registry.available()),
                "providers": self._registry.snapshot(),
            }


def create_pool(
    strategy: StrategyName = SelectionStrategy.ROUND_ROBIN,
    name: Optional[str] = None,
) -> ProviderPool:
    """Create an empty provider pool."""
    return ProviderPool(strategy=strategy, name=name)


_POOL_OPERATIONS = (
    "add_provider",
    "disable_provider",
    "enable_provider",
    "remove_provider",
    "get_provider",
    "set_provider_status",
    "get_status",
    "set_strategy",
)


def is_provider_pool(obj: object) -> bool:
    """Check whether obj offers the full provider pool interface."""
    return obj is not None and all(
        callable(getattr(obj, op, None)) for op in _POOL_OPERATIONS
    )
