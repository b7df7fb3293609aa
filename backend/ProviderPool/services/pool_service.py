"""
Pool Service - process-wide registry of named provider pools.

Request pipelines share one pool per backend platform. This module keeps
those pools in a module-level map so any component can look a pool up by
name instead of passing it around.

Pools are populated from the environment on first use: the pool name is
used as the variable prefix (see config_loader).

Usage:
    from ProviderPool.services import get_provider_pool

    pool = get_provider_pool("openai")
    with pool.get_provider() as handle:
        ...
"""

import logging
import threading
from typing import Optional, Union

from dotenv import load_dotenv

from ..pool.base import SelectionStrategy
from ..pool.config_loader import create_pool_from_env
from ..pool.provider_pool import ProviderPool

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


# Global pool instances
_pools: dict[str, ProviderPool] = {}
_pools_lock = threading.Lock()


def get_provider_pool(
    name: str,
    strategy: Optional[Union[SelectionStrategy, str]] = None,
) -> ProviderPool:
    """
    Get the global pool registered under name, creating it if needed.

    A new pool is filled from {NAME}_* environment variables. If strategy
    is given it overrides {NAME}_POOL_STRATEGY for a new pool; an
    existing pool keeps its current strategy.

    Args:
        name: Pool name (case-insensitive).
        strategy: Default strategy for a newly created pool.

    Returns:
        The shared ProviderPool instance.
    """
    key = name.lower()
    pool = _pools.get(key)
    if pool is None:
        with _pools_lock:
            pool = _pools.get(key)
            if pool is None:
                pool = create_pool_from_env(key, name=key, strategy=strategy)
                _pools[key] = pool
                logger.info(f"Created provider pool '{key}' with {len(pool)} providers")
    return pool


def register_provider_pool(pool: ProviderPool, name: Optional[str] = None) -> None:
    """
    Register an existing pool under a name, replacing any previous one.

    Raises:
        ValueError: If neither name nor pool.name is set.
    """
    key = (name or pool.name or "").lower()
    if not key:
        raise ValueError("A pool name is required to register a pool")
    with _pools_lock:
        _pools[key] = pool


def list_provider_pools() -> list[str]:
    """Names of all registered pools."""
    with _pools_lock:
        return list(_pools.keys())


def find_provider_pool(name: str) -> Optional[ProviderPool]:
    """Look up a registered pool without creating it."""
    return _pools.get(name.lower())


def remove_provider_pool(name: str) -> bool:
    """Forget a pool. Returns False if no pool had that name."""
    with _pools_lock:
        return _pools.pop(name.lower(), None) is not None


def clear_provider_pools() -> None:
    """Forget all pools. Useful for testing or reloading configuration."""
    with _pools_lock:
        _pools.clear()
