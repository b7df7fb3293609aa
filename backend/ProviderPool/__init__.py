"""
ProviderPool - admission control over interchangeable backend configurations.

This package holds several provider configurations (API key / endpoint
pairs), admits callers under a per-provider concurrency ceiling and picks
which provider to hand out with a pluggable strategy.
"""

from .pool.base import (
    DEFAULT_PROVIDER_WEIGHT,
    PoolExhaustedError,
    ProviderConfig,
    ProviderEntry,
    SelectionStrategy,
)
from .pool.identity import generate_id
from .pool.registry import ProviderRegistry
from .pool.handle import ProviderHandle
from .pool.provider_pool import ProviderPool, create_pool, is_provider_pool
from .pool.config_loader import (
    create_pool_from_env,
    interpolate,
    load_provider_configs_from_env,
    parse_provider_configs,
)
from .pool.strategies import (
    BaseSelectionStrategy,
    get_strategy_class,
    list_available_strategies,
    register_strategy,
)
from .services.pool_service import (
    clear_provider_pools,
    find_provider_pool,
    get_provider_pool,
    list_provider_pools,
    register_provider_pool,
    remove_provider_pool,
)

__all__ = [
    # Base types
    "DEFAULT_PROVIDER_WEIGHT",
    "PoolExhaustedError",
    "ProviderConfig",
    "ProviderEntry",
    "SelectionStrategy",
    # Pool
    "generate_id",
    "ProviderRegistry",
    "ProviderHandle",
    "ProviderPool",
    "create_pool",
    "is_provider_pool",
    # Configuration
    "create_pool_from_env",
    "interpolate",
    "load_provider_configs_from_env",
    "parse_provider_configs",
    # Strategies
    "BaseSelectionStrategy",
    "get_strategy_class",
    "list_available_strategies",
    "register_strategy",
    # Named pools
    "clear_provider_pools",
    "find_provider_pool",
    "get_provider_pool",
    "list_provider_pools",
    "register_provider_pool",
    "remove_provider_pool",
]
