"""Provider pool: registry, selection strategies and admission control."""

from .base import (
    DEFAULT_PROVIDER_WEIGHT,
    PoolExhaustedError,
    ProviderConfig,
    ProviderEntry,
    SelectionStrategy,
)
from .identity import generate_id
from .registry import ProviderRegistry
from .handle import ProviderHandle
from .provider_pool import ProviderPool, create_pool, is_provider_pool
from .config_loader import (
    create_pool_from_env,
    interpolate,
    load_provider_configs_from_env,
    parse_provider_configs,
)

__all__ = [
    "DEFAULT_PROVIDER_WEIGHT",
    "PoolExhaustedError",
    "ProviderConfig",
    "ProviderEntry",
    "SelectionStrategy",
    "generate_id",
    "ProviderRegistry",
    "ProviderHandle",
    "ProviderPool",
    "create_pool",
    "is_provider_pool",
    "create_pool_from_env",
    "interpolate",
    "load_provider_configs_from_env",
    "parse_provider_configs",
]
