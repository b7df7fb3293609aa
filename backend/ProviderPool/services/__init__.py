"""Named provider pool service."""

from .pool_service import (
    clear_provider_pools,
    find_provider_pool,
    get_provider_pool,
    list_provider_pools,
    register_provider_pool,
    remove_provider_pool,
)

__all__ = [
    "clear_provider_pools",
    "find_provider_pool",
    "get_provider_pool",
    "list_provider_pools",
    "register_provider_pool",
    "remove_provider_pool",
]
