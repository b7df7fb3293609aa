"""
Selection Strategies Package

Pluggable algorithms that pick one provider from the available set.
"""

from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy
from ProviderPool.pool.strategies.round_robin import RoundRobinStrategy
from ProviderPool.pool.strategies.random_strategy import RandomStrategy
from ProviderPool.pool.strategies.least_concurrent import LeastConcurrentStrategy
from ProviderPool.pool.strategies.weighted_random import WeightedRandomStrategy
from ProviderPool.pool.strategies.fallback import FallbackStrategy
from ProviderPool.pool.strategies.registry import (
    build_strategies,
    get_strategy_class,
    list_available_strategies,
    register_strategy,
    resolve_strategy,
)

__all__ = [
    "BaseSelectionStrategy",
    "RoundRobinStrategy",
    "RandomStrategy",
    "LeastConcurrentStrategy",
    "WeightedRandomStrategy",
    "FallbackStrategy",
    # Registry functions
    "build_strategies",
    "get_strategy_class",
    "list_available_strategies",
    "register_strategy",
    "resolve_strategy",
]
