"""
Strategy Registry

Maps strategy names to their implementations.
"""

import random
from typing import Dict, Optional, Type, Union

from ProviderPool.pool.base import SelectionStrategy
from ProviderPool.pool.strategies.base_strategy import BaseSelectionStrategy
from ProviderPool.pool.strategies.fallback import FallbackStrategy
from ProviderPool.pool.strategies.least_concurrent import LeastConcurrentStrategy
from ProviderPool.pool.strategies.random_strategy import RandomStrategy
from ProviderPool.pool.strategies.round_robin import RoundRobinStrategy
from ProviderPool.pool.strategies.weighted_random import WeightedRandomStrategy


# Strategy implementation registry
_STRATEGY_REGISTRY: Dict[SelectionStrategy, Type[BaseSelectionStrategy]] = {
    SelectionStrategy.ROUND_ROBIN: RoundRobinStrategy,
    SelectionStrategy.RANDOM: RandomStrategy,
    SelectionStrategy.LEAST_CONCURRENT: LeastConcurrentStrategy,
    SelectionStrategy.WEIGHTED_RANDOM: WeightedRandomStrategy,
    SelectionStrategy.FALLBACK: FallbackStrategy,
}


def resolve_strategy(strategy: Union[SelectionStrategy, str]) -> SelectionStrategy:
    """
    Convert a strategy name to its enum member.

    Raises:
        ValueError: If the name is not a known strategy
    """
    try:
        return SelectionStrategy(strategy)
    except ValueError:
        raise ValueError(
            f"Unknown strategy '{strategy}'. "
            f"Available strategies: {[s.value for s in SelectionStrategy]}"
        ) from None


def get_strategy_class(strategy: Union[SelectionStrategy, str]) -> Type[BaseSelectionStrategy]:
    """
    Get the implementation class for a strategy.

    Raises:
        ValueError: If the strategy is unknown or not registered
    """
    strategy = resolve_strategy(strategy)
    if strategy not in _STRATEGY_REGISTRY:
        available = list(_STRATEGY_REGISTRY.keys())
        raise ValueError(
            f"Strategy '{strategy.value}' is not registered. "
            f"Available strategies: {[s.value for s in available]}"
        )
    return _STRATEGY_REGISTRY[strategy]


def register_strategy(
    strategy: SelectionStrategy,
    implementation: Type[BaseSelectionStrategy],
    override: bool = False
) -> None:
    """
    Override the implementation behind a strategy name.

    Pools created afterwards pick up the new implementation. Existing
    pools keep the instances they were built with.

    Args:
        strategy: The strategy whose implementation is replaced
        implementation: The implementation class
        override: Must be True to replace a registered implementation

    Raises:
        ValueError: If strategy already registered and override is False
    """
    if strategy in _STRATEGY_REGISTRY and not override:
        raise ValueError(
            f"Strategy '{strategy.value}' is already registered. "
            "Use override=True to replace."
        )
    _STRATEGY_REGISTRY[strategy] = implementation


def list_available_strategies() -> list[SelectionStrategy]:
    """List all registered strategies."""
    return list(_STRATEGY_REGISTRY.keys())


def build_strategies(
    rng: Optional[random.Random] = None,
) -> Dict[SelectionStrategy, BaseSelectionStrategy]:
    """Instantiate one object per registered strategy, sharing a random source."""
    return {name: cls(rng) for name, cls in _STRATEGY_REGISTRY.items()}
