"""Tests for the provider selection strategies."""

import random
from collections import Counter

import pytest

from ProviderPool import (
    ProviderConfig,
    ProviderEntry,
    SelectionStrategy,
    create_pool,
    get_strategy_class,
    list_available_strategies,
    register_strategy,
)
from ProviderPool.pool.strategies import (
    FallbackStrategy,
    LeastConcurrentStrategy,
    RandomStrategy,
    RoundRobinStrategy,
    WeightedRandomStrategy,
)


def _entry(name: str, load: int = 0, limit=None) -> ProviderEntry:
    config = ProviderConfig(api_key=name, max_concurrent_requests=limit)
    return ProviderEntry(id=name, config=config, current_concurrent=load)


def test_round_robin_cycles():
    entries = [_entry("x"), _entry("y"), _entry("z")]
    strategy = RoundRobinStrategy()
    picks = [strategy.select(entries).id for _ in range(7)]
    assert picks == ["x", "y", "z", "x", "y", "z", "x"]
    print("1. Round-robin cycle: OK")


def test_round_robin_cursor_follows_current_set():
    x, y, z = _entry("x"), _entry("y"), _entry("z")
    strategy = RoundRobinStrategy()
    assert strategy.select([x, y, z]).id == "x"
    assert strategy.select([x, y, z]).id == "y"
    # cursor is 2; with one provider gone it wraps into the shorter list
    assert strategy.select([x, y]).id == "x"
    assert strategy.select([x, y]).id == "y"
    print("2. Round-robin over shifting set: OK")


def test_random_is_uniform_enough():
    entries = [_entry("a"), _entry("b"), _entry("c")]
    strategy = RandomStrategy(random.Random(7))
    counts = Counter(strategy.select(entries).id for _ in range(9000))
    for name in ("a", "b", "c"):
        assert 0.28 < counts[name] / 9000 < 0.39
    print("3. Random spread: OK")


def test_least_concurrent_picks_minimum():
    entries = [_entry("a", 0), _entry("b", 2), _entry("c", 1)]
    assert LeastConcurrentStrategy().select(entries).id == "a"
    print("4. Least-concurrent minimum: OK")


def test_least_concurrent_tie_goes_to_earliest():
    entries = [_entry("a", 3), _entry("b", 1), _entry("c", 1)]
    assert LeastConcurrentStrategy().select(entries).id == "b"
    print("5. Least-concurrent tie-break: OK")


def test_weighted_random_proportions():
    entries = [_entry("a", limit=10), _entry("b", limit=90)]
    strategy = WeightedRandomStrategy(random.Random(1234))
    draws = 10_000
    b_share = sum(strategy.select(entries).id == "b" for _ in range(draws)) / draws
    assert abs(b_share - 0.9) < 0.03
    print(f"6. Weighted-random share of B: {b_share:.3f} OK")


def test_weighted_random_default_weight():
    # unset ceiling weighs 10, same as an explicit 10
    entries = [_entry("a"), _entry("b", limit=10)]
    strategy = WeightedRandomStrategy(random.Random(99))
    a_share = sum(strategy.select(entries).id == "a" for _ in range(10_000)) / 10_000
    assert abs(a_share - 0.5) < 0.03
    print("7. Weighted-random default weight: OK")


def test_weighted_random_unmatched_draw_falls_back_to_first():
    class StuckRandom(random.Random):
        def random(self):
            return 1.5

    entries = [_entry("a"), _entry("b")]
    assert WeightedRandomStrategy(StuckRandom()).select(entries).id == "a"
    print("8. Weighted-random overflow fallback: OK")


def test_fallback_prefers_first_idle():
    entries = [_entry("a", 2), _entry("b", 0), _entry("c", 1)]
    assert FallbackStrategy().select(entries).id == "b"
    print("9. Fallback first idle: OK")


def test_fallback_all_busy_returns_first():
    entries = [_entry("a", 2), _entry("b", 1), _entry("c", 1)]
    assert FallbackStrategy().select(entries).id == "a"
    print("10. Fallback all busy: OK")


def test_every_strategy_is_registered():
    assert set(list_available_strategies()) == set(SelectionStrategy)
    assert get_strategy_class("round-robin") is RoundRobinStrategy
    assert get_strategy_class(SelectionStrategy.FALLBACK) is FallbackStrategy
    with pytest.raises(ValueError, match="Unknown strategy"):
        get_strategy_class("sticky")
    print("11. Strategy registry: OK")


def test_register_strategy_override():
    class LastIdleStrategy(FallbackStrategy):
        def select(self, available):
            idle = [e for e in available if e.current_concurrent == 0]
            return (idle or list(available))[-1]

    existing = create_pool("fallback")
    with pytest.raises(ValueError, match="already registered"):
        register_strategy(SelectionStrategy.FALLBACK, LastIdleStrategy)

    register_strategy(SelectionStrategy.FALLBACK, LastIdleStrategy, override=True)
    try:
        assert get_strategy_class("fallback") is LastIdleStrategy
        created_after = create_pool("fallback")
        for pool in (existing, created_after):
            pool.add_provider({"api_key": "a"})
            pool.add_provider({"api_key": "b"})
        assert created_after.get_provider().config.api_key == "b"
        assert existing.get_provider().config.api_key == "a"
    finally:
        register_strategy(SelectionStrategy.FALLBACK, FallbackStrategy, override=True)
    assert get_strategy_class("fallback") is FallbackStrategy
    print("12. Strategy override: OK")


if __name__ == "__main__":
    test_round_robin_cycles()
    test_round_robin_cursor_follows_current_set()
    test_random_is_uniform_enough()
    test_least_concurrent_picks_minimum()
    test_least_concurrent_tie_goes_to_earliest()
    test_weighted_random_proportions()
    test_weighted_random_default_weight()
    test_weighted_random_unmatched_draw_falls_back_to_first()
    test_fallback_prefers_first_idle()
    test_fallback_all_busy_returns_first()
    test_every_strategy_is_registered()
    test_register_strategy_override()
    print("\nAll strategy tests passed!")
