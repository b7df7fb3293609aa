"""
Example script demonstrating the Provider Pool.

This script shows how to:
1. Register providers and inspect status
2. Acquire and release handles
3. Compare selection strategies
4. Hit the concurrency ceiling

No requests are sent; the keys below are placeholders.
"""

from collections import Counter

from ProviderPool import (
    PoolExhaustedError,
    SelectionStrategy,
    create_pool,
    parse_provider_configs,
)


def print_section(title: str):
    """Print a formatted section header."""
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def build_pool():
    pool = create_pool("round-robin", name="demo")
    configs = parse_provider_configs(
        [("sk-primary-0001", "https://api.openai.com/v1"), ("sk-backup-0002", "https://proxy.example/v1")],
        timeout=60,
        max_retries=3,
        max_concurrent_requests=2,
    )
    for config in configs:
        pool.add_provider(config)
    pool.add_provider({"api_key": "sk-bulk-0003", "max_concurrent_requests": 6})
    return pool


def show_status(pool):
    for record in pool.get_status():
        flag = "on " if record["enabled"] else "off"
        print(f"  [{flag}] {record['id'][:8]}  {record['current_concurrent']} in flight"
              f"  limit={record['max_concurrent_requests']}")


def demo_registration(pool):
    print_section("1. Registered Providers")
    show_status(pool)


def demo_handles(pool):
    print_section("2. Acquire / Release")
    with pool.get_provider() as handle:
        print(f"  Using {handle.id[:8]} at {handle.config.base_url}")
        show_status(pool)
    print("  After release:")
    show_status(pool)


def demo_strategies(pool):
    print_section("3. Strategies (1000 picks each, released immediately)")
    for strategy in SelectionStrategy:
        counts = Counter()
        for _ in range(1000):
            handle = pool.get_provider(strategy)
            counts[handle.id[:8]] += 1
            handle.release()
        print(f"  {strategy.value:<18} {dict(counts)}")


def demo_exhaustion(pool):
    print_section("4. Concurrency Ceiling")
    held = []
    try:
        while True:
            held.append(pool.get_provider("least-concurrent"))
    except PoolExhaustedError as e:
        print(f"  {len(held)} handles granted, then: {e}")
    show_status(pool)
    for handle in held:
        handle.release()


def main():
    """Run all demonstrations."""
    pool = build_pool()
    demo_registration(pool)
    demo_handles(pool)
    demo_strategies(pool)
    demo_exhaustion(pool)

    print("\n" + "=" * 60)
    print("  Demo Complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
