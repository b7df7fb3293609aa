"""Tests for building provider configs from host settings and environment."""

import pytest
from pydantic import ValidationError

from ProviderPool import (
    SelectionStrategy,
    create_pool_from_env,
    interpolate,
    load_provider_configs_from_env,
    parse_provider_configs,
)


def test_interpolate_env_references():
    env = {"OPENAI_KEY": "sk-live"}
    assert interpolate("${OPENAI_KEY}", env) == "sk-live"
    assert interpolate("prefix-${OPENAI_KEY}-suffix", env) == "prefix-sk-live-suffix"
    assert interpolate("${MISSING}", env) == "${MISSING}"
    assert interpolate("$OPENAI_KEY", env) == "$OPENAI_KEY"
    print("1. Interpolation: OK")


def test_parse_pairs_and_bare_keys():
    configs = parse_provider_configs(
        [("k1", "https://a/v1"), "k2", ["k3", ""]],
        base_url="https://default/v1",
        timeout=60,
        max_retries=3,
        max_concurrent_requests=5,
        platform="openai",
    )
    assert [c.api_key for c in configs] == ["k1", "k2", "k3"]
    assert [c.base_url for c in configs] == ["https://a/v1", "https://default/v1", "https://default/v1"]
    assert all(c.timeout == 60 and c.max_retries == 3 for c in configs)
    assert all(c.max_concurrent_requests == 5 for c in configs)
    assert all(c.to_dict()["platform"] == "openai" for c in configs)
    print("2. Parse pairs and bare keys: OK")


def test_parse_skips_blank_keys():
    configs = parse_provider_configs(
        [("", "https://api.openai.com/v1"), "   ", "${UNSET_BLANK}", "real"],
        environ={"UNSET_BLANK": ""},
    )
    assert [c.api_key for c in configs] == ["real"]
    print("3. Blank keys skipped: OK")


def test_parse_interpolates_keys_and_urls():
    env = {"KEY": "sk-env", "HOST": "proxy.local"}
    (config,) = parse_provider_configs([("${KEY}", "https://${HOST}/v1")], environ=env)
    assert config.api_key == "sk-env"
    assert config.base_url == "https://proxy.local/v1"
    print("4. Parse interpolation: OK")


def test_parse_rejects_bad_shared_settings():
    with pytest.raises(ValidationError):
        parse_provider_configs(["k"], max_concurrent_requests=0)
    print("5. Bad shared settings rejected: OK")


def test_load_from_env_mapping():
    env = {
        "OPENAI_API_KEYS": "sk-1, sk-2|https://proxy/v1 ,,",
        "OPENAI_BASE_URL": "https://api.openai.com/v1",
        "OPENAI_TIMEOUT": "30",
        "OPENAI_MAX_RETRIES": "2",
        "OPENAI_MAX_CONCURRENT_REQUESTS": "4",
    }
    configs = load_provider_configs_from_env("openai", environ=env)
    assert [(c.api_key, c.base_url) for c in configs] == [
        ("sk-1", "https://api.openai.com/v1"),
        ("sk-2", "https://proxy/v1"),
    ]
    assert configs[0].timeout == 30.0
    assert configs[0].max_retries == 2
    assert configs[0].max_concurrent_requests == 4
    print("6. Load from env: OK")


def test_load_from_env_missing_keys():
    assert load_provider_configs_from_env("NOPE", environ={}) == []
    print("7. Missing env gives no configs: OK")


def test_load_from_env_invalid_number():
    env = {"OPENAI_API_KEYS": "k", "OPENAI_TIMEOUT": "soon"}
    with pytest.raises(ValueError, match="OPENAI_TIMEOUT"):
        load_provider_configs_from_env("OPENAI", environ=env)
    print("8. Invalid numeric env rejected: OK")


def test_create_pool_from_env():
    env = {
        "GROQ_API_KEYS": "g1,g2,g1",
        "GROQ_POOL_STRATEGY": "least-concurrent",
    }
    pool = create_pool_from_env("GROQ", environ=env)
    assert pool.name == "groq"
    assert pool.strategy is SelectionStrategy.LEAST_CONCURRENT
    assert [r["api_key"] for r in pool.get_status()] == ["g1", "g2"]
    print("9. Pool from env: OK")


def test_create_pool_from_env_defaults():
    pool = create_pool_from_env("EMPTY", name="custom", environ={})
    assert pool.name == "custom"
    assert pool.strategy is SelectionStrategy.ROUND_ROBIN
    assert len(pool) == 0
    print("10. Pool from empty env: OK")


def test_create_pool_from_env_strategy_argument_wins():
    env = {"GROQ_API_KEYS": "g1", "GROQ_POOL_STRATEGY": "sticky"}
    with pytest.raises(ValueError, match="Unknown strategy"):
        create_pool_from_env("GROQ", environ=env)
    pool = create_pool_from_env("GROQ", environ=env, strategy="fallback")
    assert pool.strategy is SelectionStrategy.FALLBACK
    assert len(pool) == 1
    print("11. Explicit strategy ignores env strategy: OK")


if __name__ == "__main__":
    test_interpolate_env_references()
    test_parse_pairs_and_bare_keys()
    test_parse_skips_blank_keys()
    test_parse_interpolates_keys_and_urls()
    test_parse_rejects_bad_shared_settings()
    test_load_from_env_mapping()
    test_load_from_env_missing_keys()
    test_load_from_env_invalid_number()
    test_create_pool_from_env()
    test_create_pool_from_env_defaults()
    test_create_pool_from_env_strategy_argument_wins()
    print("\nAll config loader tests passed!")
