"""
Provider configuration loading.

Turns host configuration (a list of API key / endpoint pairs plus shared
request settings) into ProviderConfig records, either from Python values
or from environment variables.

Environment layout for a prefix such as OPENAI:
    OPENAI_API_KEYS="sk-1,sk-2|https://proxy.example/v1"
    OPENAI_BASE_URL="https://api.openai.com/v1"   # default endpoint
    OPENAI_TIMEOUT="60"
    OPENAI_MAX_RETRIES="3"
    OPENAI_MAX_CONCURRENT_REQUESTS="5"
    OPENAI_POOL_STRATEGY="least-concurrent"

Keys and endpoints may reference other variables as ${VAR}.
"""

import logging
import os
import re
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from .base import ProviderConfig, SelectionStrategy
from .provider_pool import ProviderPool

logger = logging.getLogger(__name__)

_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

# Separates an API key from its endpoint inside {PREFIX}_API_KEYS
KEY_URL_SEPARATOR = "|"

ApiKeyItem = Union[str, Sequence[str]]


def interpolate(value: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace ${VAR} references with environment values.

    Unknown variables are left as written.
    """
    env = os.environ if environ is None else environ
    return _ENV_REFERENCE.sub(lambda m: env.get(m.group(1), m.group(0)), value)


def _split_item(item: ApiKeyItem) -> tuple[str, Optional[str]]:
    """Return (api_key, base_url) for a bare key or a key/endpoint pair."""
    if isinstance(item, str):
        return item, None
    if len(item) == 0:
        return "", None
    if len(item) == 1:
        return item[0], None
    return item[0], item[1] or None


def parse_provider_configs(
    api_keys: Iterable[ApiKeyItem],
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    max_retries: Optional[int] = None,
    max_concurrent_requests: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
    **extra: Any,
) -> list[ProviderConfig]:
    """
    Build provider configs from a list of API keys.

    Args:
        api_keys: Bare keys or (api_key, base_url) pairs.
        base_url: Endpoint for items that don't carry their own.
        timeout: Shared request timeout in seconds.
        max_retries: Shared retry budget.
        max_concurrent_requests: Shared per-provider concurrency ceiling.
        environ: Variables used for ${VAR} interpolation (os.environ by default).
        **extra: Additional fields copied onto every config (e.g. platform).

    Returns:
        One ProviderConfig per non-blank key, in input order.

    Raises:
        pydantic.ValidationError: If a shared setting is out of range.
    """
    configs = []
    for position, item in enumerate(api_keys):
        raw_key, raw_url = _split_item(item)
        api_key = interpolate(raw_key, environ).strip()
        if not api_key:
            logger.warning(f"Skipping provider #{position}: empty API key")
            continue

        url = interpolate(raw_url, environ).strip() if raw_url else base_url
        configs.append(
            ProviderConfig(
                api_key=api_key,
                base_url=url or None,
                timeout=timeout,
                max_retries=max_retries,
                max_concurrent_requests=max_concurrent_requests,
                **extra,
            )
        )
    return configs


def _env_number(env: Mapping[str, str], name: str, cast):
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


def load_provider_configs_from_env(
    prefix: str,
    environ: Optional[Mapping[str, str]] = None,
    **extra: Any,
) -> list[ProviderConfig]:
    """
    Load provider configs from {PREFIX}_* environment variables.

    Args:
        prefix: Variable prefix, e.g. "OPENAI".
        environ: Mapping to read instead of os.environ.
        **extra: Additional fields copied onto every config.

    Returns:
        Provider configs (empty list if {PREFIX}_API_KEYS is unset or blank).

    Example:
        OPENAI_API_KEYS="key1,key2|https://proxy/v1" -> two configs, the
        second with its own base_url
    """
    env = os.environ if environ is None else environ
    prefix = prefix.upper()

    keys_str = env.get(f"{prefix}_API_KEYS", "")
    items = [
        tuple(part.strip() for part in chunk.split(KEY_URL_SEPARATOR, 1))
        for chunk in keys_str.split(",")
        if chunk.strip()
    ]

    return parse_provider_configs(
        items,
        base_url=env.get(f"{prefix}_BASE_URL") or None,
        timeout=_env_number(env, f"{prefix}_TIMEOUT", float),
        max_retries=_env_number(env, f"{prefix}_MAX_RETRIES", int),
        max_concurrent_requests=_env_number(env, f"{prefix}_MAX_CONCURRENT_REQUESTS", int),
        environ=env,
        **extra,
    )


def create_pool_from_env(
    prefix: str,
    name: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    strategy: Optional[Union[SelectionStrategy, str]] = None,
) -> ProviderPool:
    """
    Create a pool populated from {PREFIX}_* environment variables.

    The default strategy is the strategy argument when given, else
    {PREFIX}_POOL_STRATEGY, else round-robin. {PREFIX}_POOL_STRATEGY is
    not read when an explicit strategy is passed.

    Raises:
        ValueError: If the strategy or a numeric setting is invalid.
    """
    env = os.environ if environ is None else environ
    if strategy is None:
        strategy = env.get(f"{prefix.upper()}_POOL_STRATEGY") or SelectionStrategy.ROUND_ROBIN

    pool = ProviderPool(strategy=strategy, name=name or prefix.lower())
    configs = load_provider_configs_from_env(prefix, environ=env)
    for config in configs:
        pool.add_provider(config)

    if not configs:
        logger.warning(f"No API keys found in {prefix.upper()}_API_KEYS")
    return pool
