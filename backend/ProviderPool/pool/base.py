"""
Base types for the provider pool.

Defines the provider configuration record, the live registry entry,
the named selection strategies and the exhaustion error raised when
no provider can be admitted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# Weight used by weighted-random selection when no ceiling is configured
DEFAULT_PROVIDER_WEIGHT = 10


class SelectionStrategy(str, Enum):
    """Supported provider selection strategies."""
    ROUND_ROBIN = "round-robin"
    RANDOM = "random"
    LEAST_CONCURRENT = "least-concurrent"
    WEIGHTED_RANDOM = "weighted-random"
    FALLBACK = "fallback"


class PoolExhaustedError(Exception):
    """
    Raised when no provider is both enabled and under its concurrency ceiling.

    Attributes:
        pool_name: Name of the pool that could not admit the caller.
    """
    def __init__(self, pool_name: Optional[str]):
        self.pool_name = pool_name
        super().__init__(f"No available providers for {pool_name}")


class ProviderConfig(BaseModel):
    """
    Configuration for one interchangeable backend.

    Only the declared fields are interpreted by the pool. Any other
    keyword passed in is kept as an extra field: it takes part in the
    identity hash and shows up in status output.

    Attributes:
        api_key: Credential used against the backend
        base_url: Optional endpoint override
        max_retries: Retry budget for the HTTP layer (not used by the pool)
        max_concurrent_requests: Concurrency ceiling, unlimited when unset
        timeout: Request timeout in seconds (not used by the pool)
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    api_key: str
    base_url: Optional[str] = None
    max_retries: Optional[int] = Field(default=None, ge=0)
    max_concurrent_requests: Optional[int] = Field(default=None, ge=1)
    timeout: Optional[float] = Field(default=None, gt=0)

    @property
    def concurrency_limit(self) -> float:
        """Ceiling on concurrent holders, infinite when not configured."""
        if self.max_concurrent_requests is None:
            return float("inf")
        return self.max_concurrent_requests

    @property
    def weight(self) -> int:
        """Selection weight for weighted-random strategy."""
        return self.max_concurrent_requests or DEFAULT_PROVIDER_WEIGHT

    def to_dict(self) -> dict[str, Any]:
        """Return every field, extras included."""
        return self.model_dump()


@dataclass
class ProviderEntry:
    """
    Live state of one registered provider.

    Attributes:
        id: Identity hash of the config
        config: The registered configuration
        current_concurrent: Number of handles currently holding this provider
        enabled: Whether the provider may be selected
    """
    id: str
    config: ProviderConfig
    current_concurrent: int = 0
    enabled: bool = True

    @property
    def is_available(self) -> bool:
        """True if the entry is enabled and under its concurrency ceiling."""
        return self.enabled and self.current_concurrent < self.config.concurrency_limit
