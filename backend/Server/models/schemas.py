"""Pydantic models for API request/response schemas."""

from pydantic import BaseModel, Field
from typing import Any, Optional

from ProviderPool import SelectionStrategy


# Config fields that get their own column in ProviderStatus
_KNOWN_FIELDS = {
    "id",
    "enabled",
    "current_concurrent",
    "api_key",
    "base_url",
    "max_retries",
    "max_concurrent_requests",
    "timeout",
}


def mask_api_key(api_key: str) -> str:
    """Hide all but the edges of an API key."""
    if len(api_key) <= 8:
        return "***"
    return f"{api_key[:3]}...{api_key[-4:]}"


class ProviderStatus(BaseModel):
    """Live state of one provider in a pool."""
    id: str = Field(..., description="Identity hash of the provider config")
    enabled: bool = Field(..., description="Whether the provider may be selected")
    current_concurrent: int = Field(..., description="Handles currently holding the provider")
    api_key: str = Field(..., description="Masked API key")
    base_url: Optional[str] = Field(default=None, description="Endpoint override")
    max_retries: Optional[int] = Field(default=None, description="Retry budget")
    max_concurrent_requests: Optional[int] = Field(default=None, description="Concurrency ceiling")
    timeout: Optional[float] = Field(default=None, description="Request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Caller-defined config fields")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ProviderStatus":
        """Build from a ProviderPool.get_status() record, masking the key."""
        return cls(
            id=record["id"],
            enabled=record["enabled"],
            current_concurrent=record["current_concurrent"],
            api_key=mask_api_key(record["api_key"]),
            base_url=record.get("base_url"),
            max_retries=record.get("max_retries"),
            max_concurrent_requests=record.get("max_concurrent_requests"),
            timeout=record.get("timeout"),
            extra={k: v for k, v in record.items() if k not in _KNOWN_FIELDS},
        )


class PoolStatusResponse(BaseModel):
    """Status of a whole pool."""
    name: str = Field(..., description="Pool name")
    strategy: SelectionStrategy = Field(..., description="Default selection strategy")
    provider_count: int = Field(..., description="Number of registered providers")
    available_count: int = Field(..., description="Providers enabled and under their ceiling")
    providers: list[ProviderStatus] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "openai",
                "strategy": "round-robin",
                "provider_count": 1,
                "available_count": 1,
                "providers": [
                    {
                        "id": "3f786850e387550fdab836ed7e6dc881de23001b",
                        "enabled": True,
                        "current_concurrent": 2,
                        "api_key": "sk-...9xQz",
                        "base_url": "https://api.openai.com/v1",
                        "max_retries": 3,
                        "max_concurrent_requests": 5,
                        "timeout": 60,
                        "extra": {}
                    }
                ]
            }
        }


class StrategyUpdateRequest(BaseModel):
    """Request body for changing a pool's default strategy."""
    strategy: SelectionStrategy = Field(..., description="New default strategy")


class PoolListResponse(BaseModel):
    """Names of the registered pools."""
    pools: list[str] = Field(..., description="Registered pool names")


class ErrorResponse(BaseModel):
    """Error response body."""
    error: str = Field(..., description="Error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    pools: list[str] = Field(..., description="Registered pools")
    pool_count: int = Field(..., description="Number of registered pools")
