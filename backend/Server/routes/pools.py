"""
Pool API routes.

Read-only status of the named provider pools plus the few switches an
operator needs: enabling/disabling a provider and changing the default
selection strategy. Providers are never acquired through this API.
"""

from fastapi import APIRouter, HTTPException
import logging

from ProviderPool import ProviderPool, find_provider_pool, list_provider_pools
from ..models.schemas import (
    ErrorResponse,
    PoolListResponse,
    PoolStatusResponse,
    ProviderStatus,
    StrategyUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pools", tags=["Pools"])


def _get_pool(name: str) -> ProviderPool:
    """Look up a pool or answer 404."""
    pool = find_provider_pool(name)
    if pool is None:
        raise HTTPException(
            status_code=404,
            detail={"error": f"Pool '{name}' not found"},
        )
    return pool


def _build_status(name: str, pool: ProviderPool) -> PoolStatusResponse:
    """Convert a pool snapshot to the response model."""
    summary = pool.get_summary()
    providers = [ProviderStatus.from_record(r) for r in summary["providers"]]
    return PoolStatusResponse(
        name=name,
        strategy=summary["strategy"],
        provider_count=len(providers),
        available_count=summary["available_count"],
        providers=providers,
    )


@router.get(
    "",
    response_model=PoolListResponse,
    summary="List pools",
    description="List the names of all registered provider pools.",
)
async def list_pools() -> PoolListResponse:
    return PoolListResponse(pools=list_provider_pools())


@router.get(
    "/{name}/status",
    response_model=PoolStatusResponse,
    responses={404: {"model": ErrorResponse, "description": "Pool not found"}},
    summary="Pool status",
    description="Per-provider load and enabled state. API keys are masked.",
)
async def pool_status(name: str) -> PoolStatusResponse:
    pool = _get_pool(name)
    return _build_status(name, pool)


def _set_provider_enabled(name: str, provider_id: str, enabled: bool) -> PoolStatusResponse:
    pool = _get_pool(name)
    if not any(r["id"] == provider_id for r in pool.get_status()):
        raise HTTPException(
            status_code=404,
            detail={"error": f"Provider '{provider_id}' not found in pool '{name}'"},
        )
    pool.set_provider_status(provider_id, enabled)
    logger.info(f"Provider {provider_id[:8]} in pool '{name}' "
                f"{'enabled' if enabled else 'disabled'} via API")
    return _build_status(name, pool)


@router.post(
    "/{name}/providers/{provider_id}/enable",
    response_model=PoolStatusResponse,
    responses={404: {"model": ErrorResponse, "description": "Pool or provider not found"}},
    summary="Enable provider",
)
async def enable_provider(name: str, provider_id: str) -> PoolStatusResponse:
    return _set_provider_enabled(name, provider_id, True)


@router.post(
    "/{name}/providers/{provider_id}/disable",
    response_model=PoolStatusResponse,
    responses={404: {"model": ErrorResponse, "description": "Pool or provider not found"}},
    summary="Disable provider",
)
async def disable_provider(name: str, provider_id: str) -> PoolStatusResponse:
    return _set_provider_enabled(name, provider_id, False)


@router.put(
    "/{name}/strategy",
    response_model=PoolStatusResponse,
    responses={404: {"model": ErrorResponse, "description": "Pool not found"}},
    summary="Change strategy",
    description="Change the default selection strategy. In-flight handles are unaffected.",
)
async def set_strategy(name: str, request: StrategyUpdateRequest) -> PoolStatusResponse:
    pool = _get_pool(name)
    pool.set_strategy(request.strategy)
    return _build_status(name, pool)
