"""
FastAPI Server for ProviderPool.

Monitoring entry point: exposes the status of the named provider pools
and lets an operator enable/disable providers or switch strategies.
"""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from ProviderPool import get_provider_pool, list_provider_pools
from .routes.pools import router as pools_router
from .models.schemas import HealthResponse

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _configured_pool_names() -> list[str]:
    """Pool names from POOL_NAMES (comma-separated env prefixes)."""
    names = os.getenv("POOL_NAMES", "OPENAI").split(",")
    return [n.strip().lower() for n in names if n.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Creates the configured pools on startup.
    """
    # Startup
    logger.info("Starting ProviderPool API Server...")

    for name in _configured_pool_names():
        pool = get_provider_pool(name)
        logger.info(f"Pool '{name}' ready with {len(pool)} providers ({pool.strategy.value})")

    yield

    # Shutdown
    logger.info("Shutting down ProviderPool API Server...")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="ProviderPool API",
        description="""
        ## Provider Pool Monitoring

        Inspect per-provider load and enabled state of every named pool.

        ### Features:
        - **Status**: concurrency and enabled flag per provider (keys masked)
        - **Enable/Disable**: take a provider out of rotation and back
        - **Strategy**: switch the default selection strategy at runtime
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Configure CORS
    origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(pools_router, prefix="/api")

    # Health check endpoint
    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Check if the service is healthy and list registered pools.",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        pools = list_provider_pools()
        return HealthResponse(
            status="healthy",
            pools=pools,
            pool_count=len(pools),
        )

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "true").lower() == "true"

    logger.info(f"Starting server on {host}:{port}")

    uvicorn.run(
        "Server.main:app",
        host=host,
        port=port,
        reload=reload,
    )
