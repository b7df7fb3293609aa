"""
FastAPI Server for ProviderPool.

This package provides the REST API endpoints for pool monitoring.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
