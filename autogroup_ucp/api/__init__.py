"""
API routers for AutoGroup UCP.
"""

from fastapi import APIRouter

from ..config import ApiConfig
from .capabilities import router as capabilities_router
from .health import router as health_router
from .rest import router as rest_router
from .rpc import router as rpc_router


def build_router(config: ApiConfig) -> APIRouter:
    """Aggregate the sub-routers enabled by configuration."""
    router = APIRouter(prefix=config.prefix)

    router.include_router(health_router)
    router.include_router(capabilities_router)
    if config.rest_enabled:
        router.include_router(rest_router)
    if config.rpc_enabled:
        router.include_router(rpc_router)
    return router
