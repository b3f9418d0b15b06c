"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from ..capabilities import CapabilityRegistry
from .dependencies import get_registry

router = APIRouter(tags=["Health"])


@router.get("/ping")
async def ping():
    """Simple endpoint to verify server is running."""
    return {"status": "ok", "message": "pong"}


@router.get("/health")
async def health(registry: CapabilityRegistry = Depends(get_registry)):
    """Registry status."""
    primary = registry.primary_group()
    return {
        "status": "ok" if registry.is_sealed else "starting",
        "registry": {
            "sealed": registry.is_sealed,
            "groups": len(registry.list_groups()),
            "capabilities": len(registry),
            "primary_group": primary.group_name if primary else None,
        },
    }
