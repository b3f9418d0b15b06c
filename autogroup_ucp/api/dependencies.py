"""
FastAPI dependencies for capability service injection.

The registry and dispatcher live on app.state so each application
instance (and each test client) works against its own registry.
"""

from fastapi import HTTPException, Request, status

from ..capabilities import CapabilityDispatcher, CapabilityRegistry


def get_registry(request: Request) -> CapabilityRegistry:
    """
    FastAPI dependency that provides the capability registry.

    Raises:
        HTTPException: 503 if startup has not populated a registry
    """
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Capability registry is not initialized.",
        )
    return registry


def get_dispatcher(request: Request) -> CapabilityDispatcher:
    """FastAPI dependency that provides the capability dispatcher."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Capability dispatcher is not initialized.",
        )
    return dispatcher
