"""
Capability discovery endpoints.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..capabilities import CapabilityRegistry
from .dependencies import get_registry

logger = logging.getLogger("autogroup.api.capabilities")

router = APIRouter(tags=["Capabilities"])


# --- Response Models ---


class CapabilityInfo(BaseModel):
    """Published capability metadata."""
    name: str
    version: str
    group: str
    transport: str
    spec: Optional[str] = None
    schema_uri: Optional[str] = None
    description: str = ""
    parameters: list[str] = []


class GroupInfo(BaseModel):
    """Business group metadata."""
    name: str
    description: str
    transports: list[str]
    primary: bool
    capability_count: int


def _capability_info(registry: CapabilityRegistry, descriptor) -> CapabilityInfo:
    signature = registry.signature(descriptor.qualified_name)
    return CapabilityInfo(
        name=descriptor.qualified_name,
        version=descriptor.version,
        group=descriptor.group_name,
        transport=descriptor.declared_transport.value,
        spec=descriptor.spec_uri,
        schema_uri=descriptor.schema_uri,
        description=descriptor.description,
        parameters=signature.names if signature else [],
    )


# --- Endpoints ---


@router.get("/capabilities", response_model=list[CapabilityInfo])
async def list_capabilities(
    transport: Optional[str] = None,
    registry: CapabilityRegistry = Depends(get_registry),
):
    """
    List all registered capabilities.

    Optionally filter by declared transport (rest, rpc, none).
    """
    descriptors = registry.list_all()
    if transport:
        descriptors = [d for d in descriptors if d.declared_transport.value == transport.lower()]
    return [_capability_info(registry, d) for d in descriptors]


@router.get("/groups", response_model=list[GroupInfo])
async def list_groups(registry: CapabilityRegistry = Depends(get_registry)):
    """List all business groups."""
    return [
        GroupInfo(
            **group.to_dict(),
            capability_count=len(registry.list_by_group(group.group_name)),
        )
        for group in registry.list_groups()
    ]


@router.get("/groups/{group_name}/capabilities", response_model=list[CapabilityInfo])
async def list_group_capabilities(
    group_name: str,
    registry: CapabilityRegistry = Depends(get_registry),
):
    """List a group's capabilities in registration order."""
    if registry.get_group(group_name) is None:
        raise HTTPException(404, f"Group not found: {group_name}")
    return [_capability_info(registry, d) for d in registry.list_by_group(group_name)]


@router.get("/manifest")
async def get_manifest(registry: CapabilityRegistry = Depends(get_registry)) -> dict[str, Any]:
    """Business manifest of published capabilities."""
    return registry.build_manifest()
