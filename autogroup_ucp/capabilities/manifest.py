"""
Static startup manifest.

The host process describes its business groups and capability bindings
up front; load_manifest() registers them in order and seals the registry.
Any registration error propagates so startup aborts.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .protocols import BusinessGroup, CapabilityDescriptor, Handler
from .registry import CapabilityRegistry

logger = logging.getLogger("autogroup.capabilities.manifest")


@dataclass(frozen=True)
class CapabilityBinding:
    """A descriptor bound to the callable that serves it."""
    descriptor: CapabilityDescriptor
    handler: Handler


@dataclass(frozen=True)
class GroupManifest:
    """A business group and the capabilities it hosts."""
    group: BusinessGroup
    entries: tuple[CapabilityBinding, ...] = field(default_factory=tuple)


def load_manifest(
    registry: CapabilityRegistry,
    manifest: Iterable[GroupManifest],
    *,
    seal: bool = True,
) -> CapabilityRegistry:
    """Register every group and capability of a manifest."""
    groups = 0
    for item in manifest:
        registry.register_group(item.group)
        for binding in item.entries:
            registry.register(binding.descriptor, binding.handler)
        groups += 1

    logger.info("Loaded manifest: %d groups, %d capabilities", groups, len(registry))
    if seal:
        registry.seal()
    return registry
