"""
Registry for business groups and their capabilities.

The registry is filled once during startup and then sealed. After
sealing it is read-only and can be shared across threads without
locking.
"""

import logging
from types import MappingProxyType
from typing import Any, Optional

from .errors import (
    DuplicateCapability,
    DuplicateGroup,
    RegistrySealed,
    UnknownGroup,
)
from .protocols import (
    BusinessGroup,
    CapabilityDescriptor,
    Handler,
    HandlerSignature,
)
from .signature import inspect_handler
from .validator import TransportValidator, transport_validator

logger = logging.getLogger("autogroup.capabilities.registry")


class CapabilityRegistry:
    """
    Central registry for business groups and capabilities.

    Supports:
    - Group registration with the single primary business rule
    - Capability registration gated by the transport validator
    - Lookup by qualified name or group
    - One-way sealing
    """

    def __init__(self, validator: Optional[TransportValidator] = None) -> None:
        self._validator = validator if validator is not None else transport_validator
        self._groups: dict[str, BusinessGroup] = {}
        self._capabilities: dict[str, tuple[CapabilityDescriptor, Handler]] = {}
        self._signatures: dict[str, HandlerSignature] = {}
        self._by_group: dict[str, list[CapabilityDescriptor]] = {}
        self._sealed = False

    # --- Registration ---

    def _check_open(self, what: str) -> None:
        if self._sealed:
            logger.error("Registration of %s attempted after sealing", what)
            raise RegistrySealed(f"Registry is sealed, cannot register {what}")

    def register_group(self, group: BusinessGroup) -> None:
        """Register a business group."""
        self._check_open(f"group {group.group_name}")
        if group.group_name in self._groups:
            raise DuplicateGroup(f"Group already registered: {group.group_name}")
        self._validator.validate_group(group, self._groups.values())

        self._groups[group.group_name] = group
        self._by_group[group.group_name] = []
        logger.info(
            "Registered group: %s (transports: %s%s)",
            group.group_name,
            sorted(t.value for t in group.exposed_transports),
            ", primary" if group.primary else "",
        )

    def register(self, descriptor: CapabilityDescriptor, handler: Handler) -> None:
        """Register a capability and bind its handler."""
        name = descriptor.qualified_name
        self._check_open(f"capability {name}")
        if name in self._capabilities:
            raise DuplicateCapability(f"Capability already registered: {name}")
        group = self._groups.get(descriptor.group_name)
        if group is None:
            raise UnknownGroup(
                f"Capability {name} references unknown group: {descriptor.group_name}"
            )

        signature = inspect_handler(handler)
        self._validator.validate(descriptor, group, signature=signature)

        self._capabilities[name] = (descriptor, handler)
        self._signatures[name] = signature
        self._by_group[group.group_name].append(descriptor)
        logger.info(
            "Registered capability: %s v%s (group: %s, transport: %s)",
            name,
            descriptor.version,
            group.group_name,
            descriptor.declared_transport.value,
        )

    def seal(self) -> None:
        """Close registration. Idempotent."""
        if self._sealed:
            return
        self._groups = MappingProxyType(self._groups)
        self._capabilities = MappingProxyType(self._capabilities)
        self._signatures = MappingProxyType(self._signatures)
        self._by_group = MappingProxyType(
            {name: tuple(items) for name, items in self._by_group.items()}
        )
        self._sealed = True
        logger.info(
            "Registry sealed: %d groups, %d capabilities",
            len(self._groups),
            len(self._capabilities),
        )

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    # --- Lookup ---

    def resolve(self, qualified_name: str) -> Optional[tuple[CapabilityDescriptor, Handler]]:
        """Return the descriptor and handler registered under a name."""
        return self._capabilities.get(qualified_name)

    def signature(self, qualified_name: str) -> Optional[HandlerSignature]:
        return self._signatures.get(qualified_name)

    def get_group(self, group_name: str) -> Optional[BusinessGroup]:
        return self._groups.get(group_name)

    def list_groups(self) -> list[BusinessGroup]:
        return list(self._groups.values())

    def list_by_group(self, group_name: str) -> list[CapabilityDescriptor]:
        """Descriptors of a group in registration order."""
        return list(self._by_group.get(group_name, ()))

    def list_all(self) -> list[CapabilityDescriptor]:
        return [descriptor for descriptor, _ in self._capabilities.values()]

    def primary_group(self) -> Optional[BusinessGroup]:
        for group in self._groups.values():
            if group.primary:
                return group
        return None

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)

    def build_manifest(self) -> dict[str, Any]:
        """
        Render the published business manifest.

        In-process (NONE transport) capabilities are not published.
        """
        primary = self.primary_group()
        business = None
        if primary is not None and primary.business is not None:
            business = {
                "name": primary.business.name,
                "version": primary.business.version,
            }
        return {
            "business": business,
            "groups": [group.to_dict() for group in self._groups.values()],
            "capabilities": [
                descriptor.to_dict()
                for descriptor in self.list_all()
                if descriptor.networked
            ],
        }


# Global registry instance
capability_registry = CapabilityRegistry()
