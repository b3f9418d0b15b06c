"""
Capability system for business actions.

This module provides:
- Descriptors, business groups and the result envelope
- Transport eligibility validation
- Registry with one-way sealing
- Dispatch with argument validation and result normalization
"""

from .cancellation import CancellationToken
from .dispatcher import CapabilityDispatcher, capability_dispatcher
from .errors import (
    ArgumentMismatch,
    CapabilityError,
    CapabilityNotFound,
    DispatchCancelled,
    DispatchError,
    DuplicateCapability,
    DuplicateGroup,
    DuplicatePrimaryBusiness,
    FeatureMismatch,
    GroupMismatch,
    HandlerFailure,
    RegistryError,
    RegistrySealed,
    TransportMismatch,
    UnknownGroup,
    ValidationError,
)
from .manifest import CapabilityBinding, GroupManifest, load_manifest
from .protocols import (
    BusinessGroup,
    BusinessIdentity,
    CapabilityDescriptor,
    Handler,
    HandlerFeature,
    HandlerSignature,
    ParameterSpec,
    ResultEnvelope,
    Transport,
)
from .registry import CapabilityRegistry, capability_registry
from .signature import inspect_handler
from .validator import TransportValidator, transport_validator

__all__ = [
    # Protocols
    "BusinessGroup",
    "BusinessIdentity",
    "CapabilityDescriptor",
    "Handler",
    "HandlerFeature",
    "HandlerSignature",
    "ParameterSpec",
    "ResultEnvelope",
    "Transport",
    "inspect_handler",
    # Errors
    "CapabilityError",
    "ValidationError",
    "TransportMismatch",
    "DuplicatePrimaryBusiness",
    "GroupMismatch",
    "FeatureMismatch",
    "RegistryError",
    "DuplicateCapability",
    "DuplicateGroup",
    "UnknownGroup",
    "RegistrySealed",
    "DispatchError",
    "CapabilityNotFound",
    "ArgumentMismatch",
    "HandlerFailure",
    "DispatchCancelled",
    # Validation
    "TransportValidator",
    "transport_validator",
    # Registry
    "CapabilityRegistry",
    "capability_registry",
    # Dispatch
    "CancellationToken",
    "CapabilityDispatcher",
    "capability_dispatcher",
    # Manifest
    "CapabilityBinding",
    "GroupManifest",
    "load_manifest",
]
