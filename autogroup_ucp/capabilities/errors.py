"""
Error taxonomy for capability registration and dispatch.

Registration errors (ValidationError, RegistryError) are configuration
bugs and abort startup. Dispatch errors are per-call and are converted
to transport responses by the API adapters.
"""

from typing import Optional


class CapabilityError(Exception):
    """Base class for all capability errors."""

    code = "CAPABILITY_ERROR"


# --- Validation ---


class ValidationError(CapabilityError):
    code = "VALIDATION_ERROR"


class TransportMismatch(ValidationError):
    code = "TRANSPORT_MISMATCH"


class DuplicatePrimaryBusiness(ValidationError):
    code = "DUPLICATE_PRIMARY_BUSINESS"


class GroupMismatch(ValidationError):
    code = "GROUP_MISMATCH"


class FeatureMismatch(ValidationError):
    code = "FEATURE_MISMATCH"


# --- Registry ---


class RegistryError(CapabilityError):
    code = "REGISTRY_ERROR"


class DuplicateCapability(RegistryError):
    code = "DUPLICATE_CAPABILITY"


class DuplicateGroup(RegistryError):
    code = "DUPLICATE_GROUP"


class UnknownGroup(RegistryError):
    code = "UNKNOWN_GROUP"


class RegistrySealed(RegistryError):
    code = "REGISTRY_SEALED"


# --- Dispatch ---


class DispatchError(CapabilityError):
    code = "DISPATCH_ERROR"


class CapabilityNotFound(DispatchError):
    code = "CAPABILITY_NOT_FOUND"

    def __init__(self, qualified_name: str, message: Optional[str] = None):
        self.qualified_name = qualified_name
        super().__init__(message or f"Capability not found: {qualified_name}")


class ArgumentMismatch(DispatchError):
    code = "ARGUMENT_MISMATCH"

    def __init__(self, qualified_name: str, position: int, reason: str):
        self.qualified_name = qualified_name
        self.position = position
        self.reason = reason
        super().__init__(
            f"Argument mismatch for {qualified_name} at position {position}: {reason}"
        )


class HandlerFailure(DispatchError):
    code = "HANDLER_FAILURE"

    def __init__(self, qualified_name: str, cause: BaseException):
        self.qualified_name = qualified_name
        self.cause = cause
        super().__init__(f"Handler for {qualified_name} failed: {cause!r}")


class DispatchCancelled(Exception):
    """Raised by a cancellation token inside a handler."""
