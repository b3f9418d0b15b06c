"""
Data definitions for the capability system.

A capability is a single named, versioned business action. Capabilities
are grouped under a business group, which declares the transports
(REST, RPC) its capabilities may be served over.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

Handler = Callable[..., Any]


class Transport(str, Enum):
    """Protocol surface a capability may be invoked through."""
    REST = "rest"
    RPC = "rpc"
    NONE = "none"  # in-process only


class HandlerFeature(str, Enum):
    """Optional behaviours a handler can declare."""
    CANCELLABLE = "cancellable"


@dataclass(frozen=True)
class BusinessIdentity:
    """Name and version of the business published in the manifest."""
    name: str
    version: str


@dataclass(frozen=True)
class BusinessGroup:
    """A named collection of capabilities sharing an exposed transport set."""
    group_name: str
    exposed_transports: frozenset[Transport] = frozenset()
    description: str = ""
    primary: bool = False
    prompt: str = ""
    business: Optional[BusinessIdentity] = None

    def exposes(self, transport: Transport) -> bool:
        return transport in self.exposed_transports

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.group_name,
            "description": self.description,
            "transports": sorted(t.value for t in self.exposed_transports),
            "primary": self.primary,
        }


@dataclass(frozen=True)
class CapabilityDescriptor:
    """Identity and metadata for one registrable action."""
    qualified_name: str
    version: str
    group_name: str
    declared_transport: Transport = Transport.NONE
    spec_uri: Optional[str] = None
    schema_uri: Optional[str] = None
    description: str = ""
    features: frozenset[HandlerFeature] = frozenset()

    @property
    def networked(self) -> bool:
        return self.declared_transport is not Transport.NONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.qualified_name,
            "version": self.version,
            "group": self.group_name,
            "transport": self.declared_transport.value,
            "spec": self.spec_uri,
            "schema": self.schema_uri,
        }


@dataclass(frozen=True)
class ParameterSpec:
    """One positional parameter of a handler signature."""
    name: str
    kind: str  # string | number | object | any
    required: bool = True
    default: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class HandlerSignature:
    """Ordered parameters of a handler, plus cancellation support."""
    parameters: tuple[ParameterSpec, ...] = ()
    accepts_cancel_token: bool = False

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.parameters]

    @property
    def min_arity(self) -> int:
        return sum(1 for p in self.parameters if p.required)

    @property
    def max_arity(self) -> int:
        return len(self.parameters)


@dataclass
class ResultEnvelope:
    """Uniform result returned to callers regardless of transport."""
    value: Any = None
    message: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, value: Any, message: Optional[str] = None) -> "ResultEnvelope":
        return cls(value=value, message=message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "message": self.message,
            "metadata": self.metadata,
        }
