"""
Transport eligibility checks run at registration time.

A capability may only declare a networked transport that its business
group actually exposes, and only one group per registry may carry the
primary business marker. These checks are pure: callers decide whether
to abort startup.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from .errors import (
    DuplicatePrimaryBusiness,
    FeatureMismatch,
    GroupMismatch,
    TransportMismatch,
)
from .protocols import (
    BusinessGroup,
    CapabilityDescriptor,
    HandlerFeature,
    HandlerSignature,
    Transport,
)

logger = logging.getLogger("autogroup.capabilities.validator")


class TransportValidator:
    """Validates descriptors and groups before they enter the registry."""

    def validate(
        self,
        descriptor: CapabilityDescriptor,
        group: BusinessGroup,
        *,
        signature: Optional[HandlerSignature] = None,
    ) -> None:
        """
        Check that a descriptor may be hosted by a group.

        Raises:
            GroupMismatch: descriptor names a different group
            TransportMismatch: declared transport not exposed by the group
            FeatureMismatch: declared feature not supported by the handler
        """
        if descriptor.group_name != group.group_name:
            raise GroupMismatch(
                f"Capability {descriptor.qualified_name} belongs to group "
                f"'{descriptor.group_name}', not '{group.group_name}'"
            )

        transport = descriptor.declared_transport
        if transport is not Transport.NONE and not group.exposes(transport):
            raise TransportMismatch(
                f"Group {group.group_name} must expose {transport.name} transport "
                f"to host capability {descriptor.qualified_name}"
            )

        if (
            signature is not None
            and HandlerFeature.CANCELLABLE in descriptor.features
            and not signature.accepts_cancel_token
        ):
            raise FeatureMismatch(
                f"Capability {descriptor.qualified_name} is declared cancellable "
                "but its handler does not accept a cancel_token"
            )

    def validate_group(
        self,
        group: BusinessGroup,
        registered: Iterable[BusinessGroup],
    ) -> None:
        """
        Check a group against the groups already registered.

        Raises:
            TransportMismatch: group exposes the NONE transport
            DuplicatePrimaryBusiness: a primary group already exists
        """
        if Transport.NONE in group.exposed_transports:
            raise TransportMismatch(
                f"Group {group.group_name} cannot expose the NONE transport"
            )

        if not group.primary:
            return
        for existing in registered:
            if existing.primary:
                logger.error(
                    "Rejected primary group %s: %s is already the primary business",
                    group.group_name,
                    existing.group_name,
                )
                raise DuplicatePrimaryBusiness(
                    f"Only one group can be the primary business: "
                    f"'{existing.group_name}' is already primary"
                )


# Default validator instance
transport_validator = TransportValidator()
