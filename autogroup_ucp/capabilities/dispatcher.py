"""
Dispatch of calls to registered capabilities.

The dispatcher is transport-agnostic: adapters map an inbound REST or
RPC request to a qualified name plus arguments and hand it over here.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .cancellation import CancellationToken
from .errors import ArgumentMismatch, CapabilityNotFound, HandlerFailure
from .protocols import HandlerSignature, ResultEnvelope, Transport
from .registry import CapabilityRegistry, capability_registry
from .signature import CANCEL_TOKEN_PARAM, matches_kind

logger = logging.getLogger("autogroup.capabilities.dispatcher")


class CapabilityDispatcher:
    """Resolves, validates and invokes capability handlers."""

    def __init__(self, registry: Optional[CapabilityRegistry] = None):
        self.registry = registry if registry is not None else capability_registry

    def dispatch(
        self,
        qualified_name: str,
        args: Sequence[Any] = (),
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ResultEnvelope:
        """
        Invoke a capability with ordered arguments.

        Args:
            qualified_name: Globally unique capability name
            args: Arguments in signature order
            cancel_token: Passed to handlers that accept one

        Returns:
            ResultEnvelope wrapping the handler result

        Raises:
            TypeError: args is a str or bytes instead of a sequence of arguments
            CapabilityNotFound: no capability under that name
            ArgumentMismatch: arguments do not fit the handler signature
            HandlerFailure: the handler raised
        """
        if isinstance(args, (str, bytes)):
            raise TypeError(
                f"args for {qualified_name} must be a sequence of arguments, "
                f"not {type(args).__name__}"
            )
        entry = self.registry.resolve(qualified_name)
        if entry is None:
            logger.warning("Capability not found: %s", qualified_name)
            raise CapabilityNotFound(qualified_name)
        descriptor, handler = entry
        signature = self.registry.signature(qualified_name)

        args = list(args)
        self._check_arguments(qualified_name, signature, args)

        kwargs = {}
        if cancel_token is not None and signature.accepts_cancel_token:
            kwargs[CANCEL_TOKEN_PARAM] = cancel_token

        logger.debug("Dispatching %s v%s%s", qualified_name, descriptor.version, tuple(args))
        try:
            result = handler(*args, **kwargs)
        except Exception as e:
            logger.exception("Error executing capability %s", qualified_name)
            raise HandlerFailure(qualified_name, e) from e

        if isinstance(result, ResultEnvelope):
            return result
        return ResultEnvelope.of(result)

    def dispatch_named(
        self,
        qualified_name: str,
        params: Mapping[str, Any],
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ResultEnvelope:
        """Invoke a capability with named arguments."""
        signature = self.registry.signature(qualified_name)
        if signature is None:
            logger.warning("Capability not found: %s", qualified_name)
            raise CapabilityNotFound(qualified_name)
        args = self.bind_named(qualified_name, signature, params)
        return self.dispatch(qualified_name, args, cancel_token=cancel_token)

    def dispatch_over(
        self,
        transport: Transport,
        qualified_name: str,
        args: Sequence[Any] | Mapping[str, Any] = (),
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ResultEnvelope:
        """
        Invoke a capability on behalf of a networked transport adapter.

        Capabilities not declared for the transport are reported as not
        found, so in-process capabilities never leak onto the network.
        """
        entry = self.registry.resolve(qualified_name)
        if entry is None or entry[0].declared_transport is not transport:
            logger.warning(
                "Capability %s not exposed over %s", qualified_name, transport.value
            )
            raise CapabilityNotFound(
                qualified_name,
                f"Capability not found over {transport.value}: {qualified_name}",
            )
        if isinstance(args, Mapping):
            return self.dispatch_named(qualified_name, args, cancel_token=cancel_token)
        return self.dispatch(qualified_name, args, cancel_token=cancel_token)

    @staticmethod
    def bind_named(
        qualified_name: str,
        signature: HandlerSignature,
        params: Mapping[str, Any],
    ) -> list[Any]:
        """
        Order named arguments by the handler signature.

        An omitted optional parameter is filled with its default when a
        later parameter is supplied. Trailing omitted ones are left off.
        """
        names = signature.names
        unknown = [key for key in params if key not in names]
        if unknown:
            raise ArgumentMismatch(
                qualified_name, len(names), f"unexpected parameter '{unknown[0]}'"
            )
        args: list[Any] = []
        gap: list[Any] = []
        for position, spec in enumerate(signature.parameters):
            if spec.name in params:
                args.extend(gap)
                gap = []
                args.append(params[spec.name])
            elif spec.required:
                raise ArgumentMismatch(
                    qualified_name, position, f"missing argument '{spec.name}'"
                )
            else:
                gap.append(spec.default)
        return args

    @staticmethod
    def _check_arguments(
        qualified_name: str,
        signature: HandlerSignature,
        args: list[Any],
    ) -> None:
        if len(args) > signature.max_arity:
            raise ArgumentMismatch(
                qualified_name,
                signature.max_arity,
                f"expected at most {signature.max_arity} arguments, got {len(args)}",
            )
        if len(args) < signature.min_arity:
            missing = signature.parameters[len(args)]
            raise ArgumentMismatch(
                qualified_name, len(args), f"missing argument '{missing.name}'"
            )
        for position, (spec, value) in enumerate(zip(signature.parameters, args)):
            if not spec.required and (value is None or value is spec.default):
                continue
            if not matches_kind(value, spec.kind):
                raise ArgumentMismatch(
                    qualified_name,
                    position,
                    f"'{spec.name}' expects {spec.kind}, got {type(value).__name__}",
                )


# Global dispatcher instance
capability_dispatcher = CapabilityDispatcher()
