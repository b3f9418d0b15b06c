"""
Handler signature introspection.

Handlers are plain callables. Their positional parameters become the
capability signature; annotations map onto the parameter kinds the
adapters know how to bind (string, number, object, any).
"""

import inspect
import typing
from collections.abc import Mapping
from typing import Any, Union

from .protocols import Handler, HandlerSignature, ParameterSpec

CANCEL_TOKEN_PARAM = "cancel_token"

_NAMED_KINDS = {
    "str": "string",
    "int": "number",
    "float": "number",
    "dict": "object",
    "Dict": "object",
    "Mapping": "object",
}

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _kind_of(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "any"
    if isinstance(annotation, str):
        # Unresolved forward reference, e.g. "dict[str, Any]"
        return _NAMED_KINDS.get(annotation.split("[", 1)[0].split(".")[-1], "any")
    origin = typing.get_origin(annotation)
    if origin is Union:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        return _kind_of(args[0]) if len(args) == 1 else "any"
    target = origin or annotation
    if target is bool:
        return "any"
    if target is str:
        return "string"
    if target in (int, float):
        return "number"
    if isinstance(target, type) and issubclass(target, Mapping):
        return "object"
    return "any"


def inspect_handler(handler: Handler) -> HandlerSignature:
    """Build the capability signature of a handler."""
    sig = inspect.signature(handler)
    try:
        hints = typing.get_type_hints(handler)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to raw annotations
        hints = {}

    params: list[ParameterSpec] = []
    accepts_token = False
    for name, param in sig.parameters.items():
        if name == CANCEL_TOKEN_PARAM:
            accepts_token = True
            continue
        if param.kind not in _POSITIONAL:
            continue
        params.append(ParameterSpec(
            name=name,
            kind=_kind_of(hints.get(name, param.annotation)),
            required=param.default is inspect.Parameter.empty,
            default=None if param.default is inspect.Parameter.empty else param.default,
        ))
    return HandlerSignature(parameters=tuple(params), accepts_cancel_token=accepts_token)


def matches_kind(value: Any, kind: str) -> bool:
    """Check a runtime value against a parameter kind."""
    if kind == "string":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == "object":
        return isinstance(value, Mapping)
    return True
