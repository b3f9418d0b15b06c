"""
REST transport adapter.

Maps POST /rest/{qualified_name} with query parameters, form fields or
a JSON object body onto a named dispatch over the REST transport.
"""

import asyncio
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ..capabilities import (
    ArgumentMismatch,
    CapabilityDispatcher,
    CapabilityNotFound,
    HandlerFailure,
    HandlerSignature,
    Transport,
)
from .dependencies import get_dispatcher

logger = logging.getLogger("autogroup.api.rest")

router = APIRouter(prefix="/rest", tags=["REST"])

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class EnvelopeResponse(BaseModel):
    """Result envelope rendered for REST callers."""
    value: Any = None
    message: Optional[str] = None
    metadata: dict[str, Any] = {}


def coerce_params(
    signature: Optional[HandlerSignature],
    params: dict[str, Any],
) -> dict[str, Any]:
    """
    Convert string parameters to the kinds the signature expects.

    Values that cannot be converted are left alone; the dispatcher
    reports them as an argument mismatch.
    """
    if signature is None:
        return params
    kinds = {p.name: p.kind for p in signature.parameters}
    coerced = dict(params)
    for name, value in params.items():
        if not isinstance(value, str):
            continue
        kind = kinds.get(name)
        if kind == "number":
            try:
                coerced[name] = int(value)
            except ValueError:
                try:
                    coerced[name] = float(value)
                except ValueError:
                    pass
        elif kind == "object":
            try:
                coerced[name] = json.loads(value)
            except json.JSONDecodeError:
                pass
    return coerced


async def _read_params(request: Request) -> dict[str, Any]:
    params: dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        raw = await request.body()
        if raw:
            try:
                body = json.loads(raw)
            except json.JSONDecodeError:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "Malformed JSON body")
            if not isinstance(body, dict):
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "JSON body must be an object")
            params.update(body)
    elif content_type.startswith(_FORM_TYPES):
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, str):
                params[key] = value
            else:
                logger.warning("Ignoring uploaded file in form field %r", key)
    return params


@router.post("/{qualified_name}", response_model=EnvelopeResponse)
async def invoke_capability(
    qualified_name: str,
    request: Request,
    dispatcher: CapabilityDispatcher = Depends(get_dispatcher),
):
    """Invoke a REST capability with named parameters."""
    params = coerce_params(
        dispatcher.registry.signature(qualified_name),
        await _read_params(request),
    )
    logger.info("REST call: %s(%s)", qualified_name, sorted(params))

    try:
        envelope = await asyncio.to_thread(
            dispatcher.dispatch_over, Transport.REST, qualified_name, params
        )
    except CapabilityNotFound as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(e))
    except ArgumentMismatch as e:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            detail={"error": e.code, "position": e.position, "message": e.reason},
        )
    except HandlerFailure as e:
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": e.code, "message": str(e.cause)},
        )

    return EnvelopeResponse(**envelope.to_dict())
