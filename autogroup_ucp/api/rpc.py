"""
JSON-RPC 2.0 transport adapter.

POST /rpc with {"jsonrpc": "2.0", "method": <qualified name>,
"params": [...] | {...}, "id": ...}. Errors are reported in the JSON-RPC
error object; the HTTP status stays 200. Notifications (no "id" member)
are executed but answered with an empty 204.
"""

import asyncio
import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, ValidationError

from ..capabilities import (
    ArgumentMismatch,
    CapabilityDispatcher,
    CapabilityNotFound,
    HandlerFailure,
    Transport,
)
from .dependencies import get_dispatcher

logger = logging.getLogger("autogroup.api.rpc")

router = APIRouter(tags=["RPC"])

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class RpcRequest(BaseModel):
    """A single JSON-RPC 2.0 request."""
    jsonrpc: str
    method: str
    params: Union[list[Any], dict[str, Any]] = []
    id: Optional[Union[int, str]] = None


def _error(request_id: Any, code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "error": error, "id": request_id}


async def _notify(dispatcher: CapabilityDispatcher, call: RpcRequest) -> None:
    logger.info("RPC notification: %s", call.method)
    try:
        await asyncio.to_thread(
            dispatcher.dispatch_over, Transport.RPC, call.method, call.params
        )
    except (CapabilityNotFound, ArgumentMismatch) as e:
        logger.warning("Dropped RPC notification %s: %s", call.method, e)
    except HandlerFailure as e:
        logger.warning("RPC notification %s failed: %s", call.method, e.cause)


@router.post("/rpc")
async def rpc_endpoint(
    request: Request,
    dispatcher: CapabilityDispatcher = Depends(get_dispatcher),
):
    """Handle a JSON-RPC call to an RPC capability."""
    try:
        payload = await request.json()
    except ValueError:
        return _error(None, PARSE_ERROR, "Parse error")

    request_id = payload.get("id") if isinstance(payload, dict) else None
    try:
        call = RpcRequest.model_validate(payload)
    except ValidationError as e:
        return _error(request_id, INVALID_REQUEST, "Invalid Request", e.errors(include_url=False))
    if call.jsonrpc != "2.0":
        return _error(request_id, INVALID_REQUEST, "Invalid Request", "jsonrpc must be '2.0'")

    if "id" not in payload:
        await _notify(dispatcher, call)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    logger.info("RPC call: %s (id=%s)", call.method, call.id)
    try:
        envelope = await asyncio.to_thread(
            dispatcher.dispatch_over, Transport.RPC, call.method, call.params
        )
    except CapabilityNotFound as e:
        return _error(call.id, METHOD_NOT_FOUND, "Method not found", str(e))
    except ArgumentMismatch as e:
        return _error(
            call.id, INVALID_PARAMS, "Invalid params",
            {"position": e.position, "reason": e.reason},
        )
    except HandlerFailure as e:
        return _error(call.id, INTERNAL_ERROR, "Internal error", str(e.cause))

    return {"jsonrpc": "2.0", "result": envelope.to_dict(), "id": call.id}
