import json
import logging
from typing import Any, Dict

from fastapi import APIRouter

from src.metrics import RPC_MESSAGES
from src.rpc.types import (
    ErrorCode,
    JsonRpcRequest,
    Method,
    ToolCallParams,
    error_message,
    result_message,
)
from src.tools.dispatcher import ToolDispatcher
from src.tools.registry import list_tools

router = APIRouter(tags=["mcp"])
logger = logging.getLogger(__name__)


@router.get("/mcp")
def mcp_ready() -> Dict[str, Any]:
    """Readiness probe for MCP UIs; the WebSocket lives on the same path."""
    return {"status": "ready", "mcp": True}


async def handle_message(raw: str, dispatcher: ToolDispatcher) -> Dict[str, Any]:
    """
    Process one inbound JSON-RPC text frame and build its single reply.

    Never raises: every failure becomes an error envelope.
    """
    try:
        payload = json.loads(raw)
    except ValueError:
        RPC_MESSAGES.labels(method="invalid").inc()
        return error_message(None, ErrorCode.PARSE_ERROR, "Invalid JSON")

    req = JsonRpcRequest.from_payload(payload)
    method = req.method if isinstance(req.method, str) else None
    RPC_MESSAGES.labels(
        method=method if method in (Method.TOOLS_LIST, Method.TOOLS_CALL) else "other"
    ).inc()

    try:
        if method == Method.TOOLS_LIST:
            return result_message(req.id, {"tools": list_tools(), "nextCursor": None})

        if method == Method.TOOLS_CALL:
            params = ToolCallParams.from_params(req.params)
            result = await dispatcher.call(params.name, params.arguments or {})
            return result_message(req.id, result)

        return error_message(req.id, ErrorCode.METHOD_NOT_FOUND, "Unknown method")
    except Exception as e:
        logger.warning(f"RPC {method} (id={req.id!r}) failed: {e}")
        return error_message(req.id, ErrorCode.SERVER_ERROR, str(e) or "Internal MCP error")
