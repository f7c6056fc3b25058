import asyncio
import logging
from typing import Any, Dict, Set

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from src.routers.mcp import handle_message

router = APIRouter()
logger = logging.getLogger(__name__)


async def _reply(websocket: WebSocket, send_lock: asyncio.Lock, raw: str) -> None:
    dispatcher = websocket.app.state.container.dispatcher
    reply: Dict[str, Any] = await handle_message(raw, dispatcher)
    try:
        async with send_lock:
            await websocket.send_json(reply)
    except Exception as e:
        # Client went away while its call was in flight
        logger.error(f"Dropped reply for id={reply.get('id')!r}: {e}")


@router.websocket("/mcp")
async def mcp_socket(websocket: WebSocket):
    await websocket.accept()
    logger.info(f"MCP client connected: {websocket.client}")

    send_lock = asyncio.Lock()
    in_flight: Set[asyncio.Task[None]] = set()

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                raw = (message.get("bytes") or b"").decode("utf-8", errors="replace")
            # Messages are served concurrently; replies may go out of order.
            task = asyncio.create_task(_reply(websocket, send_lock, raw))
            in_flight.add(task)
            task.add_done_callback(in_flight.discard)
    except WebSocketDisconnect:
        logger.info(f"MCP client disconnected: {websocket.client}")
    except Exception as e:
        logger.error(f"MCP socket error {websocket.client}: {e}")
