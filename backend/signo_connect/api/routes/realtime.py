"""Realtime — /ws relay: welcome on connect, ping/pong, broadcast to other clients.

Invariants:
    - Frames that are not JSON get {"type": "error"} and the socket stays open
    - {"type": "ping"} is answered to the sender only, never broadcast
    - The socket leaves the hub however the handler exits, including a failed welcome
"""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from signo_connect.services.connection_hub import hub, utc_timestamp

logger = logging.getLogger(__name__)
router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    try:
        await hub.connect(websocket)
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json(
                    {"type": "error", "message": "Invalid message format"},
                )
                continue
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong", "timestamp": utc_timestamp()})
                continue
            await hub.broadcast(
                {"type": "broadcast", "data": message, "timestamp": utc_timestamp()},
                sender=websocket,
            )
    except WebSocketDisconnect:
        pass
    finally:
        hub.disconnect(websocket)
