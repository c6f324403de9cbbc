"""Connection Hub — tracks open /ws sockets and relays messages between them.

Invariants:
    - A sender never receives its own broadcast
    - A socket that fails on send is dropped from the hub
    - Messages are dicts; timestamps are ISO-8601 UTC

Design Decisions:
    - Module-level hub instance: single-process uvicorn, no cross-worker fan-out
"""

import logging
from datetime import datetime, timezone

from fastapi import WebSocket

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Connected to SIGNO Connect WebSocket server"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class ConnectionHub:
    """Set of live WebSocket connections."""

    def __init__(self):
        self.connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.connections.append(websocket)
        logger.info(f"WebSocket connected ({len(self.connections)} open)")
        await websocket.send_json({"type": "welcome", "message": WELCOME_MESSAGE})

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(f"WebSocket disconnected ({len(self.connections)} open)")

    async def broadcast(self, message: dict, sender: WebSocket | None = None) -> None:
        dropped = []
        for connection in list(self.connections):
            if connection is sender:
                continue
            try:
                await connection.send_json(message)
            except (RuntimeError, OSError) as e:
                logger.warning(f"Dropping WebSocket after send failure: {e}")
                dropped.append(connection)
        for connection in dropped:
            self.disconnect(connection)


hub = ConnectionHub()
