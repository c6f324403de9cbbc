"""Realtime /ws — welcome, ping/pong, error frames and relay between clients."""

import pytest
from starlette.testclient import TestClient

from signo_connect.api.routes.realtime import websocket_endpoint
from signo_connect.main import app
from signo_connect.services.connection_hub import WELCOME_MESSAGE, hub


@pytest.fixture
def ws_client():
    return TestClient(app)


def test_welcome_on_connect(ws_client):
    with ws_client.websocket_connect("/ws") as ws:
        assert ws.receive_json() == {"type": "welcome", "message": WELCOME_MESSAGE}


def test_ping_answered_with_pong(ws_client):
    with ws_client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_json({"type": "ping"})
        reply = ws.receive_json()
        assert reply["type"] == "pong"
        assert "timestamp" in reply


def test_invalid_json_gets_error_and_stays_open(ws_client):
    with ws_client.websocket_connect("/ws") as ws:
        ws.receive_json()
        ws.send_text("not json")
        assert ws.receive_json() == {"type": "error", "message": "Invalid message format"}
        ws.send_json({"type": "ping"})
        assert ws.receive_json()["type"] == "pong"


def test_messages_relayed_to_other_clients_only(ws_client):
    with ws_client.websocket_connect("/ws") as sender, \
            ws_client.websocket_connect("/ws") as receiver:
        sender.receive_json()
        receiver.receive_json()

        sender.send_json({"type": "location", "lat": 18.52, "lng": 73.85})
        relayed = receiver.receive_json()
        assert relayed["type"] == "broadcast"
        assert relayed["data"] == {"type": "location", "lat": 18.52, "lng": 73.85}

        sender.send_json({"type": "ping"})
        assert sender.receive_json()["type"] == "pong"


class _BrokenSocket:
    """Accepts, then fails on the first send."""

    async def accept(self):
        pass

    async def send_json(self, message):
        raise RuntimeError("socket closed during welcome")


async def test_failed_welcome_leaves_no_registered_socket():
    socket = _BrokenSocket()
    with pytest.raises(RuntimeError):
        await websocket_endpoint(socket)
    assert socket not in hub.connections
