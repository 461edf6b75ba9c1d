import asyncio
import json
from unittest.mock import AsyncMock

import pytest
from websockets.exceptions import ConnectionClosed

from app.client import relay_client
from app.client.relay_client import RelayClient, to_ws_url


@pytest.mark.parametrize(
    "server_url, expected",
    [
        ("http://localhost:3000", "ws://localhost:3000/ws"),
        ("https://coach.example.com/", "wss://coach.example.com/ws"),
        ("ws://10.0.0.2:3000", "ws://10.0.0.2:3000/ws"),
    ],
)
def test_to_ws_url(server_url, expected):
    assert to_ws_url(server_url) == expected


@pytest.mark.asyncio
async def test_send_feedback_without_connection_is_dropped():
    client = RelayClient("http://localhost:3000")
    assert await client.send_feedback("That was a home run") is False


@pytest.mark.asyncio
async def test_send_feedback_message_format():
    client = RelayClient("http://localhost:3000")
    client._ws = AsyncMock()

    assert await client.send_feedback("That was a home run") is True

    sent = json.loads(client._ws.send.await_args.args[0])
    assert sent["type"] == "swingAnalysis"
    assert sent["data"] == "That was a home run"
    assert isinstance(sent["timestamp"], int)


@pytest.mark.asyncio
async def test_real_time_feedback_dispatched_to_handler():
    handler = AsyncMock()
    client = RelayClient("http://localhost:3000", on_feedback=handler)

    await client.handle_incoming(json.dumps({"type": "realTimeFeedback", "data": "/audio/a.mp3"}))
    await asyncio.sleep(0)

    handler.assert_awaited_once_with("/audio/a.mp3")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        json.dumps({"type": "somethingElse", "data": "/audio/a.mp3"}),
        json.dumps({"type": "realTimeFeedback", "data": ""}),
        json.dumps({"type": "realTimeFeedback", "data": 42}),
        json.dumps({"type": "realTimeFeedback", "data": ["/audio/a.mp3"]}),
        json.dumps(["realTimeFeedback"]),
    ],
)
async def test_ignored_messages(raw):
    handler = AsyncMock()
    client = RelayClient("http://localhost:3000", on_feedback=handler)

    await client.handle_incoming(raw)
    await asyncio.sleep(0)

    handler.assert_not_called()


class FakeConnection:
    """메시지를 순서대로 돌려준 뒤 연결 종료 예외를 내는 WebSocket"""

    def __init__(self, messages):
        self.messages = messages
        self.close = AsyncMock()

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for raw in self.messages:
            yield raw
        raise ConnectionClosed(None, None)


@pytest.mark.asyncio
async def test_connect_uses_ws_url(monkeypatch):
    connection = FakeConnection([])
    connect = AsyncMock(return_value=connection)
    monkeypatch.setattr(relay_client.websockets, "connect", connect)
    client = RelayClient("http://localhost:3000")

    await client.connect()

    connect.assert_awaited_once_with("ws://localhost:3000/ws")
    assert client.connected is True


@pytest.mark.asyncio
async def test_listen_dispatches_until_connection_closed():
    handler = AsyncMock()
    client = RelayClient("http://localhost:3000", on_feedback=handler)
    client._ws = FakeConnection([
        json.dumps({"type": "realTimeFeedback", "data": "/audio/a.mp3"}),
        "not json",
        json.dumps({"type": "realTimeFeedback", "data": "/audio/b.mp3"}),
    ])

    await client.listen()
    await asyncio.sleep(0.01)

    assert [c.args[0] for c in handler.await_args_list] == ["/audio/a.mp3", "/audio/b.mp3"]
    assert client.connected is False
    assert await client.send_feedback("That was a home run") is False


@pytest.mark.asyncio
async def test_listen_requires_connection():
    client = RelayClient("http://localhost:3000")

    with pytest.raises(RuntimeError):
        await client.listen()
