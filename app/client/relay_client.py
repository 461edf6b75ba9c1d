import asyncio
import json
import logging
from typing import Awaitable, Callable, Optional

import websockets
from websockets.exceptions import ConnectionClosed

from app.schemas.relay_dto import RelayEventType, RelayMessage

logger = logging.getLogger(__name__)

FeedbackHandler = Callable[[str], Awaitable[None]]


def to_ws_url(server_url: str, path: str = "/ws") -> str:
    """http(s)://host:port → ws(s)://host:port/ws"""
    url = server_url.rstrip("/")
    if url.startswith("https://"):
        url = "wss://" + url[len("https://"):]
    elif url.startswith("http://"):
        url = "ws://" + url[len("http://"):]
    return f"{url}{path}"


class RelayClient:
    """피드백 릴레이 WebSocket 클라이언트"""

    def __init__(self, server_url: str, on_feedback: Optional[FeedbackHandler] = None):
        """
        Args:
            server_url: 서버 URL (예: http://localhost:3000)
            on_feedback: realTimeFeedback 수신 시 호출 (음성 URL 전달)
        """
        self.ws_url = to_ws_url(server_url)
        self.on_feedback = on_feedback
        self._ws = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def connected(self) -> bool:
        return self._ws is not None

    async def connect(self) -> None:
        self._ws = await websockets.connect(self.ws_url)
        logger.info(f"✅ Connected to feedback relay: {self.ws_url}")

    async def close(self) -> None:
        if self._ws is not None:
            await self._ws.close()
            self._ws = None
        for task in list(self._tasks):
            task.cancel()

    async def send_feedback(self, feedback_text: str) -> bool:
        """swingAnalysis 전송 (응답을 기다리지 않음)"""
        if self._ws is None:
            logger.warning("⚠️ Relay not connected, feedback dropped")
            return False
        try:
            await self._ws.send(RelayMessage.swing_analysis(feedback_text).model_dump_json())
        except ConnectionClosed as e:
            logger.error(f"❌ Relay connection closed: {e}")
            self._ws = None
            return False
        return True

    async def listen(self) -> None:
        """서버 메시지 수신 루프 (연결이 끊기면 종료)"""
        if self._ws is None:
            raise RuntimeError("RelayClient.connect() must be called first")
        try:
            async for raw in self._ws:
                await self.handle_incoming(raw)
        except ConnectionClosed:
            logger.info("❌ Relay disconnected.")
        finally:
            self._ws = None

    async def handle_incoming(self, raw) -> None:
        try:
            message = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("⚠️ Invalid message from relay, ignored")
            return

        if not isinstance(message, dict) or message.get("type") != RelayEventType.REAL_TIME_FEEDBACK.value:
            logger.warning(f"⚠️ Unknown relay event: {message}")
            return

        audio_url = message.get("data")
        if not isinstance(audio_url, (str, type(None))):
            logger.warning(f"⚠️ Non-string feedback URL ignored: {audio_url!r}")
            return

        logger.info(f"🔊 Received AI Voice Feedback URL: {audio_url}")
        if not audio_url:
            logger.error("❌ No AI feedback URL received.")
            return

        if self.on_feedback:
            task = asyncio.create_task(self.on_feedback(audio_url))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
