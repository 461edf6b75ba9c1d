"""
WebSocket 피드백 릴레이

client → server: {"type": "swingAnalysis", "data": "<피드백 문장>"}
server → client: {"type": "realTimeFeedback", "data": "/audio/<file>.mp3"}

음성 생성에 실패하면 클라이언트에는 아무것도 보내지 않는다 (서버 로그만).
"""
import json
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from app.common.dependencies import get_voice_feedback_service
from app.schemas.relay_dto import RelayEventType, RelayMessage
from app.services.voice_feedback_service import VoiceFeedbackService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Feedback Relay"])


class ConnectionManager:
    """활성 WebSocket 연결 관리"""

    def __init__(self):
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"✅ Player connected. Total: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        logger.info(f"❌ Player disconnected. Remaining: {len(self.active_connections)}")

    async def send(self, websocket: WebSocket, message: RelayMessage) -> None:
        """특정 연결에만 전송"""
        await websocket.send_text(message.model_dump_json())


manager = ConnectionManager()


@router.websocket("/ws")
async def feedback_relay(
        websocket: WebSocket,
        service: VoiceFeedbackService = Depends(get_voice_feedback_service),
) -> None:
    await manager.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            await handle_message(websocket, raw, service)

    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)


async def handle_message(websocket: WebSocket, raw: str, service: VoiceFeedbackService) -> None:
    """수신 메시지 1개 처리 (잘못된 메시지는 경고 후 무시)"""
    try:
        message = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"⚠️ Invalid JSON from client: {raw[:80]}")
        return

    if not isinstance(message, dict):
        logger.warning("⚠️ Relay message must be a JSON object")
        return

    msg_type = message.get("type")
    if msg_type != RelayEventType.SWING_ANALYSIS.value:
        logger.warning(f"⚠️ Unknown message type: {msg_type}")
        return

    feedback_text = message.get("data")
    if not isinstance(feedback_text, str):
        logger.warning("⚠️ swingAnalysis payload must be a string")
        return

    logger.info(f'📥 Received Swing Feedback: "{feedback_text}" at {datetime.now().strftime("%H:%M:%S")}')

    audio_url = await service.generate(feedback_text)
    if audio_url:
        logger.info(f"📤 Sending AI Voice Feedback URL: {audio_url}")
        await manager.send(websocket, RelayMessage.real_time_feedback(audio_url))
    else:
        logger.error("❌ Failed to generate AI voice feedback.")


ROUTERS = [router]
