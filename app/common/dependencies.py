from functools import lru_cache

from app.infrastructure.storage.audio_store import AudioStore
from app.services.service_factory import create_audio_store, create_voice_feedback_service
from app.services.voice_feedback_service import VoiceFeedbackService


@lru_cache
def get_audio_store() -> AudioStore:
    """프로세스 전역 음성 저장소 (counter 공유)"""
    return create_audio_store()


@lru_cache
def get_voice_feedback_service() -> VoiceFeedbackService:
    """
    FastAPI 의존성: 음성 피드백 서비스

    사용법:
        @router.websocket("/ws")
        async def relay(
            websocket: WebSocket,
            service: VoiceFeedbackService = Depends(get_voice_feedback_service)
        ):
            ...

    테스트에서는 app.dependency_overrides로 교체한다.
    """
    return create_voice_feedback_service(audio_store=get_audio_store())
