from app.config.settings import settings

from app.services.voice_feedback_service import VoiceFeedbackService
from app.infrastructure.tts.elevenlabs_client import ElevenLabsClient
from app.infrastructure.storage.audio_store import AudioStore


def create_audio_store() -> AudioStore:
    return AudioStore(
        root=settings.AUDIO_DIR,
        url_prefix=settings.AUDIO_URL_PREFIX,
        retention=settings.AUDIO_RETENTION,
    )


def create_voice_feedback_service(audio_store: AudioStore | None = None) -> VoiceFeedbackService:
    """
    VoiceFeedbackService 인스턴스 생성

    Args:
        audio_store: 공유할 저장소 (None이면 settings 기준으로 새로 생성)

    Returns:
        VoiceFeedbackService 인스턴스
    """
    # Infrastructure 컴포넌트 초기화
    tts_client = ElevenLabsClient(
        api_key=settings.ELEVENLABS_API_KEY,
        voice_id=settings.ELEVENLABS_VOICE_ID,
        model_id=settings.ELEVENLABS_MODEL_ID,
        stability=settings.TTS_STABILITY,
        similarity_boost=settings.TTS_SIMILARITY_BOOST,
        base_url=settings.ELEVENLABS_BASE_URL,
        timeout=settings.TTS_TIMEOUT_S,
    )

    return VoiceFeedbackService(
        tts_client=tts_client,
        audio_store=audio_store or create_audio_store(),
    )
