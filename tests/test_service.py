"""
Service Layer Tests

VoiceFeedbackService 비즈니스 로직 테스트
"""
import pytest

from app.infrastructure.tts.elevenlabs_client import ElevenLabsClient
from app.services.voice_feedback_service import VoiceFeedbackService
from tests.test_helpers import FailingTransport, RecordingTransport


class TestVoiceFeedbackService:
    """VoiceFeedbackService 테스트"""

    @pytest.mark.asyncio
    async def test_generate_saves_audio_and_returns_url(self, voice_service, audio_store, tts_transport):
        """정상 생성: API 1회 호출, 파일 1개, 공개 URL 반환"""
        url = await voice_service.generate("That was a home run")

        assert url is not None
        assert url.startswith("/audio/feedback_")
        assert len(tts_transport.requests) == 1

        files = audio_store.list_files()
        assert len(files) == 1
        assert files[0].read_bytes() == tts_transport.content
        assert url.endswith(files[0].name)

    @pytest.mark.asyncio
    async def test_each_request_gets_own_file(self, voice_service, audio_store):
        """동시 요청이 같은 파일을 덮어쓰지 않음"""
        first = await voice_service.generate("Your shifting early. Try engaging your hips.")
        second = await voice_service.generate("That was a home run")

        assert first != second
        assert len(audio_store.list_files()) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   "])
    async def test_empty_text_skipped(self, voice_service, tts_transport, text):
        assert await voice_service.generate(text) is None
        assert tts_transport.requests == []

    @pytest.mark.asyncio
    async def test_api_error_returns_none(self, audio_store):
        """API 인증 실패 → None, 파일 없음"""
        client = ElevenLabsClient(
            api_key="bad-key", voice_id="v", transport=RecordingTransport(status_code=401, content=b"unauthorized")
        )
        service = VoiceFeedbackService(tts_client=client, audio_store=audio_store)

        assert await service.generate("That was a home run") is None
        assert audio_store.list_files() == []

    @pytest.mark.asyncio
    async def test_network_error_returns_none(self, audio_store):
        client = ElevenLabsClient(api_key="k", voice_id="v", transport=FailingTransport())
        service = VoiceFeedbackService(tts_client=client, audio_store=audio_store)

        assert await service.generate("That was a home run") is None
        assert audio_store.list_files() == []

    @pytest.mark.asyncio
    async def test_missing_api_key_returns_none(self, audio_store):
        client = ElevenLabsClient(api_key=None, voice_id="v", transport=RecordingTransport())
        service = VoiceFeedbackService(tts_client=client, audio_store=audio_store)

        assert await service.generate("That was a home run") is None

    @pytest.mark.asyncio
    async def test_filesystem_error_returns_none(self, tts_client, audio_store, tmp_path):
        """저장 디렉토리가 사라지면 OSError → None"""
        service = VoiceFeedbackService(tts_client=tts_client, audio_store=audio_store)
        audio_store.root.rmdir()

        assert await service.generate("That was a home run") is None


class TestServiceFactory:
    """ServiceFactory 테스트"""

    def test_create_voice_feedback_service(self, audio_store):
        from app.services.service_factory import create_voice_feedback_service
        from app.config.settings import settings

        service = create_voice_feedback_service(audio_store=audio_store)

        assert service.audio_store is audio_store
        assert service.tts_client.voice_id == settings.ELEVENLABS_VOICE_ID
        assert service.tts_client.model_id == settings.ELEVENLABS_MODEL_ID
        assert service.tts_client.timeout == settings.TTS_TIMEOUT_S

    def test_create_audio_store_uses_settings(self):
        from app.services.service_factory import create_audio_store
        from app.config.settings import settings

        store = create_audio_store()

        assert store.root == settings.AUDIO_DIR
        assert store.retention == settings.AUDIO_RETENTION
