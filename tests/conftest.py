"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock

from app.common.dependencies import get_audio_store, get_voice_feedback_service
from app.domain.swing.detector import SwingDetector
from app.infrastructure.storage.audio_store import AudioStore
from app.infrastructure.tts.elevenlabs_client import ElevenLabsClient
from app.services.voice_feedback_service import VoiceFeedbackService
from tests.test_helpers import RecordingTransport


# ========================================
# Application Fixtures
# ========================================

@pytest.fixture(scope="session")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def tts_transport():
    """ElevenLabs 응답을 흉내내는 MockTransport (200 + mp3 바이트)"""
    return RecordingTransport()


@pytest.fixture
def audio_store(tmp_path):
    """임시 디렉토리 음성 저장소"""
    return AudioStore(root=tmp_path / "audio", url_prefix="/audio", retention=5)


@pytest.fixture
def tts_client(tts_transport):
    return ElevenLabsClient(
        api_key="test-key",
        voice_id="test-voice",
        transport=tts_transport,
    )


@pytest.fixture
def voice_service(tts_client, audio_store):
    """MockTransport를 사용하는 실제 VoiceFeedbackService"""
    return VoiceFeedbackService(tts_client=tts_client, audio_store=audio_store)


@pytest.fixture
def client(app, voice_service, audio_store):
    """FastAPI TestClient (서비스/저장소 의존성 교체)"""
    app.dependency_overrides[get_voice_feedback_service] = lambda: voice_service
    app.dependency_overrides[get_audio_store] = lambda: audio_store
    yield TestClient(app)
    app.dependency_overrides.clear()


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def detector():
    """기본 모드 (유효 프레임마다 완료 처리)"""
    return SwingDetector()


@pytest.fixture
def transition_detector():
    """상태 전이 모드 (SWING_IN_PROGRESS → IDLE 시에만 완료 처리)"""
    return SwingDetector(completion_mode="on_transition")


# ========================================
# Mock Service Fixtures
# ========================================

@pytest.fixture
def mock_relay():
    """Mock RelayClient"""
    mock = Mock()
    mock.send_feedback = AsyncMock(return_value=True)
    mock.connect = AsyncMock()
    mock.listen = AsyncMock()
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def mock_voice_service():
    """Mock VoiceFeedbackService"""
    mock = Mock()
    mock.generate = AsyncMock(return_value="/audio/feedback_000001_deadbeef.mp3")
    return mock
