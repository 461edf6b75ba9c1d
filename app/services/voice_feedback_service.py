"""
음성 피드백 Service Layer
피드백 문장 → ElevenLabs TTS → 음성 파일 저장 → 공개 URL
"""
import logging
from typing import Optional

import httpx

from app.common.exceptions import VoiceSynthesisError
from app.infrastructure.storage.audio_store import AudioStore
from app.infrastructure.tts.elevenlabs_client import ElevenLabsClient

logger = logging.getLogger(__name__)


class VoiceFeedbackService:
    """
    음성 피드백 게이트웨이

    책임:
    - TTS 호출 및 응답 스트림 저장
    - 실패 시 예외 대신 None 반환 (호출 측은 로그만 남김)
    """

    def __init__(self, tts_client: ElevenLabsClient, audio_store: AudioStore):
        self.tts_client = tts_client
        self.audio_store = audio_store

    async def generate(self, feedback_text: str) -> Optional[str]:
        """
        피드백 문장으로 음성 생성

        Args:
            feedback_text: 읽을 문장 (비어 있으면 안 됨)

        Returns:
            음성 파일 공개 URL, 실패 시 None
        """
        if not feedback_text or not feedback_text.strip():
            logger.warning("⚠️ Empty feedback text, skipping voice generation")
            return None

        target = self.audio_store.reserve()
        try:
            async with self.tts_client.stream_speech(feedback_text) as chunks:
                await self.audio_store.write_stream(target, chunks)

        except VoiceSynthesisError as e:
            logger.error(f"❌ Error requesting ElevenLabs API: {e} {e.detail or ''}".rstrip())
            self.audio_store.discard(target)
            return None
        except httpx.HTTPError as e:
            logger.error(f"❌ ElevenLabs connection failed: {type(e).__name__}: {e}")
            self.audio_store.discard(target)
            return None
        except OSError as e:
            logger.error(f"❌ Failed to save AI voice: {e}")
            self.audio_store.discard(target)
            return None

        return self.audio_store.public_url(target)
