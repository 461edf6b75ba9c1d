import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from app.common.exceptions import VoiceSynthesisError

logger = logging.getLogger(__name__)


class ElevenLabsClient:
    """ElevenLabs text-to-speech 스트리밍 클라이언트"""

    def __init__(
        self,
        api_key: Optional[str],
        voice_id: str,
        model_id: str = "eleven_monolingual_v1",
        stability: float = 0.5,
        similarity_boost: float = 0.8,
        base_url: str = "https://api.elevenlabs.io",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: ElevenLabs API 키 (xi-api-key 헤더)
            voice_id: 음성 ID
            model_id: TTS 모델 ID
            stability: voice_settings.stability
            similarity_boost: voice_settings.similarity_boost
            base_url: API 서버 URL
            timeout: 타임아웃(초)
            transport: httpx transport (테스트용 MockTransport 주입)
        """
        self.api_key = api_key
        self.voice_id = voice_id
        self.model_id = model_id
        self.stability = stability
        self.similarity_boost = similarity_boost
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

        if not api_key:
            logger.warning("⚠️ ELEVENLABS_API_KEY is not set - voice feedback will fail")

    @property
    def stream_url(self) -> str:
        return f"{self.base_url}/v1/text-to-speech/{self.voice_id}/stream"

    def build_payload(self, text: str) -> dict:
        return {
            "text": text,
            "model_id": self.model_id,
            "voice_settings": {
                "stability": self.stability,
                "similarity_boost": self.similarity_boost,
            },
        }

    @asynccontextmanager
    async def stream_speech(self, text: str) -> AsyncIterator[AsyncIterator[bytes]]:
        """
        텍스트 → 음성 스트리밍

        사용법:
            async with client.stream_speech("That was a home run") as chunks:
                async for chunk in chunks:
                    ...

        Raises:
            VoiceSynthesisError: API 키 누락 또는 2xx 이외 응답
            httpx.HTTPError: 네트워크 오류
        """
        if not self.api_key:
            raise VoiceSynthesisError("ELEVENLABS_API_KEY is not configured")

        headers = {
            "xi-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        logger.info(f"🎙️ Requesting AI voice from ElevenLabs: {text}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            async with client.stream(
                "POST",
                self.stream_url,
                json=self.build_payload(text),
                headers=headers,
            ) as response:
                if response.status_code >= 300:
                    body = await response.aread()
                    detail = body.decode("utf-8", errors="replace")
                    raise VoiceSynthesisError(
                        f"ElevenLabs API error: {response.status_code}",
                        status_code=response.status_code,
                        detail=detail,
                    )

                yield response.aiter_bytes()
