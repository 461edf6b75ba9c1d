import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence
from urllib.parse import urljoin, urlparse

import httpx

logger = logging.getLogger(__name__)


class AudioPlayer:
    """서버에서 받은 음성 URL을 내려받아 외부 플레이어(ffplay)로 재생"""

    def __init__(
        self,
        server_url: str,
        cache_dir: Path,
        command: Sequence[str] = ("ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"),
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.server_url = server_url.rstrip("/") + "/"
        self.cache_dir = Path(cache_dir)
        self.command = list(command)
        self.timeout = timeout
        self._transport = transport
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    async def download(self, audio_url: str) -> Path:
        url = urljoin(self.server_url, audio_url.lstrip("/"))
        filename = Path(urlparse(url).path).name or "feedback.mp3"
        target = self.cache_dir / filename

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(url)
            response.raise_for_status()
            target.write_bytes(response.content)

        return target

    async def play(self, audio_url: str) -> bool:
        """
        음성 재생. 실패해도 예외를 올리지 않고 False 반환 (재시도 없음).
        """
        try:
            path = await self.download(audio_url)
        except (httpx.HTTPError, OSError) as e:
            logger.error(f"⚠️ AI Voice download failed: {e}")
            return False

        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command,
                str(path),
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
            logger.info("🎧 AI Voice Feedback is playing!")
            returncode = await proc.wait()
        except OSError as e:
            logger.error(f"⚠️ AI Voice Playback Failed: {e}")
            return False

        if returncode != 0:
            logger.error(f"⚠️ AI Voice Playback Failed: player exited with {returncode}")
            return False
        return True
