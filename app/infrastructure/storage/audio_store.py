import asyncio
import itertools
import logging
import re
import threading
import uuid
from pathlib import Path
from typing import AsyncIterator, Optional

logger = logging.getLogger(__name__)

_AUDIO_NAME = re.compile(r"^feedback_\d+_[0-9a-f]{8}\.mp3$")


class AudioStore:
    """
    생성된 음성 파일 저장소 (로컬 디스크)

    요청마다 고유한 파일명을 발급하므로 동시 요청이 같은 파일을 덮어쓰지 않는다.
    """

    def __init__(self, root: Path, url_prefix: str = "/audio", retention: int = 20):
        """
        Args:
            root: 저장 디렉토리
            url_prefix: 공개 URL prefix
            retention: 보관할 최대 파일 수 (초과 시 오래된 것부터 삭제)
        """
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        self.retention = retention
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self.root.mkdir(parents=True, exist_ok=True)

    def reserve(self) -> Path:
        """새 파일 경로 발급 (counter + uuid)"""
        with self._lock:
            seq = next(self._counter)
        unique_id = str(uuid.uuid4()).replace("-", "")[:8]
        return self.root / f"feedback_{seq:06d}_{unique_id}.mp3"

    async def write_stream(self, target: Path, chunks: AsyncIterator[bytes]) -> int:
        """
        바이트 스트림을 파일로 저장 (.part에 쓰고 완료 후 rename)

        Returns:
            저장된 바이트 수
        """
        partial = target.with_suffix(target.suffix + ".part")
        written = 0
        try:
            # 디스크 I/O는 워커 스레드에서
            f = await asyncio.to_thread(open, partial, "wb")
            try:
                async for chunk in chunks:
                    await asyncio.to_thread(f.write, chunk)
                    written += len(chunk)
            finally:
                await asyncio.to_thread(f.close)
            await asyncio.to_thread(partial.replace, target)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

        logger.info(f"✅ AI Voice Saved: {target} ({written} bytes)")
        await asyncio.to_thread(self.prune)
        return written

    def discard(self, target: Path) -> None:
        target.unlink(missing_ok=True)
        target.with_suffix(target.suffix + ".part").unlink(missing_ok=True)

    def public_url(self, target: Path) -> str:
        return f"{self.url_prefix}/{target.name}"

    def resolve(self, filename: str) -> Optional[Path]:
        """공개 파일명 → 실제 경로 (형식 불일치/미존재 시 None)"""
        if not _AUDIO_NAME.match(filename):
            return None
        path = self.root / filename
        return path if path.is_file() else None

    def list_files(self) -> list[Path]:
        """저장된 파일 (오래된 순)"""
        files = [p for p in self.root.glob("feedback_*.mp3") if p.is_file()]
        return sorted(files, key=lambda p: (p.stat().st_mtime, p.name))

    def prune(self) -> int:
        """retention 초과분 삭제. 삭제한 파일 수 반환."""
        if self.retention <= 0:
            return 0
        files = self.list_files()
        excess = files[: max(0, len(files) - self.retention)]
        for p in excess:
            try:
                p.unlink()
                logger.info(f"🗑️ 오래된 음성 파일 삭제: {p.name}")
            except FileNotFoundError:
                pass
        return len(excess)
