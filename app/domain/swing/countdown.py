"""
스윙 사이 카운트다운 게이트
게이트가 닫혀 있는 동안 캡처 루프는 감지를 건너뛴다.
"""
import asyncio
import logging
from typing import Callable, Optional

from app.constants import COUNTDOWN_TICKS, COUNTDOWN_INTERVAL_S

logger = logging.getLogger(__name__)


class CountdownGate:
    """N틱 카운트다운 후 다음 스윙 허용"""

    def __init__(
        self,
        ticks: int = COUNTDOWN_TICKS,
        interval_s: float = COUNTDOWN_INTERVAL_S,
        on_tick: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            ticks: 게이트를 다시 여는 데 필요한 틱 수
            interval_s: 틱 간격(초)
            on_tick: 상태 문구 콜백 (UI 표시용)
        """
        self.ticks = ticks
        self.interval_s = interval_s
        self.on_tick = on_tick
        self.allowed = False
        self.remaining = 0
        self._task: Optional[asyncio.Task] = None

    def start(self) -> None:
        """게이트를 닫고 카운트다운 초기화"""
        self.allowed = False
        self.remaining = max(0, self.ticks)
        if self.remaining == 0:
            self.allowed = True
            self._notify("Swing Now!")
            return
        logger.info("⏳ Countdown Started - Wait for next swing...")
        self._notify(f"Get Ready in {self.remaining} seconds...")

    def tick(self) -> bool:
        """
        1틱 진행

        Returns:
            이번 틱으로 게이트가 열렸으면 True
        """
        if self.remaining <= 0:
            return False

        self.remaining -= 1
        logger.info(f"⏳ {self.remaining} seconds remaining...")
        self._notify(f"Get Ready in {self.remaining} seconds...")

        if self.remaining == 0:
            self.allowed = True
            logger.info("✅ READY! Swing Now!")
            self._notify("Swing Now!")
            return True
        return False

    async def run(self) -> None:
        """start() 후 interval마다 tick(), 게이트가 열리면 종료"""
        self.start()
        await self._tick_until_open()

    def restart(self) -> asyncio.Task:
        """
        진행 중인 카운트다운을 취소하고 새로 시작 (이벤트 루프 안에서 호출)

        게이트는 호출 즉시 닫힌다.
        """
        self.cancel()
        self.start()
        self._task = asyncio.create_task(self._tick_until_open())
        return self._task

    async def _tick_until_open(self) -> None:
        while not self.allowed:
            await asyncio.sleep(self.interval_s)
            self.tick()

    def cancel(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None

    def _notify(self, text: str) -> None:
        if self.on_tick:
            self.on_tick(text)
