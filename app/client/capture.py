"""
캡처/추론 클라이언트
고정 주기 타이머로 프레임을 읽어 포즈 추정 → 스윙 감지 → 피드백 전송
"""
import asyncio
import logging
import time
from typing import TYPE_CHECKING, Callable, Optional

import cv2

from app.client.relay_client import RelayClient
from app.domain.pose.validation import to_frame_sample
from app.domain.swing.countdown import CountdownGate
from app.domain.swing.detector import SwingDetector
from app.schemas.detector_dto import DetectionResult

if TYPE_CHECKING:
    from app.domain.pose.estimator import PoseEstimator

logger = logging.getLogger(__name__)


def open_camera(index: int = 0) -> cv2.VideoCapture:
    cap = cv2.VideoCapture(index)
    if not cap.isOpened():
        raise ValueError(f"Cannot open camera: {index}")
    return cap


class CaptureClient:
    """
    웹캠 프레임 루프

    - 카운트다운 게이트가 닫혀 있으면 프레임을 건너뜀
    - 이전 프레임 처리가 끝나지 않았으면 건너뜀 (처리 중 플래그)
    - 감지 상태(DetectorState)는 이 객체가 소유
    """

    def __init__(
        self,
        camera,
        estimator: "PoseEstimator",
        detector: SwingDetector,
        gate: CountdownGate,
        relay: RelayClient,
        frame_interval_ms: int = 500,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            camera: read() -> (ok, frame) 를 제공하는 캡처 객체 (cv2.VideoCapture)
            estimator: 포즈 추정기
            detector: 스윙 감지기
            gate: 카운트다운 게이트
            relay: 피드백 릴레이 클라이언트
            frame_interval_ms: 프레임 타이머 주기
            clock: 현재 시각(초) 함수
        """
        self.camera = camera
        self.estimator = estimator
        self.detector = detector
        self.gate = gate
        self.relay = relay
        self.frame_interval_ms = frame_interval_ms
        self.clock = clock

        self.state = detector.initial_state()
        self._in_flight = False
        self._stop = asyncio.Event()
        self._frame_tasks: set[asyncio.Task] = set()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def process_frame(self) -> Optional[DetectionResult]:
        """
        프레임 1개 처리

        Returns:
            감지 결과 (건너뛴 경우 None)
        """
        if self.estimator is None or not self.gate.allowed:
            return None

        if self._in_flight:
            logger.debug("previous frame still in flight, skipping")
            return None

        self._in_flight = True
        try:
            ok, frame = await asyncio.to_thread(self.camera.read)
            if not ok or frame is None or frame.size == 0:
                logger.warning("⚠️ Video not ready, skipping frame...")
                return None

            timestamp_ms = self.clock() * 1000
            poses = await asyncio.to_thread(self.estimator.estimate, frame)

            sample = to_frame_sample(poses, timestamp_ms)
            if sample is None:
                return None

            result = self.detector.step(self.state, sample)
            self.state = result.state

            if result.feedback:
                await self.relay.send_feedback(result.feedback)
                self.gate.restart()

            return result

        except Exception as e:
            logger.error(f"❌ Error in pose estimation: {e}", exc_info=True)
            return None
        finally:
            self._in_flight = False

    async def run(self) -> None:
        """
        메인 루프

        Process:
        1. 릴레이 연결 + 수신 루프 시작
        2. 첫 카운트다운 시작
        3. frame_interval_ms 마다 process_frame() 예약 (stop() 호출 시 종료)
        """
        listener: Optional[asyncio.Task] = None
        interval_s = self.frame_interval_ms / 1000
        try:
            await self.relay.connect()
            listener = asyncio.create_task(self.relay.listen())
            self.gate.restart()

            while not self._stop.is_set():
                task = asyncio.create_task(self.process_frame())
                self._frame_tasks.add(task)
                task.add_done_callback(self._frame_tasks.discard)
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=interval_s)
                except asyncio.TimeoutError:
                    pass
        finally:
            # 진행 중인 프레임(to_thread)이 끝난 뒤에 카메라/모델 해제
            if self._frame_tasks:
                await asyncio.gather(*self._frame_tasks, return_exceptions=True)
            if listener is not None:
                listener.cancel()
            self.gate.cancel()
            await self.relay.close()
            self.camera.release()
            if self.estimator is not None:
                self.estimator.close()
            logger.info("Capture client stopped.")

    def stop(self) -> None:
        self._stop.set()
