"""
스윙 감지 Domain Logic
연속된 두 유효 프레임의 손목/골반 이동 속도로 스윙 여부를 판정
"""
import logging
import math
from datetime import datetime
from typing import Optional

from app.constants import (
    L_SHOULDER, R_WRIST, L_HIP,
    REQUIRED_KEYPOINTS,
    MIN_KEYPOINT_CONFIDENCE,
    WRIST_SPEED_THRESHOLD,
    HIP_SPEED_THRESHOLD,
    FULL_ARC_RATIO,
    HANDS_START_RIGHT_OFFSET,
    HANDS_END_LEFT_OFFSET,
)
from app.domain.swing.feedback import classify_feedback
from app.schemas.detector_dto import (
    CompletionMode,
    DetectionResult,
    DetectorState,
    SwingMetrics,
    SwingPhase,
)
from app.schemas.pose_dto import FrameSample

logger = logging.getLogger(__name__)


def _speed(displacement: float, elapsed_ms: float) -> float:
    """이동 속도 (px/ms). 경과 시간이 0 이하면 이동 여부에 따라 inf 또는 0."""
    if elapsed_ms <= 0:
        return math.inf if displacement > 0 else 0.0
    return displacement / elapsed_ms


def _clock() -> str:
    return datetime.now().strftime("%H:%M:%S")


class SwingDetector:
    """휴리스틱 스윙 감지기 (IDLE ↔ SWING_IN_PROGRESS)"""

    def __init__(
        self,
        completion_mode: CompletionMode | str = CompletionMode.EVERY_FRAME,
        min_confidence: float = MIN_KEYPOINT_CONFIDENCE,
        wrist_speed_threshold: float = WRIST_SPEED_THRESHOLD,
        hip_speed_threshold: float = HIP_SPEED_THRESHOLD,
    ):
        """
        Args:
            completion_mode: "every_frame" (유효 프레임마다 완료 처리) 또는
                "on_transition" (스윙 진행 → 대기 전환 시에만 완료 처리)
            min_confidence: 필수 keypoint 최소 신뢰도 (초과해야 유효)
            wrist_speed_threshold: 손목 속도 임계값 (px/ms)
            hip_speed_threshold: 골반 속도 임계값 (px/ms)
        """
        self.completion_mode = CompletionMode(completion_mode)
        self.min_confidence = min_confidence
        self.wrist_speed_threshold = wrist_speed_threshold
        self.hip_speed_threshold = hip_speed_threshold

    def initial_state(self) -> DetectorState:
        return DetectorState()

    def is_valid_sample(self, sample: FrameSample) -> bool:
        """필수 keypoint(왼어깨, 오른손목, 왼골반) 신뢰도 검사"""
        return all(
            sample.keypoints[i].confidence > self.min_confidence
            for i in REQUIRED_KEYPOINTS
        )

    def step(self, state: DetectorState, sample: FrameSample) -> DetectionResult:
        """
        1 프레임 처리

        Process:
        1. 필수 keypoint 신뢰도 검사 (실패 시 상태 그대로 반환)
        2. 직전 유효 프레임 대비 손목/골반 속도 계산
        3. 상태 갱신 (스윙 여부와 무관)
        4. 스윙 감지 → SWING_IN_PROGRESS
        5. 완료 처리 → IDLE + 피드백 문장

        Args:
            state: 직전 감지 상태
            sample: 현재 프레임

        Returns:
            DetectionResult
        """
        if not self.is_valid_sample(sample):
            logger.warning("⚠️ Low confidence in keypoints, skipping swing detection.")
            return DetectionResult(accepted=False, state=state)

        shoulder = sample.keypoints[L_SHOULDER]
        wrist = sample.keypoints[R_WRIST]
        hip = sample.keypoints[L_HIP]

        # 1. 속도 계산
        elapsed = sample.timestamp_ms - state.last_sample_time
        wrist_speed_x = _speed(abs(wrist.x - state.last_wrist_x), elapsed)
        wrist_speed_y = _speed(abs(wrist.y - state.last_wrist_y), elapsed)
        hip_speed_x = _speed(abs(hip.x - state.last_hip_x), elapsed)

        # 2. 판정
        wrist_moving_fast = (
            wrist_speed_x > self.wrist_speed_threshold
            or wrist_speed_y > self.wrist_speed_threshold
        )
        hip_rotating = hip_speed_x > self.hip_speed_threshold
        full_arc_motion = wrist_speed_x > wrist_speed_y * FULL_ARC_RATIO

        hands_start_right = wrist.x > shoulder.x - HANDS_START_RIGHT_OFFSET
        hands_end_left = wrist.x < shoulder.x + HANDS_END_LEFT_OFFSET

        swing_detected = wrist_moving_fast and hip_rotating and hands_start_right and hands_end_left

        metrics = SwingMetrics(
            elapsed_ms=elapsed,
            wrist_speed_x=wrist_speed_x,
            wrist_speed_y=wrist_speed_y,
            hip_speed_x=hip_speed_x,
            wrist_moving_fast=wrist_moving_fast,
            hip_rotating=hip_rotating,
            full_arc_motion=full_arc_motion,
            hands_start_right=hands_start_right,
            hands_end_left=hands_end_left,
            swing_detected=swing_detected,
        )

        # 3. 상태 전이
        phase = state.phase
        if swing_detected and phase == SwingPhase.IDLE:
            phase = SwingPhase.SWING_IN_PROGRESS
            logger.info(f"⚡ Swing DETECTED at {_clock()}!")

        if self.completion_mode == CompletionMode.EVERY_FRAME:
            complete = True
        else:
            complete = state.phase == SwingPhase.SWING_IN_PROGRESS and not swing_detected

        feedback: Optional[str] = None
        if complete:
            phase = SwingPhase.IDLE
            logger.info(f"✅ Swing COMPLETED at {_clock()}")
            feedback = classify_feedback(shoulder, wrist, hip).value
            logger.info(f"🚀 Sending AI Feedback Type: {feedback}")

        new_state = DetectorState(
            last_sample_time=sample.timestamp_ms,
            last_wrist_x=wrist.x,
            last_wrist_y=wrist.y,
            last_hip_x=hip.x,
            phase=phase,
        )

        return DetectionResult(
            accepted=True,
            state=new_state,
            metrics=metrics,
            feedback=feedback,
        )
