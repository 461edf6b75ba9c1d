"""
스윙 감지 관련 DTO
SwingDetector 상태/결과
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SwingPhase(str, Enum):
    IDLE = "idle"
    SWING_IN_PROGRESS = "swing_in_progress"


class CompletionMode(str, Enum):
    """스윙 완료 처리 시점"""
    EVERY_FRAME = "every_frame"      # 유효 프레임마다 완료 처리 (기존 데모 동작)
    ON_TRANSITION = "on_transition"  # SWING_IN_PROGRESS → IDLE 전환 시에만


class DetectorState(BaseModel):
    """
    프레임 간 유지되는 감지 상태

    불변 값으로 다루며, step()마다 새 인스턴스를 반환한다.
    소유자는 캡처 루프.
    """
    model_config = ConfigDict(frozen=True)

    last_sample_time: float = 0.0
    last_wrist_x: float = 0.0
    last_wrist_y: float = 0.0
    last_hip_x: float = 0.0
    phase: SwingPhase = SwingPhase.IDLE

    @property
    def swing_in_progress(self) -> bool:
        return self.phase == SwingPhase.SWING_IN_PROGRESS


class SwingMetrics(BaseModel):
    """1 step의 속도/판정 값 (디버깅용)"""
    elapsed_ms: float
    wrist_speed_x: float
    wrist_speed_y: float
    hip_speed_x: float

    wrist_moving_fast: bool
    hip_rotating: bool
    full_arc_motion: bool
    hands_start_right: bool
    hands_end_left: bool
    swing_detected: bool


class DetectionResult(BaseModel):
    """SwingDetector.step() 결과"""
    accepted: bool = Field(..., description="입력 프레임이 유효했는지 여부")
    state: DetectorState
    metrics: Optional[SwingMetrics] = None
    feedback: Optional[str] = Field(default=None, description="스윙 완료 시 피드백 문장")

    @property
    def swing_completed(self) -> bool:
        return self.feedback is not None
