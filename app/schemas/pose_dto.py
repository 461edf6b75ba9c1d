"""
포즈 추정 관련 DTO
PoseEstimator / SwingDetector 입출력용
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.constants import NUM_KEYPOINTS, KEYPOINT_NAMES


class Keypoint(BaseModel):
    """COCO 17 keypoint 중 하나 (픽셀 좌표)"""
    index: int = Field(..., ge=0, le=NUM_KEYPOINTS - 1, description="body landmark index (0~16)")
    x: float = Field(..., description="X 좌표 (px)")
    y: float = Field(..., description="Y 좌표 (px)")
    confidence: float = Field(..., ge=0.0, le=1.0, description="신뢰도 점수")

    @property
    def name(self) -> str:
        return KEYPOINT_NAMES[self.index]


class FrameSample(BaseModel):
    """1개 프레임의 포즈 (정확히 17개 keypoints, 캡처 시각 포함)"""
    timestamp_ms: float = Field(..., description="캡처 시각 (epoch ms)")
    keypoints: list[Keypoint] = Field(..., description="index 순서로 정렬된 17개 keypoint")

    @field_validator("keypoints")
    @classmethod
    def validate_keypoints(cls, v: list[Keypoint]) -> list[Keypoint]:
        if len(v) != NUM_KEYPOINTS:
            raise ValueError(f"keypoint는 {NUM_KEYPOINTS}개여야 합니다 (입력: {len(v)}개)")
        for i, kp in enumerate(v):
            if kp.index != i:
                raise ValueError(f"keypoint 순서 불일치: 위치 {i}에 index {kp.index}")
        return v

    def get_keypoint(self, index: int) -> Optional[Keypoint]:
        """keypoint index로 접근"""
        if 0 <= index < len(self.keypoints):
            return self.keypoints[index]
        return None
