"""
포즈 추정 결과 검증
추정기 원시 출력 → FrameSample. 유효하지 않으면 None (경고 로그만 남김)
"""
import logging
from typing import Any, Optional

from app.constants import NUM_KEYPOINTS
from app.schemas.pose_dto import FrameSample, Keypoint

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("x", "y", "score")


def _is_complete(point: Any) -> bool:
    return isinstance(point, dict) and all(point.get(f) is not None for f in _REQUIRED_FIELDS)


def to_frame_sample(poses: Optional[list], timestamp_ms: float) -> Optional[FrameSample]:
    """
    추정 결과 검증 후 FrameSample 생성

    거부 조건:
    - 포즈 없음
    - keypoint 개수 != 17
    - x/y/score 누락된 keypoint 존재

    Args:
        poses: PoseEstimator.estimate() 결과
        timestamp_ms: 캡처 시각 (epoch ms)

    Returns:
        FrameSample 또는 None
    """
    if not poses or not poses[0]:
        logger.warning("⚠️ No pose detected, skipping frame...")
        return None

    keypoints = poses[0]
    if len(keypoints) != NUM_KEYPOINTS:
        logger.warning("⚠️ Keypoints missing or incorrect length, skipping frame...")
        return None

    missing = [i for i, p in enumerate(keypoints) if not _is_complete(p)]
    if missing:
        for i in missing:
            logger.warning(f"⚠️ Keypoint {i} is missing or invalid.")
        return None

    return FrameSample(
        timestamp_ms=timestamp_ms,
        keypoints=[
            Keypoint(
                index=i,
                x=float(p["x"]),
                y=float(p["y"]),
                confidence=min(1.0, max(0.0, float(p["score"]))),
            )
            for i, p in enumerate(keypoints)
        ],
    )
