"""
스윙 피드백 분류
완료된 스윙의 손목/골반 높이를 어깨와 비교해 고정 문장 중 하나를 고른다.
"""
from enum import Enum

from app.schemas.pose_dto import Keypoint


class FeedbackType(str, Enum):
    # TTS로 그대로 읽히는 문장이므로 원문 유지
    DROP_HANDS = "You lower your hands.  Don't drop them.  You will loose power."
    EARLY_HIP_SHIFT = "Your shifting early. Try engaging your hips."
    HOME_RUN = "That was a home run"


def classify_feedback(shoulder: Keypoint, wrist: Keypoint, hip: Keypoint) -> FeedbackType:
    """
    피드백 분류 (y는 아래로 갈수록 큼)

    판정 순서:
    1. 손목이 어깨보다 아래 → DROP_HANDS
    2. 골반이 어깨보다 아래 → EARLY_HIP_SHIFT (1번 결과를 덮어씀)
    3. 둘 다 아니면 → HOME_RUN
    """
    feedback = None

    if wrist.y > shoulder.y:
        feedback = FeedbackType.DROP_HANDS

    if hip.y > shoulder.y:
        feedback = FeedbackType.EARLY_HIP_SHIFT

    return feedback or FeedbackType.HOME_RUN
