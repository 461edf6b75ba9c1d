"""
피드백 릴레이 메시지 DTO
WebSocket 텍스트 프레임 (JSON)
"""
import time
from enum import Enum

from pydantic import BaseModel, Field


class RelayEventType(str, Enum):
    SWING_ANALYSIS = "swingAnalysis"        # client → server (피드백 문장)
    REAL_TIME_FEEDBACK = "realTimeFeedback"  # server → client (음성 URL)


def _now_ms() -> int:
    return int(time.time() * 1000)


class RelayMessage(BaseModel):
    """
    Message format:
    {
        "type": "swingAnalysis",
        "data": "That was a home run",
        "timestamp": 1704067200000
    }
    """
    type: RelayEventType
    data: str
    timestamp: int = Field(default_factory=_now_ms)

    @classmethod
    def swing_analysis(cls, feedback_text: str) -> "RelayMessage":
        return cls(type=RelayEventType.SWING_ANALYSIS, data=feedback_text)

    @classmethod
    def real_time_feedback(cls, audio_url: str) -> "RelayMessage":
        return cls(type=RelayEventType.REAL_TIME_FEEDBACK, data=audio_url)
