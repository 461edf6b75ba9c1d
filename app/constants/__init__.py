# re-exports: 다른 모듈에서 짧게 import 하도록

from .keypoint_indices import (
    NUM_KEYPOINTS,
    NOSE, L_EYE, R_EYE, L_EAR, R_EAR,
    L_SHOULDER, R_SHOULDER, L_ELBOW, R_ELBOW, L_WRIST, R_WRIST,
    L_HIP, R_HIP, L_KNEE, R_KNEE, L_ANKLE, R_ANKLE,
    KEYPOINT_NAMES, REQUIRED_KEYPOINTS, MEDIAPIPE_TO_COCO,
)

from .detector_params import (
    MIN_KEYPOINT_CONFIDENCE,
    WRIST_SPEED_THRESHOLD,
    HIP_SPEED_THRESHOLD,
    FULL_ARC_RATIO,
    HANDS_START_RIGHT_OFFSET,
    HANDS_END_LEFT_OFFSET,
    FRAME_INTERVAL_MS,
    COUNTDOWN_TICKS,
    COUNTDOWN_INTERVAL_S,
    DEFAULT_VOICE_ID,
    DEFAULT_TTS_MODEL_ID,
    DEFAULT_TTS_STABILITY,
    DEFAULT_TTS_SIMILARITY_BOOST,
)
