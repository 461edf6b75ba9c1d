# 스윙 감지 임계값 (단위: 픽셀/ms, 포즈 모델 좌표계 기준)
MIN_KEYPOINT_CONFIDENCE = 0.5
WRIST_SPEED_THRESHOLD = 0.003
HIP_SPEED_THRESHOLD = 0.004
FULL_ARC_RATIO = 0.7

# 손 위치 판정 (어깨 x 기준 픽셀 오프셋)
HANDS_START_RIGHT_OFFSET = 100
HANDS_END_LEFT_OFFSET = 50

# 캡처 루프 / 카운트다운
FRAME_INTERVAL_MS = 500
COUNTDOWN_TICKS = 5
COUNTDOWN_INTERVAL_S = 1.0

# ElevenLabs 기본값 (settings에서 ENV 미지정 시 사용)
DEFAULT_VOICE_ID = "9BWtsMINqrJLrRacOk9x"
DEFAULT_TTS_MODEL_ID = "eleven_monolingual_v1"
DEFAULT_TTS_STABILITY = 0.5
DEFAULT_TTS_SIMILARITY_BOOST = 0.8
