# COCO 17 keypoint indices (MoveNet과 동일한 순서)
NOSE                     = 0
L_EYE,     R_EYE         = 1, 2
L_EAR,     R_EAR         = 3, 4
L_SHOULDER, R_SHOULDER   = 5, 6
L_ELBOW,   R_ELBOW       = 7, 8
L_WRIST,   R_WRIST       = 9, 10
L_HIP,     R_HIP         = 11, 12
L_KNEE,    R_KNEE        = 13, 14
L_ANKLE,   R_ANKLE       = 15, 16

NUM_KEYPOINTS = 17

KEYPOINT_NAMES = (
    "nose", "left_eye", "right_eye", "left_ear", "right_ear",
    "left_shoulder", "right_shoulder", "left_elbow", "right_elbow",
    "left_wrist", "right_wrist", "left_hip", "right_hip",
    "left_knee", "right_knee", "left_ankle", "right_ankle",
)

# 스윙 감지에 쓰는 keypoint (왼어깨, 오른손목, 왼골반)
REQUIRED_KEYPOINTS = (L_SHOULDER, R_WRIST, L_HIP)

# MediaPipe Pose 33 landmark index → COCO 17 index
MEDIAPIPE_TO_COCO = (
    0,   # nose
    2,   # left_eye
    5,   # right_eye
    7,   # left_ear
    8,   # right_ear
    11,  # left_shoulder
    12,  # right_shoulder
    13,  # left_elbow
    14,  # right_elbow
    15,  # left_wrist
    16,  # right_wrist
    23,  # left_hip
    24,  # right_hip
    25,  # left_knee
    26,  # right_knee
    27,  # left_ankle
    28,  # right_ankle
)
