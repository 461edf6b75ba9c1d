"""
포즈 추정 Domain Logic
MediaPipe Pose 사용, 결과를 COCO 17 keypoint(픽셀 좌표)로 변환
"""
import cv2
import numpy as np
import mediapipe as mp

from app.constants import MEDIAPIPE_TO_COCO


class PoseEstimator:
    """MediaPipe 기반 단일 인물 포즈 추정기"""

    def __init__(
        self,
        model_complexity: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ):
        self.mp_pose = mp.solutions.pose
        self.pose = self.mp_pose.Pose(
            static_image_mode=False,
            model_complexity=model_complexity,  # 0, 1, 2 (높을수록 정확하지만 느림)
            smooth_landmarks=True,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    def estimate(self, frame: np.ndarray) -> list[list[dict]]:
        """
        1개 프레임에서 포즈 추정

        Args:
            frame: BGR 이미지 (OpenCV 캡처 결과)

        Returns:
            포즈 리스트 (0개 또는 1개). 각 포즈는 17개 keypoint dict
            {"x": px, "y": px, "score": 0~1}
        """
        height, width = frame.shape[:2]

        # MediaPipe는 RGB 사용
        rgb_frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self.pose.process(rgb_frame)

        if not results.pose_landmarks:
            return []

        landmarks = results.pose_landmarks.landmark
        keypoints = [
            self._to_keypoint(landmarks[mp_idx], width, height)
            for mp_idx in MEDIAPIPE_TO_COCO
        ]
        return [keypoints]

    def _to_keypoint(self, landmark, width: int, height: int) -> dict:
        """MediaPipe Landmark(정규화 좌표) → 픽셀 좌표 keypoint"""
        return {
            "x": landmark.x * width,
            "y": landmark.y * height,
            "score": landmark.visibility,
        }

    def close(self) -> None:
        self.pose.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
