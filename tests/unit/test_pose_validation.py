import pytest
from pydantic import ValidationError

from app.constants import MEDIAPIPE_TO_COCO, NUM_KEYPOINTS, KEYPOINT_NAMES
from app.domain.pose.validation import to_frame_sample
from app.schemas.pose_dto import FrameSample, Keypoint
from tests.test_helpers import create_raw_pose


def test_valid_pose_becomes_frame_sample():
    sample = to_frame_sample([create_raw_pose()], timestamp_ms=1234.0)

    assert sample is not None
    assert sample.timestamp_ms == 1234.0
    assert len(sample.keypoints) == NUM_KEYPOINTS
    assert [kp.index for kp in sample.keypoints] == list(range(NUM_KEYPOINTS))
    assert sample.get_keypoint(5).name == "left_shoulder"


@pytest.mark.parametrize("poses", [None, [], [[]]])
def test_no_pose_rejected(poses):
    assert to_frame_sample(poses, 0.0) is None


def test_wrong_keypoint_count_rejected():
    raw = create_raw_pose()[:16]
    assert to_frame_sample([raw], 0.0) is None


def test_missing_field_rejected():
    raw = create_raw_pose()
    del raw[3]["score"]
    assert to_frame_sample([raw], 0.0) is None


def test_score_clamped_to_unit_range():
    raw = create_raw_pose()
    raw[0]["score"] = 1.2
    sample = to_frame_sample([raw], 0.0)
    assert sample.keypoints[0].confidence == 1.0


def test_frame_sample_requires_17_keypoints():
    with pytest.raises(ValidationError):
        FrameSample(
            timestamp_ms=0.0,
            keypoints=[Keypoint(index=i, x=0, y=0, confidence=1.0) for i in range(16)],
        )


def test_frame_sample_requires_index_order():
    keypoints = [Keypoint(index=i, x=0, y=0, confidence=1.0) for i in range(NUM_KEYPOINTS)]
    keypoints[0], keypoints[1] = keypoints[1], keypoints[0]
    with pytest.raises(ValidationError):
        FrameSample(timestamp_ms=0.0, keypoints=keypoints)


def test_mediapipe_mapping_covers_coco_keypoints():
    assert len(MEDIAPIPE_TO_COCO) == NUM_KEYPOINTS == len(KEYPOINT_NAMES)
    assert len(set(MEDIAPIPE_TO_COCO)) == NUM_KEYPOINTS
    assert all(0 <= i < 33 for i in MEDIAPIPE_TO_COCO)
