"""MediaPipe pose estimation wrapper."""

import logging
from typing import Sequence

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from facetouch.proximity.landmarks import Landmark, Part, Pose

from .errors import AcquisitionError

logger = logging.getLogger(__name__)


# MediaPipe Pose landmark indices for each part of the vocabulary
MP_POSE_INDEX = {
    Part.NOSE: 0,
    Part.LEFT_EYE: 2,
    Part.RIGHT_EYE: 5,
    Part.LEFT_EAR: 7,
    Part.RIGHT_EAR: 8,
    Part.LEFT_SHOULDER: 11,
    Part.RIGHT_SHOULDER: 12,
    Part.LEFT_ELBOW: 13,
    Part.RIGHT_ELBOW: 14,
    Part.LEFT_WRIST: 15,
    Part.RIGHT_WRIST: 16,
    Part.LEFT_HIP: 23,
    Part.RIGHT_HIP: 24,
    Part.LEFT_KNEE: 25,
    Part.RIGHT_KNEE: 26,
    Part.LEFT_ANKLE: 27,
    Part.RIGHT_ANKLE: 28,
}


def landmarks_to_pose(
    landmarks: Sequence,
    width: int,
    height: int,
    flip_horizontal: bool = False,
) -> Pose:
    """
    Convert normalized MediaPipe landmarks to a pixel-space Pose.

    Args:
        landmarks: MediaPipe landmark list (objects with x, y, visibility)
        width: Frame width in pixels
        height: Frame height in pixels
        flip_horizontal: Mirror x so the pose lines up with a mirrored display

    Returns:
        Pose whose score is the mean landmark visibility
    """
    out: list[Landmark] = []
    for part, idx in MP_POSE_INDEX.items():
        if idx >= len(landmarks):
            continue
        lm = landmarks[idx]
        x = float(lm.x) * width
        if flip_horizontal:
            x = width - x
        score = float(getattr(lm, "visibility", 0.0) or 0.0)
        out.append(Landmark(part, x, float(lm.y) * height, min(max(score, 0.0), 1.0)))
    return Pose.from_landmarks(out)


class PoseEstimator:
    """Single-person pose estimation with MediaPipe Pose."""

    def __init__(
        self,
        model_complexity: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ):
        self.model_complexity = model_complexity
        self.min_detection_confidence = min_detection_confidence
        self.min_tracking_confidence = min_tracking_confidence
        self._pose = None

    @property
    def is_loaded(self) -> bool:
        return self._pose is not None

    def load(self) -> "PoseEstimator":
        """Load the model, raising AcquisitionError on failure."""
        try:
            self._pose = mp.solutions.pose.Pose(
                static_image_mode=False,
                model_complexity=self.model_complexity,
                smooth_landmarks=False,
                enable_segmentation=False,
                min_detection_confidence=self.min_detection_confidence,
                min_tracking_confidence=self.min_tracking_confidence,
            )
        except Exception as e:
            raise AcquisitionError(f"pose model failed to load: {e}") from e
        logger.info("Pose model loaded (complexity=%d)", self.model_complexity)
        return self

    def estimate(self, frame: NDArray[np.uint8], flip_horizontal: bool = True) -> list[Pose]:
        """Estimate poses for a BGR frame. Returns zero or one pose."""
        if self._pose is None:
            raise AcquisitionError("pose model has not been loaded")

        h, w = frame.shape[:2]
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        rgb.flags.writeable = False
        results = self._pose.process(rgb)

        if not results or not results.pose_landmarks:
            return []
        return [landmarks_to_pose(results.pose_landmarks.landmark, w, h, flip_horizontal)]

    def close(self) -> None:
        """Release resources."""
        if self._pose is not None:
            self._pose.close()
            self._pose = None

    def __enter__(self):
        return self.load()

    def __exit__(self, *args):
        self.close()
