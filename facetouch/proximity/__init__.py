"""Hand-to-face proximity analysis module."""

from .config import MIRROR_VIDEO, MIN_PART_CONFIDENCE, MIN_POSE_CONFIDENCE
from .landmarks import Part, Landmark, Pose, HAND_PARTS, FACE_PARTS
from .math_utils import dist2, landmark_distance
from .threshold import estimate_threshold
from .classifier import PairDistance, ProximityVerdict, classify_proximity

__all__ = [
    "MIRROR_VIDEO",
    "MIN_PART_CONFIDENCE",
    "MIN_POSE_CONFIDENCE",
    "Part",
    "Landmark",
    "Pose",
    "HAND_PARTS",
    "FACE_PARTS",
    "dist2",
    "landmark_distance",
    "estimate_threshold",
    "PairDistance",
    "ProximityVerdict",
    "classify_proximity",
]
