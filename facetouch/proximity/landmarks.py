"""Landmark vocabulary and per-frame pose data."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class Part(Enum):
    """Body parts reported by the pose estimator, keyed by stable name."""
    NOSE = "nose"
    LEFT_EYE = "leftEye"
    RIGHT_EYE = "rightEye"
    LEFT_EAR = "leftEar"
    RIGHT_EAR = "rightEar"
    LEFT_SHOULDER = "leftShoulder"
    RIGHT_SHOULDER = "rightShoulder"
    LEFT_ELBOW = "leftElbow"
    RIGHT_ELBOW = "rightElbow"
    LEFT_WRIST = "leftWrist"
    RIGHT_WRIST = "rightWrist"
    LEFT_HIP = "leftHip"
    RIGHT_HIP = "rightHip"
    LEFT_KNEE = "leftKnee"
    RIGHT_KNEE = "rightKnee"
    LEFT_ANKLE = "leftAnkle"
    RIGHT_ANKLE = "rightAnkle"


HAND_PARTS = (Part.LEFT_WRIST, Part.RIGHT_WRIST)
FACE_PARTS = (Part.NOSE, Part.LEFT_EYE, Part.RIGHT_EYE)


@dataclass(frozen=True)
class Landmark:
    """A single keypoint in frame pixel coordinates."""
    part: Part
    x: float
    y: float
    score: float

    @property
    def position(self) -> tuple[float, float]:
        """(row, column) in frame pixels."""
        return self.y, self.x

    @property
    def name(self) -> str:
        return self.part.value


@dataclass(frozen=True)
class Pose:
    """All landmarks for one detected person plus an overall score."""
    landmarks: Mapping[Part, Landmark] = field(default_factory=dict)
    score: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "landmarks", MappingProxyType(dict(self.landmarks)))

    def __getitem__(self, part: Part) -> Landmark:
        # Missing parts behave as undetected so confidence gates reject them.
        lm = self.landmarks.get(part)
        if lm is None:
            return Landmark(part, 0.0, 0.0, 0.0)
        return lm

    def __iter__(self) -> Iterator[Landmark]:
        return iter(self.landmarks.values())

    def __len__(self) -> int:
        return len(self.landmarks)

    @classmethod
    def from_landmarks(cls, landmarks: list[Landmark], score: float | None = None) -> "Pose":
        """Build a pose; score defaults to the mean landmark score."""
        if score is None:
            score = sum(lm.score for lm in landmarks) / len(landmarks) if landmarks else 0.0
        return cls({lm.part: lm for lm in landmarks}, score)
