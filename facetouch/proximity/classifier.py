"""Hand-to-face proximity classification."""

import math
from dataclasses import dataclass
from itertools import product
from typing import Sequence

from .config import MIN_PART_CONFIDENCE
from .landmarks import FACE_PARTS, HAND_PARTS, Landmark, Part, Pose
from .math_utils import landmark_distance


@dataclass(frozen=True)
class PairDistance:
    """Distance between one confident hand/face landmark pair."""
    hand: Landmark
    face: Landmark
    distance: float

    @property
    def label(self) -> str:
        return f"{self.hand.name} <-> {self.face.name}"


@dataclass(frozen=True)
class ProximityVerdict:
    """Safe/Danger decision for a single frame."""
    minimum_distance: float
    is_danger: bool
    contributing_pair: tuple[Landmark, Landmark] | None
    threshold: float
    pairs: tuple[PairDistance, ...] = ()

    @property
    def evaluated(self) -> bool:
        """Whether any pair passed the confidence gate."""
        return bool(self.pairs)


def classify_proximity(
    pose: Pose,
    threshold: float,
    min_confidence: float = MIN_PART_CONFIDENCE,
    hand_parts: Sequence[Part] = HAND_PARTS,
    face_parts: Sequence[Part] = FACE_PARTS,
) -> ProximityVerdict:
    """
    Scan every hand x face pair and compare the closest one to the threshold.

    A pair counts only if both landmarks score strictly above min_confidence.
    With no qualifying pair the minimum stays infinite and the verdict is safe.
    """
    pairs: list[PairDistance] = []
    min_dist = math.inf
    closest: tuple[Landmark, Landmark] | None = None

    for hand_part, face_part in product(hand_parts, face_parts):
        hand, face = pose[hand_part], pose[face_part]
        if hand.score <= min_confidence or face.score <= min_confidence:
            continue

        d = landmark_distance(hand, face)
        pairs.append(PairDistance(hand, face, d))
        if d < min_dist:
            min_dist = d
            closest = (hand, face)

    return ProximityVerdict(
        minimum_distance=min_dist,
        is_danger=min_dist < threshold,
        contributing_pair=closest,
        threshold=threshold,
        pairs=tuple(pairs),
    )
