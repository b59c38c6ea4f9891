"""Face-size adaptive touch threshold."""

import math

from .config import (
    MIN_PART_CONFIDENCE,
    TOUCH_THRESHOLD_FALLBACK_PX,
    TOUCH_THRESHOLD_MULTIPLIER,
)
from .landmarks import Part, Pose
from .math_utils import landmark_distance


def estimate_threshold(
    pose: Pose,
    min_confidence: float = MIN_PART_CONFIDENCE,
    fallback: float = TOUCH_THRESHOLD_FALLBACK_PX,
    multiplier: float = TOUCH_THRESHOLD_MULTIPLIER,
) -> float:
    """
    Touch threshold in pixels, scaled by the nose-to-eye distance.

    The left eye is preferred over the right whenever both are confident.
    Falls back to a fixed value when the nose or both eyes are not detected.

    Returns:
        A finite threshold > 0
    """
    nose = pose[Part.NOSE]
    if nose.score < min_confidence:
        return fallback

    for eye_part in (Part.LEFT_EYE, Part.RIGHT_EYE):
        eye = pose[eye_part]
        if eye.score >= min_confidence:
            threshold = landmark_distance(nose, eye) * multiplier
            if threshold > 0 and math.isfinite(threshold):
                return threshold
            return fallback

    return fallback
