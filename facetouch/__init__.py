"""Real-time "don't touch your face" alert package."""

from .proximity import (
    Part,
    Landmark,
    Pose,
    estimate_threshold,
    classify_proximity,
    ProximityVerdict,
)

from .tracking import (
    AcquisitionError,
    Camera,
    PoseEstimator,
    FeedbackState,
    render_feedback,
    TrackerDisplay,
    FrameScheduler,
    TrackerConfig,
)

__all__ = [
    # Proximity
    "Part",
    "Landmark",
    "Pose",
    "estimate_threshold",
    "classify_proximity",
    "ProximityVerdict",
    # Tracking
    "AcquisitionError",
    "Camera",
    "PoseEstimator",
    "FeedbackState",
    "render_feedback",
    "TrackerDisplay",
    "FrameScheduler",
    "TrackerConfig",
]
