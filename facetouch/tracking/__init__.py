"""Camera, pose estimation, display and frame loop module."""

from .errors import FaceTouchError, AcquisitionError
from .camera import Camera
from .pose_estimator import PoseEstimator, landmarks_to_pose
from .feedback import FeedbackMode, FeedbackState, BorderStyle, render_feedback, apply_feedback
from .visualization import TrackerDisplay, draw_keypoints
from .scheduler import FrameScheduler, SchedulerState, TrackerConfig

__all__ = [
    "FaceTouchError",
    "AcquisitionError",
    "Camera",
    "PoseEstimator",
    "landmarks_to_pose",
    "FeedbackMode",
    "FeedbackState",
    "BorderStyle",
    "render_feedback",
    "apply_feedback",
    "TrackerDisplay",
    "draw_keypoints",
    "FrameScheduler",
    "SchedulerState",
    "TrackerConfig",
]
