"""Per-frame capture, analysis and feedback loop."""

import logging
from dataclasses import dataclass
from enum import Enum

from facetouch.proximity.classifier import classify_proximity
from facetouch.proximity.config import (
    ERROR_DISPLAY_MS,
    MIN_PART_CONFIDENCE,
    MIN_POSE_CONFIDENCE,
    MIRROR_VIDEO,
    TOUCH_THRESHOLD_FALLBACK_PX,
    TOUCH_THRESHOLD_MULTIPLIER,
)
from facetouch.proximity.landmarks import Pose
from facetouch.proximity.threshold import estimate_threshold

from .camera import Camera
from .errors import AcquisitionError
from .feedback import FeedbackMode, FeedbackState, apply_feedback, render_feedback
from .pose_estimator import PoseEstimator
from .visualization import TrackerDisplay, draw_keypoints

logger = logging.getLogger(__name__)

QUIT_KEYS = (ord("q"), 27)  # 'q' or ESC


class SchedulerState(Enum):
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"


@dataclass
class TrackerConfig:
    """Runtime knobs for the frame loop."""
    mirror: bool = MIRROR_VIDEO
    min_pose_confidence: float = MIN_POSE_CONFIDENCE
    min_part_confidence: float = MIN_PART_CONFIDENCE
    threshold_fallback: float = TOUCH_THRESHOLD_FALLBACK_PX
    threshold_multiplier: float = TOUCH_THRESHOLD_MULTIPLIER
    error_display_ms: int = ERROR_DISPLAY_MS


class FrameScheduler:
    """
    Runs one capture -> estimate -> classify -> render cycle per display refresh.

    Cycles are strictly sequential; the only blocking point in a cycle is the
    pose estimate. Camera and display are owned by the scheduler while running.
    """

    def __init__(
        self,
        camera: Camera,
        estimator: PoseEstimator,
        surface: TrackerDisplay,
        config: TrackerConfig | None = None,
    ):
        self.camera = camera
        self.estimator = estimator
        self.surface = surface
        self.config = config or TrackerConfig()
        self.state = SchedulerState.STARTING
        self._last_mode: FeedbackMode | None = None

    def start(self) -> None:
        """Acquire pose model and camera; on failure report and stop."""
        try:
            self.estimator.load()
            self.camera.acquire()
        except AcquisitionError as e:
            self.state = SchedulerState.STOPPED
            logger.error("Startup failed: %s", e)
            self.surface.show_error(str(e), self.config.error_display_ms)
            self.close()
            raise
        self.state = SchedulerState.RUNNING
        logger.info("Frame loop running")

    def select_pose(self, poses: list[Pose]) -> Pose | None:
        """First pose, if it clears the pose-level confidence gate."""
        if not poses:
            return None
        pose = poses[0]
        if pose.score < self.config.min_pose_confidence:
            logger.debug("Dropping pose with score %.2f", pose.score)
            return None
        return pose

    def analyze(self, pose: Pose) -> FeedbackState:
        """Threshold, classify and render a single pose onto the surface."""
        cfg = self.config
        threshold = estimate_threshold(
            pose,
            min_confidence=cfg.min_part_confidence,
            fallback=cfg.threshold_fallback,
            multiplier=cfg.threshold_multiplier,
        )
        verdict = classify_proximity(pose, threshold, min_confidence=cfg.min_part_confidence)
        state = render_feedback(verdict)

        apply_feedback(self.surface, state)
        draw_keypoints(self.surface, pose, cfg.min_part_confidence, state.keypoint_color)

        if state.mode is not self._last_mode:
            logger.info(
                "%s (min distance %.1f, threshold %.1f)",
                state.mode.value, verdict.minimum_distance, threshold,
            )
            self._last_mode = state.mode
        return state

    def step(self) -> FeedbackState | None:
        """
        Run a single cycle.

        Returns:
            The applied FeedbackState, or None if nothing was rendered
        """
        frame = self.camera.read()
        if frame is None:
            return None

        poses = self.estimator.estimate(frame, flip_horizontal=self.config.mirror)
        self.surface.draw_image(frame, mirror=self.config.mirror)

        pose = self.select_pose(poses)
        if pose is None:
            return None
        return self.analyze(pose)

    def run(self) -> None:
        """Start, then cycle until the user quits or the window closes."""
        self.start()
        try:
            while self.state is SchedulerState.RUNNING:
                self.step()
                key = self.surface.show()
                if key in QUIT_KEYS or self.surface.window_closed():
                    logger.info("Quit requested")
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.close()

    def close(self) -> None:
        """Release camera, model and window."""
        self.camera.release()
        self.estimator.close()
        self.surface.close()
        if self.state is SchedulerState.RUNNING:
            self.state = SchedulerState.STOPPED

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
