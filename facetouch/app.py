"""
Face Touch Alert

Overlays the webcam feed with pose keypoints and warns when a wrist comes
within a face-sized distance of the nose or eyes.
"""

import argparse
import logging
import sys

from .proximity.config import (
    CAMERA_HEIGHT,
    CAMERA_INDEX,
    CAMERA_WIDTH,
    LOG_LEVEL,
    MIN_DETECTION_CONFIDENCE,
    MIN_TRACKING_CONFIDENCE,
    MIRROR_VIDEO,
    MODEL_COMPLEXITY,
    WINDOW_NAME,
)
from .tracking import (
    AcquisitionError,
    Camera,
    FrameScheduler,
    PoseEstimator,
    TrackerConfig,
    TrackerDisplay,
)

logger = logging.getLogger(__name__)


INSTRUCTIONS = """
==================================================
Face Touch Alert
==================================================

Keep your hands away from your face.
The border turns red when a wrist gets too close.

Controls:
  'q' or ESC - Quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Don't-touch-your-face webcam alert")
    parser.add_argument("-c", "--camera", type=int, default=CAMERA_INDEX, help="Camera index")
    parser.add_argument("--width", type=int, default=CAMERA_WIDTH, help="Preferred capture width")
    parser.add_argument("--height", type=int, default=CAMERA_HEIGHT, help="Preferred capture height")
    parser.add_argument(
        "--model-complexity", type=int, choices=(0, 1, 2), default=MODEL_COMPLEXITY,
        help="MediaPipe Pose model complexity (0=fast, 2=accurate)",
    )
    parser.add_argument(
        "--no-mirror", dest="mirror", action="store_false", default=MIRROR_VIDEO,
        help="Show the camera image unmirrored",
    )
    parser.add_argument(
        "--log-level", default=LOG_LEVEL,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"), type=str.upper,
        help="Logging verbosity",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_face_touch_alert(
    camera_index: int = CAMERA_INDEX,
    width: int = CAMERA_WIDTH,
    height: int = CAMERA_HEIGHT,
    model_complexity: int = MODEL_COMPLEXITY,
    mirror: bool = MIRROR_VIDEO,
) -> int:
    """Acquire camera and model, then run the frame loop until quit."""
    print(INSTRUCTIONS)

    scheduler = FrameScheduler(
        camera=Camera(camera_index, width, height),
        estimator=PoseEstimator(
            model_complexity=model_complexity,
            min_detection_confidence=MIN_DETECTION_CONFIDENCE,
            min_tracking_confidence=MIN_TRACKING_CONFIDENCE,
        ),
        surface=TrackerDisplay(WINDOW_NAME, width, height),
        config=TrackerConfig(mirror=mirror),
    )
    try:
        scheduler.run()
    except AcquisitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return run_face_touch_alert(
        camera_index=args.camera,
        width=args.width,
        height=args.height,
        model_complexity=args.model_complexity,
        mirror=args.mirror,
    )
