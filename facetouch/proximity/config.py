"""Configuration constants for face-touch detection."""

import logging
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Integer from the environment, falling back to default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


def env_bool(name: str, default: bool) -> bool:
    """Boolean from the environment; "1", "true", "yes" and "on" are true."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# CAMERA / VIEW SETTINGS
# =============================================================================
CAMERA_INDEX = env_int("FACETOUCH_CAMERA", 0)
CAMERA_WIDTH = env_int("FACETOUCH_WIDTH", 640)
CAMERA_HEIGHT = env_int("FACETOUCH_HEIGHT", int(CAMERA_WIDTH / 1.777))

# Selfie view: pose and video are mirrored so the window behaves like a mirror.
MIRROR_VIDEO = env_bool("FACETOUCH_MIRROR", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# =============================================================================
# POSE MODEL
# =============================================================================
MODEL_COMPLEXITY = 1
MIN_DETECTION_CONFIDENCE = 0.5
MIN_TRACKING_CONFIDENCE = 0.5


# =============================================================================
# CONFIDENCE GATES
# =============================================================================
MIN_POSE_CONFIDENCE = 0.1
MIN_PART_CONFIDENCE = 0.1


# =============================================================================
# TOUCH THRESHOLD
# =============================================================================
# Nose-to-eye distance times this multiplier approximates "hand at the face".
TOUCH_THRESHOLD_MULTIPLIER = 4.0
TOUCH_THRESHOLD_FALLBACK_PX = 175.0


# =============================================================================
# FEEDBACK STYLE (BGR)
# =============================================================================
COLOR_AQUA = (255, 255, 0)
COLOR_RED = (0, 0, 255)
COLOR_GREEN = (0, 128, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0)

SAFE_BORDER_PX = 3
DANGER_BORDER_PX = 5
KEYPOINT_RADIUS = 3

WINDOW_NAME = "Face Touch Alert"

# Startup error stays on screen this long; 0 waits for a key press.
ERROR_DISPLAY_MS = env_int("FACETOUCH_ERROR_WAIT_MS", 0)
