"""OpenCV display surface for the face-touch overlay."""

import logging

import cv2
import numpy as np
from numpy.typing import NDArray

from facetouch.proximity.config import (
    COLOR_AQUA,
    COLOR_BLACK,
    COLOR_RED,
    COLOR_WHITE,
    ERROR_DISPLAY_MS,
    KEYPOINT_RADIUS,
    WINDOW_NAME,
)
from facetouch.proximity.landmarks import Pose

from .feedback import BorderStyle, Color, NORMAL_BORDER

logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX
DANGER_ZONE_TEXT = "DON'T TOUCH YOUR FACE!"


def draw_info_panel(frame: NDArray[np.uint8], lines: tuple[str, ...]) -> None:
    """Draw text panel in the top-left corner."""
    if not lines:
        return
    x0, y0, line_h = 12, 22, 22
    max_chars = max(len(s) for s in lines)
    box_w = min(16 + max_chars * 9, frame.shape[1] - 24)
    box_h = 12 + line_h * len(lines)

    cv2.rectangle(frame, (8, 8), (8 + box_w, 8 + box_h), COLOR_BLACK, -1)
    for i, s in enumerate(lines):
        cv2.putText(frame, s, (x0, y0 + i * line_h), FONT, 0.5, COLOR_WHITE, 1, cv2.LINE_AA)


def draw_danger_zone(frame: NDArray[np.uint8]) -> None:
    """Draw the warning banner along the bottom of the frame."""
    h, w = frame.shape[:2]
    (tw, th), _ = cv2.getTextSize(DANGER_ZONE_TEXT, FONT, 0.9, 2)
    y1 = h - th - 24
    cv2.rectangle(frame, (0, y1), (w, h), COLOR_RED, -1)
    cv2.putText(frame, DANGER_ZONE_TEXT, ((w - tw) // 2, h - 12), FONT, 0.9, COLOR_WHITE, 2, cv2.LINE_AA)


def draw_keypoints(
    surface: "TrackerDisplay",
    pose: Pose,
    min_confidence: float,
    color: Color,
    scale: float = 1.0,
) -> None:
    """Draw every landmark scoring at least min_confidence."""
    for lm in pose:
        if lm.score < min_confidence:
            continue
        y, x = lm.position
        surface.draw_point(y * scale, x * scale, KEYPOINT_RADIUS, color)


class TrackerDisplay:
    """
    OpenCV window holding the current frame and its alert chrome.

    Border, keypoint color, danger zone and info panel persist until they
    are set again, so a cycle that skips rendering leaves them untouched.
    """

    def __init__(self, window_name: str = WINDOW_NAME, width: int = 640, height: int = 360):
        self.window_name = window_name
        self.width = width
        self.height = height
        self.border: BorderStyle = NORMAL_BORDER
        self.keypoint_color: Color = COLOR_AQUA
        self.danger_zone_visible = False
        self.info_lines: tuple[str, ...] = ()
        self._canvas: NDArray[np.uint8] | None = None
        self._window_open = False

    # -------------------------------------------------------------------------
    # Drawing primitives
    # -------------------------------------------------------------------------

    def draw_image(self, frame: NDArray[np.uint8], mirror: bool = False) -> None:
        """Replace the canvas with a frame, optionally mirrored."""
        self._canvas = cv2.flip(frame, 1) if mirror else frame.copy()
        self.height, self.width = self._canvas.shape[:2]

    def draw_point(self, y: float, x: float, radius: int, color: Color) -> None:
        """Draw a filled circle on the canvas."""
        if self._canvas is None:
            return
        cv2.circle(self._canvas, (int(round(x)), int(round(y))), radius, color, -1)

    # -------------------------------------------------------------------------
    # Chrome
    # -------------------------------------------------------------------------

    def set_border(self, style: BorderStyle) -> None:
        self.border = style

    def set_keypoint_color(self, color: Color) -> None:
        self.keypoint_color = color

    def set_danger_zone_visible(self, visible: bool) -> None:
        self.danger_zone_visible = visible

    def set_info_lines(self, lines: tuple[str, ...]) -> None:
        self.info_lines = tuple(lines)

    def show_message(self, message: str) -> None:
        """Show a diagnostic message in the info panel."""
        self.info_lines = (message,)

    def compose(self) -> NDArray[np.uint8]:
        """Canvas with the border, danger zone and info panel applied."""
        if self._canvas is None:
            frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        else:
            frame = self._canvas.copy()

        if self.danger_zone_visible:
            draw_danger_zone(frame)
        draw_info_panel(frame, self.info_lines)

        t = self.border.thickness
        return cv2.copyMakeBorder(frame, t, t, t, t, cv2.BORDER_CONSTANT, value=self.border.color)

    # -------------------------------------------------------------------------
    # Window
    # -------------------------------------------------------------------------

    def show(self) -> int:
        """Display the composed frame and return key press."""
        if not self._window_open:
            cv2.namedWindow(self.window_name, cv2.WINDOW_NORMAL)
            self._window_open = True
        cv2.imshow(self.window_name, self.compose())
        return cv2.waitKey(1) & 0xFF

    def show_error(self, message: str, wait_ms: int = ERROR_DISPLAY_MS) -> None:
        """Show a message in the info panel and hold it on screen."""
        self.show_message(message)
        try:
            self.show()
            cv2.waitKey(wait_ms)
        except cv2.error as e:
            logger.warning("Cannot display error window: %s", e)

    def window_closed(self) -> bool:
        """Whether the user closed the window."""
        if not self._window_open:
            return False
        return cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1

    def close(self) -> None:
        """Close display window."""
        if self._window_open:
            cv2.destroyWindow(self.window_name)
            self._window_open = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
