"""OpenCV webcam capture."""

import logging

import cv2
import numpy as np
from numpy.typing import NDArray

from .errors import AcquisitionError

logger = logging.getLogger(__name__)

NO_CAMERA_MESSAGE = (
    "this device does not have a camera, "
    "or the camera is unavailable or in use"
)


class Camera:
    """Wrapper around cv2.VideoCapture with a preferred resolution."""

    def __init__(self, index: int = 0, preferred_width: int = 640, preferred_height: int = 360):
        self.index = index
        self.preferred_width = preferred_width
        self.preferred_height = preferred_height
        self._cap: cv2.VideoCapture | None = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def acquire(self) -> "Camera":
        """Open the capture device, raising AcquisitionError if unavailable."""
        cap = cv2.VideoCapture(self.index)
        if not cap.isOpened():
            cap.release()
            raise AcquisitionError(f"{NO_CAMERA_MESSAGE} (index {self.index})")

        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.preferred_width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.preferred_height)
        self._cap = cap

        w = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        h = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        logger.info("Camera %d opened at %dx%d", self.index, w, h)
        return self

    def read(self) -> NDArray[np.uint8] | None:
        """Latest frame, or None if the device returned nothing."""
        if self._cap is None:
            raise AcquisitionError("camera has not been acquired")
        ok, frame = self._cap.read()
        if not ok:
            return None
        return frame

    def release(self) -> None:
        """Release the capture device."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def __enter__(self):
        return self.acquire()

    def __exit__(self, *args):
        self.release()
