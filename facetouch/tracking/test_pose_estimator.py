"""
Test suite for the MediaPipe pose adapter and camera capture.

Run with: python -m pytest facetouch/tracking -v
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import cv2
import numpy as np

from facetouch.proximity.landmarks import Part
from facetouch.tracking.camera import Camera
from facetouch.tracking.errors import AcquisitionError
from facetouch.tracking.pose_estimator import MP_POSE_INDEX, PoseEstimator, landmarks_to_pose


def mp_landmarks(visibility: float = 0.9) -> list[SimpleNamespace]:
    """33 MediaPipe-style landmarks; nose at (0.25, 0.5)."""
    lms = [SimpleNamespace(x=0.5, y=0.5, visibility=visibility) for _ in range(33)]
    lms[MP_POSE_INDEX[Part.NOSE]] = SimpleNamespace(x=0.25, y=0.5, visibility=visibility)
    return lms


class TestLandmarksToPose(unittest.TestCase):
    """Test cases for landmarks_to_pose."""

    def test_pixel_space(self):
        """Test normalized coordinates are scaled to pixels."""
        pose = landmarks_to_pose(mp_landmarks(), width=200, height=100)
        nose = pose[Part.NOSE]
        self.assertAlmostEqual(nose.x, 50.0)
        self.assertAlmostEqual(nose.y, 50.0)

    def test_flip_horizontal_mirrors_x(self):
        """Test mirroring flips x and keeps y."""
        pose = landmarks_to_pose(mp_landmarks(), width=200, height=100, flip_horizontal=True)
        self.assertAlmostEqual(pose[Part.NOSE].x, 150.0)
        self.assertAlmostEqual(pose[Part.NOSE].y, 50.0)

    def test_full_vocabulary(self):
        """Test every part of the vocabulary is produced."""
        pose = landmarks_to_pose(mp_landmarks(), width=200, height=100)
        self.assertEqual({lm.part for lm in pose}, set(Part))

    def test_score_is_mean_visibility(self):
        """Test pose score is the mean visibility."""
        pose = landmarks_to_pose(mp_landmarks(0.4), width=200, height=100)
        self.assertAlmostEqual(pose.score, 0.4)

    def test_visibility_clamped(self):
        """Test scores are clamped to [0, 1]."""
        pose = landmarks_to_pose(mp_landmarks(1.7), width=200, height=100)
        self.assertEqual(pose[Part.NOSE].score, 1.0)

    def test_short_landmark_list(self):
        """Test missing landmark indices are skipped."""
        pose = landmarks_to_pose(mp_landmarks()[:6], width=200, height=100)
        self.assertEqual(pose[Part.RIGHT_WRIST].score, 0.0)
        self.assertGreater(pose[Part.RIGHT_EYE].score, 0.0)


class TestPoseEstimator(unittest.TestCase):
    """Test cases for PoseEstimator."""

    def setUp(self):
        """Set up a blank BGR frame."""
        self.frame = np.zeros((100, 200, 3), dtype=np.uint8)

    # ============================================================
    # Estimate Tests
    # ============================================================

    def test_estimate_returns_single_pose(self):
        """Test a detected person gives one mirrored pose."""
        est = PoseEstimator()
        est._pose = MagicMock()
        est._pose.process.return_value = SimpleNamespace(
            pose_landmarks=SimpleNamespace(landmark=mp_landmarks())
        )
        poses = est.estimate(self.frame, flip_horizontal=True)
        self.assertEqual(len(poses), 1)
        self.assertAlmostEqual(poses[0][Part.NOSE].x, 150.0)

    def test_estimate_no_person(self):
        """Test no detection gives no poses."""
        est = PoseEstimator()
        est._pose = MagicMock()
        est._pose.process.return_value = SimpleNamespace(pose_landmarks=None)
        self.assertEqual(est.estimate(self.frame), [])

    def test_estimate_before_load(self):
        """Test estimating before load raises AcquisitionError."""
        with self.assertRaises(AcquisitionError):
            PoseEstimator().estimate(self.frame)

    def test_estimator_fault_propagates(self):
        """Test model errors reach the caller unchanged."""
        est = PoseEstimator()
        est._pose = MagicMock()
        est._pose.process.side_effect = RuntimeError("graph failed")
        with self.assertRaises(RuntimeError):
            est.estimate(self.frame)

    # ============================================================
    # Load Tests
    # ============================================================

    @patch("facetouch.tracking.pose_estimator.mp")
    def test_load_failure_is_acquisition_error(self, mock_mp):
        """Test a model load failure raises AcquisitionError."""
        mock_mp.solutions.pose.Pose.side_effect = OSError("model file missing")
        with self.assertRaises(AcquisitionError):
            PoseEstimator().load()

    @patch("facetouch.tracking.pose_estimator.mp")
    def test_load_and_close(self, mock_mp):
        """Test load passes settings to MediaPipe and close releases it."""
        est = PoseEstimator(model_complexity=0).load()
        self.assertTrue(est.is_loaded)
        kwargs = mock_mp.solutions.pose.Pose.call_args.kwargs
        self.assertEqual(kwargs["model_complexity"], 0)
        est.close()
        self.assertFalse(est.is_loaded)
        mock_mp.solutions.pose.Pose.return_value.close.assert_called_once()


class TestCamera(unittest.TestCase):
    """Test cases for Camera."""

    @patch("facetouch.tracking.camera.cv2.VideoCapture")
    def test_unavailable_camera(self, mock_capture):
        """Test an unopenable device raises AcquisitionError."""
        mock_capture.return_value.isOpened.return_value = False
        with self.assertRaises(AcquisitionError):
            Camera(3).acquire()
        mock_capture.return_value.release.assert_called_once()

    @patch("facetouch.tracking.camera.cv2.VideoCapture")
    def test_acquire_sets_preferred_resolution(self, mock_capture):
        """Test the preferred resolution is requested."""
        cap = mock_capture.return_value
        cap.isOpened.return_value = True
        cap.get.return_value = 640
        camera = Camera(0, 640, 360).acquire()
        self.assertTrue(camera.is_open)
        cap.set.assert_any_call(cv2.CAP_PROP_FRAME_WIDTH, 640)
        cap.set.assert_any_call(cv2.CAP_PROP_FRAME_HEIGHT, 360)

    @patch("facetouch.tracking.camera.cv2.VideoCapture")
    def test_read(self, mock_capture):
        """Test read returns frames and None on failure."""
        cap = mock_capture.return_value
        cap.isOpened.return_value = True
        cap.get.return_value = 0
        frame = np.zeros((4, 4, 3), dtype=np.uint8)
        with Camera() as camera:
            cap.read.return_value = (True, frame)
            self.assertIs(camera.read(), frame)
            cap.read.return_value = (False, None)
            self.assertIsNone(camera.read())
        cap.release.assert_called_once()

    def test_read_before_acquire(self):
        """Test reading before acquire raises AcquisitionError."""
        with self.assertRaises(AcquisitionError):
            Camera().read()


if __name__ == "__main__":
    unittest.main()
