"""Pose builders shared by the test modules."""

from .proximity.landmarks import Landmark, Part, Pose

_PARTS_BY_NAME = {p.name.lower(): p for p in Part}


def make_pose(score: float | None = None, **parts: tuple[float, float, float]) -> Pose:
    """
    Build a pose from part=(x, y, score) keyword arguments.

    Example:
        make_pose(nose=(100, 100, 0.9), left_wrist=(100, 160, 0.9))
    """
    return Pose.from_landmarks(
        [Landmark(_PARTS_BY_NAME[name], x, y, s) for name, (x, y, s) in parts.items()],
        score=score,
    )


def touching_pose(score: float = 0.8) -> Pose:
    """Right wrist 60 px below the nose, eye 20 px away; left wrist undetected."""
    return make_pose(
        score=score,
        nose=(100.0, 100.0, 0.9),
        left_eye=(120.0, 100.0, 0.9),
        right_wrist=(100.0, 160.0, 0.9),
        left_wrist=(300.0, 300.0, 0.05),
    )


def resting_pose(score: float = 0.8) -> Pose:
    """Right wrist far from the face."""
    return make_pose(
        score=score,
        nose=(100.0, 100.0, 0.9),
        left_eye=(120.0, 100.0, 0.9),
        right_wrist=(500.0, 340.0, 0.9),
    )
