"""Geometry helpers for landmark positions."""

import math

from .landmarks import Landmark

Point2 = tuple[float, float]


def dist2(a: Point2, b: Point2) -> float:
    """Euclidean distance between 2D points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def landmark_distance(a: Landmark, b: Landmark) -> float:
    """Euclidean distance between two landmark positions, in pixels."""
    return dist2(a.position, b.position)
