"""Maps proximity verdicts to visual feedback."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from facetouch.proximity.classifier import ProximityVerdict
from facetouch.proximity.config import (
    COLOR_AQUA,
    COLOR_GREEN,
    COLOR_RED,
    DANGER_BORDER_PX,
    SAFE_BORDER_PX,
)

if TYPE_CHECKING:
    from .visualization import TrackerDisplay

Color = tuple[int, int, int]


class FeedbackMode(Enum):
    SAFE = "SAFE"
    DANGER = "DANGER"


@dataclass(frozen=True)
class BorderStyle:
    color: Color
    thickness: int


NORMAL_BORDER = BorderStyle(COLOR_GREEN, SAFE_BORDER_PX)
DANGER_BORDER = BorderStyle(COLOR_RED, DANGER_BORDER_PX)


@dataclass(frozen=True)
class FeedbackState:
    """Everything the display needs to reflect one verdict."""
    mode: FeedbackMode
    border: BorderStyle
    keypoint_color: Color
    danger_zone_visible: bool
    info_lines: tuple[str, ...]

    @property
    def is_danger(self) -> bool:
        return self.mode is FeedbackMode.DANGER


def format_info_lines(verdict: ProximityVerdict) -> tuple[str, ...]:
    """Diagnostic text: the active threshold, then every evaluated pair."""
    lines = [f"Touch threshold: {verdict.threshold:.1f}"]
    for pair in verdict.pairs:
        lines.append(f"Distance ({pair.label}): {pair.distance:.1f}")
    return tuple(lines)


def render_feedback(verdict: ProximityVerdict) -> FeedbackState:
    """Pure mapping from a verdict to the visual state."""
    info = format_info_lines(verdict)
    if verdict.is_danger:
        return FeedbackState(FeedbackMode.DANGER, DANGER_BORDER, COLOR_RED, True, info)
    return FeedbackState(FeedbackMode.SAFE, NORMAL_BORDER, COLOR_AQUA, False, info)


def apply_feedback(surface: "TrackerDisplay", state: FeedbackState) -> None:
    """Write every field of the state to the surface, unconditionally."""
    surface.set_border(state.border)
    surface.set_keypoint_color(state.keypoint_color)
    surface.set_danger_zone_visible(state.danger_zone_visible)
    surface.set_info_lines(state.info_lines)
