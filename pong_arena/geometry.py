# pong_arena/geometry.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pygame.math import Vector2 as Vec2

from pong_arena.constants import VERTICAL_BREAKPOINT


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def classify(viewport_width: float, breakpoint: float = VERTICAL_BREAKPOINT) -> Orientation:
    return Orientation.VERTICAL if viewport_width <= breakpoint else Orientation.HORIZONTAL


@dataclass(frozen=True)
class Field:
    """
    Rectangular play area in field-local units (origin top-left, y down).

    Horizontal play: the player guards x=0, the AI guards x=width, and the
    ball bounces off the top/bottom walls.
    Vertical play: the player guards y=height (bottom), the AI guards y=0.

    Game logic works in local (depth, lateral) coordinates: depth runs from
    the player's goal line toward the AI's, lateral runs along the bouncing
    (primary) axis. Only the binding of those to x/y depends on orientation.
    """
    width: float
    height: float
    orientation: Orientation = Orientation.HORIZONTAL

    @classmethod
    def build(cls, width: float, height: float, viewport_width: Optional[float] = None) -> "Field":
        vw = width if viewport_width is None else viewport_width
        return cls(float(width), float(height), classify(vw))

    # ---------------- Axis roles ----------------
    @property
    def goal_axis(self) -> int:
        return 0 if self.orientation == Orientation.HORIZONTAL else 1

    @property
    def primary_axis(self) -> int:
        return 1 - self.goal_axis

    @property
    def toward_ai(self) -> int:
        # sign of the physical goal-axis direction pointing at the AI
        return 1 if self.orientation == Orientation.HORIZONTAL else -1

    def size(self, axis: int) -> float:
        return self.width if axis == 0 else self.height

    @property
    def goal_len(self) -> float:
        return self.size(self.goal_axis)

    @property
    def lateral_len(self) -> float:
        return self.size(self.primary_axis)

    @property
    def short_side(self) -> float:
        return min(self.width, self.height)

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2, self.height / 2)

    # ---------------- Local <-> physical ----------------
    def goal_coord(self, depth: float) -> float:
        """Physical goal-axis coordinate of a depth."""
        return depth if self.toward_ai > 0 else self.goal_len - depth

    def depth(self, point) -> float:
        return self.goal_coord(point[self.goal_axis])

    def to_local(self, point) -> Tuple[float, float]:
        return self.depth(point), float(point[self.primary_axis])

    def from_local(self, depth: float, lateral: float) -> Vec2:
        p = Vec2(0, 0)
        p[self.goal_axis] = self.goal_coord(depth)
        p[self.primary_axis] = lateral
        return p

    def vel_to_local(self, vel) -> Tuple[float, float]:
        return vel[self.goal_axis] * self.toward_ai, float(vel[self.primary_axis])

    def vel_from_local(self, v_depth: float, v_lateral: float) -> Vec2:
        v = Vec2(0, 0)
        v[self.goal_axis] = v_depth * self.toward_ai
        v[self.primary_axis] = v_lateral
        return v
