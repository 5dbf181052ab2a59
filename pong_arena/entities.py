# pong_arena/entities.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from pygame.math import Vector2 as Vec2

from pong_arena.constants import PLAYER_ID, AI_ID, BLUE, RED
from pong_arena.game_config import CFG, ArenaConfig
from pong_arena.geometry import Field


# ---------------- Ball ----------------
@dataclass
class Ball:
    pos: Vec2
    vel: Vec2            # units per frame
    r: float
    last_hit: Optional[str] = None   # id of the paddle still overlapping since its hit

    @property
    def speed(self) -> float:
        return self.vel.length()

    def substeps(self) -> int:
        # one substep per radius of travel, at least one
        return max(1, math.ceil(self.vel.length() / self.r))

    def step(self) -> int:
        """Advance one frame; collisions are checked by the caller on the final
        position. Returns the number of substeps used."""
        steps = self.substeps()
        start = Vec2(self.pos)
        frame = Vec2(self.vel)
        for i in range(1, steps + 1):
            self.pos = start + frame * (i / steps)
        return steps


# ---------------- Paddle ----------------
@dataclass
class Paddle:
    id: str
    pos: Vec2            # top-left corner
    width: float
    height: float
    color: Tuple[int, int, int]
    score: int = 0
    level: int = 1

    @property
    def is_player(self) -> bool:
        return self.id == PLAYER_ID

    def extent(self, axis: int) -> float:
        return self.width if axis == 0 else self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.pos.x + self.width / 2, self.pos.y + self.height / 2)

    def rect(self) -> Tuple[float, float, float, float]:
        return self.pos.x, self.pos.y, self.width, self.height

    def clamp_to(self, field: Field):
        for axis in (0, 1):
            hi = max(0.0, field.size(axis) - self.extent(axis))
            self.pos[axis] = min(max(self.pos[axis], 0.0), hi)

    def move_lateral(self, corner: float, field: Field):
        """Put the paddle's low lateral edge at `corner`, then clamp."""
        self.pos[field.primary_axis] = corner
        self.clamp_to(field)


# ---------------- Layout ----------------
def ball_radius(field: Field, cfg: ArenaConfig = CFG) -> float:
    return max(1.0, field.short_side * cfg.ball_r_frac)


def paddle_depths(field: Field, is_player: bool, cfg: ArenaConfig = CFG) -> Tuple[float, float]:
    """(back, face) depths of a paddle; the face is the side the ball meets."""
    thick = field.goal_len * cfg.paddle_thick_frac
    if is_player:
        return cfg.paddle_gap, cfg.paddle_gap + thick
    return field.goal_len - cfg.paddle_gap, field.goal_len - cfg.paddle_gap - thick


def layout_paddle(paddle: Paddle, field: Field, lateral_frac: float = 0.5, cfg: ArenaConfig = CFG):
    """Size and place a paddle for `field`, centred at lateral_frac of the primary side."""
    g, p = field.goal_axis, field.primary_axis
    length = field.lateral_len * cfg.paddle_len_frac
    thick = field.goal_len * cfg.paddle_thick_frac

    if g == 0:
        paddle.width, paddle.height = thick, length
    else:
        paddle.width, paddle.height = length, thick

    back, face = paddle_depths(field, paddle.is_player, cfg)
    paddle.pos[g] = min(field.goal_coord(back), field.goal_coord(face))
    paddle.pos[p] = lateral_frac * field.lateral_len - length / 2
    paddle.clamp_to(field)


def make_paddle(field: Field, pid: str, cfg: ArenaConfig = CFG) -> Paddle:
    color = BLUE if pid == PLAYER_ID else RED
    paddle = Paddle(pid, Vec2(0, 0), 0.0, 0.0, color)
    layout_paddle(paddle, field, 0.5, cfg)
    return paddle


def make_trio(field: Field, cfg: ArenaConfig = CFG) -> Tuple[Ball, Paddle, Paddle]:
    ball = Ball(field.center, Vec2(0, 0), ball_radius(field, cfg))
    return ball, make_paddle(field, PLAYER_ID, cfg), make_paddle(field, AI_ID, cfg)
