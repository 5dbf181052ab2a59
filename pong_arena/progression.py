# pong_arena/progression.py
import math

from pygame.math import Vector2 as Vec2

from pong_arena.entities import Ball, Paddle
from pong_arena.game_config import CFG, ArenaConfig


def level_for(score: int, cfg: ArenaConfig = CFG) -> int:
    return 1 + score // cfg.points_per_level


def escalate(vel: Vec2, increment: float) -> Vec2:
    """Grow each component's magnitude by `increment`, keeping its sign."""
    return Vec2(
        math.copysign(abs(vel.x) + increment, vel.x),
        math.copysign(abs(vel.y) + increment, vel.y),
    )


def register_hit(paddle: Paddle, ball: Ball, cfg: ArenaConfig = CFG) -> bool:
    """Score a player return; returns True when it also levels up."""
    paddle.score += 1
    if paddle.score % cfg.points_per_level != 0:
        return False
    ball.vel = escalate(ball.vel, cfg.speed_increment)
    paddle.level += 1
    return True
