# pong_arena/collision.py
import math
from typing import Tuple

from pygame.math import Vector2 as Vec2

from pong_arena.entities import Ball, Paddle
from pong_arena.game_config import CFG, ArenaConfig
from pong_arena.geometry import Field


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


# ---------------- Walls ----------------
def reflect_lateral(lateral: float, v_lateral: float, r: float, hi: float) -> Tuple[float, float, bool]:
    """Bounce a coordinate off [0, hi] walls; returns (lateral, velocity, hit)."""
    hit = False
    if lateral + r >= hi:
        lateral = hi - r
        v_lateral = -abs(v_lateral)
        hit = True
    if lateral - r <= 0:
        lateral = r
        v_lateral = abs(v_lateral)
        hit = True
    return lateral, v_lateral, hit


def resolve_walls(ball: Ball, field: Field) -> bool:
    p = field.primary_axis
    lateral, v_lateral, hit = reflect_lateral(ball.pos[p], ball.vel[p], ball.r, field.lateral_len)
    if hit:
        ball.pos[p] = lateral
        ball.vel[p] = v_lateral
    return hit


# ---------------- Paddles ----------------
def nearest_point(ball: Ball, paddle: Paddle) -> Vec2:
    return Vec2(
        clamp(ball.pos.x, paddle.pos.x, paddle.pos.x + paddle.width),
        clamp(ball.pos.y, paddle.pos.y, paddle.pos.y + paddle.height),
    )


def overlaps(ball: Ball, paddle: Paddle) -> bool:
    return (ball.pos - nearest_point(ball, paddle)).length_squared() <= ball.r * ball.r


def impact_offset(ball: Ball, paddle: Paddle, field: Field) -> float:
    """-1..1 position of the ball along the paddle, 0 at its centre."""
    p = field.primary_axis
    half = paddle.extent(p) / 2
    return clamp((ball.pos[p] - paddle.center[p]) / half, -1.0, 1.0)


def bounce_angle(offset: float, max_bounce: float = CFG.max_bounce) -> float:
    return clamp(offset, -1.0, 1.0) * max_bounce


def face_depth(paddle: Paddle, field: Field) -> float:
    """Depth of the paddle side that faces the opponent."""
    g = field.goal_axis
    a = field.goal_coord(paddle.pos[g])
    b = field.goal_coord(paddle.pos[g] + paddle.extent(g))
    return max(a, b) if paddle.is_player else min(a, b)


def resolve_paddle(ball: Ball, paddle: Paddle, field: Field, cfg: ArenaConfig = CFG) -> bool:
    """
    Bounce the ball off `paddle`. Returns True only on the first frame of a
    contact; while the overlap lasts the paddle is remembered in
    ball.last_hit and further frames are ignored.
    """
    if not overlaps(ball, paddle):
        if ball.last_hit == paddle.id:
            ball.last_hit = None
        return False

    if ball.last_hit == paddle.id:
        return False
    ball.last_hit = paddle.id

    angle = bounce_angle(impact_offset(ball, paddle, field), cfg.max_bounce)
    speed = ball.speed or cfg.fallback_speed
    away = 1 if paddle.is_player else -1

    ball.vel = field.vel_from_local(away * math.cos(angle) * speed, math.sin(angle) * speed)

    flush = face_depth(paddle, field) + away * (ball.r + cfg.flush_eps)
    ball.pos[field.goal_axis] = field.goal_coord(flush)
    return True
