# pong_arena/ai.py
import math
from dataclasses import dataclass

from pygame.math import Vector2 as Vec2

from pong_arena.collision import clamp, face_depth, reflect_lateral
from pong_arena.entities import Ball, Paddle
from pong_arena.game_config import CFG, ArenaConfig
from pong_arena.geometry import Field


@dataclass(frozen=True)
class Prediction:
    lateral: float   # where the ball crosses the goal line offset
    steps: int       # frames until it gets there


def intercept_depth(paddle: Paddle, ball: Ball, field: Field) -> float:
    """Depth at which the ball's centre would touch the paddle face (minus 1 unit)."""
    face = face_depth(paddle, field)
    if paddle.is_player:
        return face + 1 + ball.r
    return face - 1 - ball.r


def predict_intercept(ball: Ball, field: Field, target_depth: float, max_steps: int) -> Prediction:
    """
    Step a copy of the ball frame by frame, bouncing off the side walls
    exactly like the live ball does, until it crosses `target_depth`.
    Paddles are ignored. Exhausting max_steps returns the last position.
    """
    g, p = field.goal_axis, field.primary_axis
    sim = Vec2(ball.pos)
    vel = Vec2(ball.vel)

    if vel[g] == 0:
        return Prediction(sim[p], 1)

    target = field.goal_coord(target_depth)
    upward = target >= sim[g]
    hi = field.lateral_len

    for step in range(max_steps):
        sim = sim + vel
        lateral, v_lateral, _ = reflect_lateral(sim[p], vel[p], ball.r, hi)
        sim[p] = lateral
        vel[p] = v_lateral
        if (upward and sim[g] >= target) or (not upward and sim[g] <= target):
            return Prediction(sim[p], step + 1)
    return Prediction(sim[p], max_steps)


def drive(paddle: Paddle, ball: Ball, field: Field, cfg: ArenaConfig = CFG) -> Prediction:
    """Move the AI paddle one frame toward the predicted intercept."""
    p = field.primary_axis
    pred = predict_intercept(ball, field, intercept_depth(paddle, ball, field), cfg.predict_budget)
    steps = max(1, pred.steps)

    target = pred.lateral - paddle.extent(p) / 2
    current = paddle.pos[p]
    distance = target - current
    speed = clamp(abs(distance) / steps * cfg.ai_margin, cfg.ai_min_speed, cfg.ai_max_speed)

    if abs(distance) > speed:
        paddle.move_lateral(current + math.copysign(speed, distance), field)
    else:
        paddle.move_lateral(target, field)
    return pred
