# pong_arena/serve.py
import math
import random
from typing import Deque

from pong_arena.entities import Ball
from pong_arena.game_config import CFG, ArenaConfig
from pong_arena.geometry import Field


def opening_serve(ball: Ball, field: Field, cfg: ArenaConfig = CFG) -> float:
    """Launch from the centre toward the AI at 45 degrees; returns the speed."""
    c = cfg.opening_component
    ball.pos = field.center
    ball.vel = field.vel_from_local(c, c)
    ball.last_hit = None
    return ball.speed


def reserve(ball: Ball, trail: Deque, field: Field, speed: float,
            rng: random.Random, cfg: ArenaConfig = CFG):
    """Recentre the ball and send it toward the player at `speed`."""
    angle = rng.uniform(-cfg.serve_spread, cfg.serve_spread)
    ball.pos = field.center
    ball.vel = field.vel_from_local(-math.cos(angle) * speed, math.sin(angle) * speed)
    ball.last_hit = None
    trail.clear()
