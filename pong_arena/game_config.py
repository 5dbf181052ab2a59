# pong_arena/game_config.py
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ArenaConfig:
    lives: int = 3

    # sizes as fractions of the field
    ball_r_frac: float = 0.02          # of the short side
    paddle_len_frac: float = 0.2       # of the primary-axis side
    paddle_thick_frac: float = 0.01    # of the goal-axis side
    paddle_gap: float = 5.0            # units between paddle and its goal line

    # serve
    opening_component: float = 7.0     # units/frame on each axis at epoch start
    serve_spread: float = math.pi / 4  # max departure angle of a reserve

    # paddle bounce
    max_bounce: float = math.pi / 3
    flush_eps: float = 0.5
    fallback_speed: float = 5.0

    # progression
    points_per_level: int = 5
    speed_increment: float = 2.0

    # AI
    predict_budget: int = 2000
    ai_margin: float = 1.15
    ai_min_speed: float = 3.0
    ai_max_speed: float = 30.0

    trail_max: int = 12

    # sound cooldowns
    wall_cooldown_ms: int = 40
    paddle_cooldown_ms: int = 60
    game_over_cooldown_ms: int = 60


CFG = ArenaConfig()
