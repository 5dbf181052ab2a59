import math
import random
from collections import deque

import pytest
from pygame.math import Vector2 as Vec2

from pong_arena.entities import Ball
from pong_arena.game_config import CFG
from pong_arena.serve import opening_serve, reserve


def test_opening_serve_heads_for_the_ai(field, tall_field):
    ball = Ball(Vec2(1, 1), Vec2(0, 0), 12, last_hit="player")
    speed = opening_serve(ball, field)
    assert ball.pos == Vec2(500, 300)
    assert ball.vel == Vec2(7, 7)
    assert speed == pytest.approx(7 * math.sqrt(2))
    assert ball.last_hit is None

    opening_serve(ball, tall_field)
    assert ball.vel == Vec2(7, -7)


@pytest.mark.parametrize("seed", range(10))
def test_reserve_goes_to_player_and_clears_trail(field, seed):
    ball = Ball(Vec2(990, 10), Vec2(9, 9), 12, last_hit="ai")
    trail = deque([Vec2(1, 1), Vec2(2, 2)], maxlen=12)

    reserve(ball, trail, field, 12.5, random.Random(seed))

    assert ball.pos == field.center
    assert ball.vel.x < 0
    assert ball.speed == pytest.approx(12.5)
    assert abs(ball.vel.y) <= 12.5 * math.sin(CFG.serve_spread) + 1e-9
    assert ball.last_hit is None
    assert len(trail) == 0


def test_reserve_vertical_goes_down(tall_field):
    ball = Ball(Vec2(0, 0), Vec2(0, 0), 8)
    reserve(ball, deque(), tall_field, 10, random.Random(3))
    assert ball.vel.y > 0
