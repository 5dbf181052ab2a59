import math

import pytest
from pygame.math import Vector2 as Vec2

from pong_arena.constants import PLAYER_ID
from pong_arena.entities import Ball, make_paddle
from pong_arena.progression import escalate, level_for, register_hit


@pytest.mark.parametrize("score, level", [(0, 1), (4, 1), (5, 2), (9, 2), (10, 3), (14, 3), (25, 6)])
def test_level_for(score, level):
    assert level_for(score) == level


def test_escalate_keeps_signs():
    assert escalate(Vec2(3, -4), 2) == Vec2(5, -6)
    assert escalate(Vec2(-7, 7), 2) == Vec2(-9, 9)


def test_level_tracks_score_on_every_hit(field):
    player = make_paddle(field, PLAYER_ID)
    ball = Ball(Vec2(500, 300), Vec2(3, -4), 12)

    leveled_at = []
    for _ in range(12):
        if register_hit(player, ball):
            leveled_at.append(player.score)
        assert player.level == level_for(player.score)

    assert leveled_at == [5, 10]
    assert ball.vel == Vec2(7, -8)


def test_speed_grows_only_on_level_up(field):
    player = make_paddle(field, PLAYER_ID)
    ball = Ball(Vec2(500, 300), Vec2(6, 8), 12)
    player.score = 3
    register_hit(player, ball)
    assert ball.speed == pytest.approx(10)
    register_hit(player, ball)
    assert ball.speed == pytest.approx(math.hypot(8, 10))
