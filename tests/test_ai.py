import pytest
from pygame.math import Vector2 as Vec2

from pong_arena import ai
from pong_arena.collision import resolve_walls
from pong_arena.constants import AI_ID
from pong_arena.entities import Ball, make_paddle
from pong_arena.game_config import CFG


def brute_force(ball, field, crossed):
    """Run the real ball (step + wall bounce) until `crossed(ball)`."""
    b = Ball(Vec2(ball.pos), Vec2(ball.vel), ball.r)
    for step in range(1, 5000):
        b.step()
        resolve_walls(b, field)
        if crossed(b):
            return b, step
    raise AssertionError("ball never crossed")


@pytest.mark.parametrize("pos, vel", [
    ((300, 100), (9, -13)),
    ((120, 500), (6.5, 17.25)),
    ((500, 300), (11, 0.3)),
])
def test_prediction_matches_brute_force_horizontal(field, pos, vel):
    paddle = make_paddle(field, AI_ID)
    ball = Ball(Vec2(pos), Vec2(vel), 12)
    target = ai.intercept_depth(paddle, ball, field)

    pred = ai.predict_intercept(ball, field, target, CFG.predict_budget)
    b, steps = brute_force(ball, field, lambda b: b.pos.x >= target)

    assert pred.steps == steps
    assert pred.lateral == b.pos.y


def test_prediction_matches_brute_force_vertical(tall_field):
    paddle = make_paddle(tall_field, AI_ID)
    ball = Ball(Vec2(200, 600), Vec2(13, -9), 8)
    target_y = tall_field.goal_coord(ai.intercept_depth(paddle, ball, tall_field))

    pred = ai.predict_intercept(ball, tall_field, ai.intercept_depth(paddle, ball, tall_field), CFG.predict_budget)
    b, steps = brute_force(ball, tall_field, lambda b: b.pos.y <= target_y)

    assert pred.steps == steps
    assert pred.lateral == b.pos.x


def test_intercept_depth_sits_in_front_of_face(field):
    paddle = make_paddle(field, AI_ID)
    ball = Ball(Vec2(500, 300), Vec2(5, 5), 12)
    assert ai.intercept_depth(paddle, ball, field) == pytest.approx(985 - 1 - 12)


def test_zero_driving_velocity_targets_current_position(field):
    ball = Ball(Vec2(500, 321), Vec2(0, 9), 12)
    pred = ai.predict_intercept(ball, field, 972, CFG.predict_budget)
    assert pred == ai.Prediction(321, 1)


def test_exhausted_budget_returns_last_position(field):
    ball = Ball(Vec2(100, 300), Vec2(1, 0), 12)
    pred = ai.predict_intercept(ball, field, 972, 3)
    assert pred.steps == 3
    assert pred.lateral == 300


def test_drive_moves_at_required_speed(field):
    paddle = make_paddle(field, AI_ID)              # y 240
    ball = Ball(Vec2(500, 100), Vec2(10, 0), 12)

    pred = ai.drive(paddle, ball, field)

    assert pred.steps == 48                        # 500 + 48 * 10 >= 972
    required = 200 / 48 * CFG.ai_margin
    assert paddle.pos.y == pytest.approx(240 - required)


def test_drive_speed_is_capped(field):
    paddle = make_paddle(field, AI_ID)
    ball = Ball(Vec2(960, 20), Vec2(10, 0), 12)
    ai.drive(paddle, ball, field)
    assert paddle.pos.y == pytest.approx(240 - CFG.ai_max_speed)


def test_drive_snaps_when_close(field):
    paddle = make_paddle(field, AI_ID)
    ball = Ball(Vec2(500, 302), Vec2(10, 0), 12)
    ai.drive(paddle, ball, field)
    assert paddle.pos.y == pytest.approx(242)


def test_drive_keeps_paddle_in_bounds(field):
    paddle = make_paddle(field, AI_ID)
    ball = Ball(Vec2(900, 13), Vec2(10, 0), 12)
    for _ in range(40):
        ai.drive(paddle, ball, field)
        assert 0 <= paddle.pos.y <= field.height - paddle.height
    assert paddle.pos.y == 0
