import random

import pytest

from pong_arena.engine import GameLoop
from pong_arena.geometry import Field, Orientation
from pong_arena.hooks import ScoreSink, LevelSink, SoundPlayer, Renderer
from pong_arena.scheduler import FrameScheduler


class RecordingSink(ScoreSink, LevelSink):
    def __init__(self):
        self.values = []

    def set(self, paddle_id, value):
        self.values.append((paddle_id, value))

    @property
    def last(self):
        return self.values[-1] if self.values else None


class RecordingSound(SoundPlayer):
    def __init__(self):
        self.played = []

    def play(self, effect, cooldown_ms):
        self.played.append((effect, cooldown_ms))


class RecordingRenderer(Renderer):
    def __init__(self):
        self.calls = []

    def clear(self): self.calls.append("clear")
    def draw_board(self, field): self.calls.append("board")
    def draw_trail(self, points, radius): self.calls.append("trail")
    def draw_ball(self, ball): self.calls.append("ball")
    def draw_paddle(self, paddle): self.calls.append("paddle:" + paddle.id)


@pytest.fixture
def field():
    return Field(1000.0, 600.0, Orientation.HORIZONTAL)


@pytest.fixture
def tall_field():
    return Field(400.0, 700.0, Orientation.VERTICAL)


@pytest.fixture
def engine(field):
    loop = GameLoop(
        field,
        FrameScheduler(),
        score_sink=RecordingSink(),
        level_sink=RecordingSink(),
        sound=RecordingSound(),
        renderer=RecordingRenderer(),
        rng=random.Random(7),
    )
    return loop
