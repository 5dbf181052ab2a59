# pong_arena/engine.py
import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Tuple

from pygame.math import Vector2 as Vec2

from pong_arena import ai
from pong_arena.collision import resolve_paddle, resolve_walls
from pong_arena.constants import PLAYER_ID, PADDLE_HIT, WALL_HIT, GAME_OVER
from pong_arena.entities import Ball, Paddle, ball_radius, layout_paddle, make_trio
from pong_arena.game_config import CFG, ArenaConfig
from pong_arena.geometry import Field
from pong_arena.hooks import ScoreSink, LevelSink, SoundPlayer, Renderer
from pong_arena.progression import register_hit
from pong_arena.scheduler import FrameScheduler, TickToken
from pong_arena.serve import opening_serve, reserve

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class MatchState:
    lives: int
    epoch: int = 0
    game_over: bool = False
    serve_speed: float = 0.0


@dataclass
class World:
    """Everything one epoch owns; rebuilt from scratch on restart."""
    field: Field
    ball: Ball
    player: Paddle
    ai: Paddle
    trail: Deque[Vec2]


# ---------------- Game loop ----------------
class GameLoop:
    """
    Per-frame orchestration of one match.

    Each tick: draw board, apply input, step the ball, check goal lines,
    record the trail, resolve walls and paddles, move the AI, draw, and
    request the next tick. Game over stops the chain; restart() starts a
    new epoch with a fresh ball and paddles.
    """

    def __init__(self, field: Field, scheduler: FrameScheduler,
                 score_sink: Optional[ScoreSink] = None,
                 level_sink: Optional[LevelSink] = None,
                 sound: Optional[SoundPlayer] = None,
                 renderer: Optional[Renderer] = None,
                 rng: Optional[random.Random] = None,
                 cfg: ArenaConfig = CFG):
        self.field = field
        self.scheduler = scheduler
        self.score_sink = score_sink or ScoreSink()
        self.level_sink = level_sink or LevelSink()
        self.sound = sound or SoundPlayer()
        self.renderer = renderer or Renderer()
        self.rng = rng or random.Random()
        self.cfg = cfg

        self.phase = Phase.NOT_STARTED
        self.match = MatchState(lives=cfg.lives)
        self.world: Optional[World] = None

        self._token: Optional[TickToken] = None
        # latest pointer sample, written by input handlers, read by the next tick
        self._pointer: Optional[Tuple[float, float]] = None

    # ---------------- Lifecycle ----------------
    @property
    def running(self) -> bool:
        return self.phase == Phase.RUNNING

    def start(self):
        if self.phase != Phase.NOT_STARTED:
            return
        logger.info("Match started (%s play)", self.field.orientation.value)
        self._begin_epoch()

    def restart(self):
        self._revoke()
        self.match.epoch += 1
        logger.info("Restart -> epoch %d", self.match.epoch)
        self._begin_epoch()

    def stop(self):
        """Teardown: drop any pending tick without changing the phase."""
        self._revoke()

    def _begin_epoch(self):
        ball, player, opponent = make_trio(self.field, self.cfg)
        self.world = World(self.field, ball, player, opponent, deque(maxlen=self.cfg.trail_max))
        self.match.lives = self.cfg.lives
        self.match.game_over = False
        self.match.serve_speed = opening_serve(ball, self.field, self.cfg)
        self._pointer = None

        self.score_sink.set(PLAYER_ID, player.score)
        self.level_sink.set(PLAYER_ID, player.level)

        self.phase = Phase.RUNNING
        self._schedule()

    def _schedule(self):
        self._token = self.scheduler.request(self._tick, self.match.epoch)

    def _revoke(self):
        if self._token is not None:
            self._token.cancel()
            self._token = None

    # ---------------- Input / resize ----------------
    def set_pointer(self, pos: Tuple[float, float]):
        self._pointer = (float(pos[0]), float(pos[1]))

    def _apply_input(self):
        if self._pointer is None or self.world is None:
            return
        w = self.world
        p = w.field.primary_axis
        w.player.move_lateral(self._pointer[p] - w.player.extent(p) / 2, w.field)

    def resize(self, width: float, height: float, viewport_width: Optional[float] = None):
        """Apply a new field size right away, keeping entities proportionally placed."""
        old = self.field
        new = Field.build(width, height, viewport_width)
        self.field = new
        if self.world is None:
            return
        if new.orientation != old.orientation:
            logger.info("Orientation %s -> %s", old.orientation.value, new.orientation.value)

        w = self.world

        def remap(point) -> Vec2:
            d, lat = old.to_local(point)
            return new.from_local(d / old.goal_len * new.goal_len, lat / old.lateral_len * new.lateral_len)

        v_depth, v_lateral = old.vel_to_local(w.ball.vel)
        w.ball.pos = remap(w.ball.pos)
        w.ball.vel = new.vel_from_local(v_depth, v_lateral)
        w.ball.r = ball_radius(new, self.cfg)
        p = new.primary_axis
        w.ball.pos[p] = min(max(w.ball.pos[p], w.ball.r), new.lateral_len - w.ball.r)

        for paddle in (w.player, w.ai):
            centre = old.to_local(paddle.center)[1] / old.lateral_len
            layout_paddle(paddle, new, centre, self.cfg)

        points = [remap(pt) for pt in w.trail]
        w.trail.clear()
        w.trail.extend(points)
        w.field = new

    # ---------------- Tick ----------------
    def _tick(self, token: TickToken):
        if token is not self._token or token.epoch != self.match.epoch or not self.running:
            return
        self._token = None

        w = self.world
        f = w.field
        ball = w.ball

        self.renderer.clear()
        self.renderer.draw_board(f)

        self._apply_input()
        ball.step()

        depth = f.depth(ball.pos)
        if depth - ball.r <= 0:
            if self._lose_life():
                return
            reserve(ball, w.trail, f, self.match.serve_speed, self.rng, self.cfg)
        elif depth + ball.r >= f.goal_len:
            reserve(ball, w.trail, f, self.match.serve_speed, self.rng, self.cfg)

        w.trail.appendleft(Vec2(ball.pos))

        if resolve_walls(ball, f):
            self.sound.play(WALL_HIT, self.cfg.wall_cooldown_ms)

        if resolve_paddle(ball, w.player, f, self.cfg):
            self.sound.play(PADDLE_HIT, self.cfg.paddle_cooldown_ms)
            self._on_player_return()

        ai.drive(w.ai, ball, f, self.cfg)

        if resolve_paddle(ball, w.ai, f, self.cfg):
            self.sound.play(PADDLE_HIT, self.cfg.paddle_cooldown_ms)

        self.renderer.draw_trail(list(w.trail), ball.r)
        self.renderer.draw_ball(ball)
        self.renderer.draw_paddle(w.player)
        self.renderer.draw_paddle(w.ai)

        self._schedule()

    def _on_player_return(self):
        w = self.world
        leveled = register_hit(w.player, w.ball, self.cfg)
        self.score_sink.set(PLAYER_ID, w.player.score)
        if leveled:
            self.match.serve_speed = w.ball.speed
            self.level_sink.set(PLAYER_ID, w.player.level)
            logger.info("Level %d (speed %.1f)", w.player.level, self.match.serve_speed)

    def _lose_life(self) -> bool:
        """Take a life; returns True when that ended the match."""
        self.match.lives = max(0, self.match.lives - 1)
        logger.info("Life lost, %d left", self.match.lives)
        if self.match.lives > 0:
            return False
        self._enter_game_over()
        return True

    def _enter_game_over(self):
        self.sound.play(GAME_OVER, self.cfg.game_over_cooldown_ms)
        self.match.game_over = True
        self.phase = Phase.GAME_OVER
        self._revoke()
        self.renderer.clear()
        logger.info("Game over, score %d", self.world.player.score)
