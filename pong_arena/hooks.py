# pong_arena/hooks.py
# Collaborators the engine talks to. Defaults do nothing so the engine
# runs headless; the pygame client overrides them.


class ScoreSink:
    def set(self, paddle_id, value): pass


class LevelSink:
    def set(self, paddle_id, value): pass


class SoundPlayer:
    def play(self, effect, cooldown_ms): pass


class Renderer:
    def clear(self): pass
    def draw_board(self, field): pass
    def draw_trail(self, points, radius): pass
    def draw_ball(self, ball): pass
    def draw_paddle(self, paddle): pass
