import logging

import pygame

from pong_arena.constants import WHITE, BLACK, GRAY, DARK, BLUE, GREEN, ORANGE, RED
from pong_arena.engine import GameLoop, Phase
from pong_arena.geometry import Field
from pong_client.render import PygameRenderer
from pong_client.ui import Button, TextInput, Dashboard, DashboardScore, DashboardLevel

logger = logging.getLogger(__name__)


class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def on_exit(self): pass
    def on_resize(self): pass
    def on_network(self, msg): pass
    def handle_event(self, event): pass
    def update(self, dt): pass
    def draw(self, surface): pass


# -------------------- Menu --------------------
class MenuScreen(Screen):
    name = "menu"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 64)
        self.small_font = pygame.font.SysFont(None, 26)
        self.start_btn = Button((0, 0, 260, 55), "Start Game", self.small_font, BLUE, WHITE)
        self.board_btn = Button((0, 0, 260, 45), "Leaderboard", self.small_font, ORANGE, BLACK)

    def _layout(self):
        w, h = self.app.size()
        self.start_btn.rect.center = (w // 2, h // 2 + 40)
        self.board_btn.rect.center = (w // 2, h // 2 + 105)

    def on_enter(self, **kwargs):
        self._layout()

    def on_resize(self):
        self._layout()

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.app.sound.unlock()
        if self.start_btn.is_clicked(event):
            self.app.change_screen("game")
        elif self.board_btn.is_clicked(event):
            self.app.change_screen("leaderboard", back="menu")

    def draw(self, surface):
        w, h = self.app.size()
        surface.fill(DARK)
        title = self.title_font.render("The Pong Arena", True, WHITE)
        surface.blit(title, title.get_rect(center=(w // 2, h // 2 - 80)))
        sub = self.small_font.render("Step into the challenge. Can you top the leaderboard?", True, GRAY)
        surface.blit(sub, sub.get_rect(center=(w // 2, h // 2 - 30)))
        self.start_btn.draw(surface)
        self.board_btn.draw(surface)


# -------------------- Game --------------------
class GameScreen(Screen):
    name = "game"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 54)
        self.small_font = pygame.font.SysFont(None, 24)

        self.dashboard = Dashboard(self.small_font)
        self.renderer = PygameRenderer(app.field_surface())

        fr = app.field_rect()
        self.engine = GameLoop(
            Field.build(fr.width, fr.height, viewport_width=app.size()[0]),
            app.scheduler,
            score_sink=DashboardScore(self.dashboard),
            level_sink=DashboardLevel(self.dashboard),
            sound=app.sound,
            renderer=self.renderer,
        )

        self.name_input = TextInput((0, 0, 300, 45), self.small_font, "Enter Your Name")
        self.submit_btn = Button((0, 0, 130, 45), "Submit", self.small_font, GREEN, WHITE)
        self.restart_btn = Button((0, 0, 200, 45), "Restart", self.small_font, BLUE, WHITE)
        self.board_btn = Button((0, 0, 200, 40), "Leaderboard", self.small_font, ORANGE, BLACK)
        self.msg = ""
        self.submitting = False
        self._layout()

    def _layout(self):
        w, h = self.app.size()
        cx, cy = w // 2, h // 2
        self.name_input.rect.topleft = (cx - 220, cy + 10)
        self.submit_btn.rect.topleft = (cx + 90, cy + 10)
        self.restart_btn.rect.center = (cx, cy + 95)
        self.board_btn.rect.center = (cx, cy + 145)

    def on_enter(self, **kwargs):
        if self.engine.phase == Phase.NOT_STARTED:
            self.engine.start()

    def on_resize(self):
        fr = self.app.field_rect()
        self.renderer.set_surface(self.app.field_surface())
        self.engine.resize(fr.width, fr.height, viewport_width=self.app.size()[0])
        self._layout()

    def _field_point(self, pos):
        fr = self.app.field_rect()
        return pos[0] - fr.x, pos[1] - fr.y

    def handle_event(self, event):
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            self.app.sound.unlock()

        if event.type == pygame.MOUSEMOTION:
            self.engine.set_pointer(self._field_point(event.pos))
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            w, h = self.app.size()
            self.engine.set_pointer(self._field_point((event.x * w, event.y * h)))

        if (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.dashboard.volume_rect.collidepoint(event.pos)):
            muted = self.app.sound.toggle_mute()
            logger.debug("Muted: %s", muted)

        if self.engine.phase != Phase.GAME_OVER:
            return

        entered = self.name_input.handle_event(event)
        if entered or self.submit_btn.is_clicked(event):
            self._submit()
        elif self.restart_btn.is_clicked(event):
            self._restart()
        elif self.board_btn.is_clicked(event):
            self.app.change_screen("leaderboard", back="game")

    def _submit(self):
        name = self.name_input.value()
        if not name:
            self.msg = "Please enter your name."
            return
        self._set_submitting(True)
        self.app.leaderboard.submit_async(name, self.dashboard.score)

    def _set_submitting(self, busy):
        self.submitting = busy
        self.submit_btn.enabled = not busy
        self.submit_btn.text = "Submitting..." if busy else "Submit"

    def _restart(self):
        self.msg = ""
        self.name_input.text = ""
        self._set_submitting(False)
        self.dashboard.reset()
        self.engine.restart()

    def on_network(self, msg):
        # a reply for a match that was restarted meanwhile is stale
        if msg.get("type") != "SUBMITTED" or not self.submitting:
            return
        self._set_submitting(False)
        self.msg = msg.get("message", "")

    def update(self, dt):
        self.app.scheduler.run_frame()

    def draw(self, surface):
        if self.engine.phase != Phase.RUNNING:
            self.renderer.clear()
        self.dashboard.draw(surface, self.app.dash_rect(), self.engine.match.lives, self.app.sound.muted)
        if self.engine.phase == Phase.GAME_OVER:
            self._draw_game_over(surface)

    def _draw_game_over(self, surface):
        w, h = self.app.size()
        box = pygame.Rect(0, 0, 520, 300)
        box.center = (w // 2, h // 2 + 40)
        pygame.draw.rect(surface, (245, 245, 245), box, border_radius=14)
        pygame.draw.rect(surface, (0, 0, 0), box, 2, border_radius=14)

        title = self.title_font.render("Game Over", True, BLACK)
        surface.blit(title, title.get_rect(center=(w // 2, box.top + 40)))
        score = self.small_font.render(f"Your Score: {self.dashboard.score}", True, BLACK)
        surface.blit(score, score.get_rect(center=(w // 2, box.top + 85)))

        self.name_input.draw(surface)
        self.submit_btn.draw(surface)
        self.restart_btn.draw(surface)
        self.board_btn.draw(surface)

        if self.msg:
            msg = self.small_font.render(self.msg, True, GRAY)
            surface.blit(msg, msg.get_rect(center=(w // 2, box.bottom - 12)))


# -------------------- Leaderboard --------------------
class LeaderboardScreen(Screen):
    name = "leaderboard"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 48)
        self.small_font = pygame.font.SysFont(None, 26)
        self.close_btn = Button((0, 0, 44, 40), "X", self.small_font, RED, WHITE)
        self.retry_btn = Button((0, 0, 160, 45), "Try again", self.small_font, BLUE, WHITE)

        self.back = "menu"
        self.backdrop = None
        self.scores = []
        self.loading = False
        self.error = None

    def _drawer(self) -> pygame.Rect:
        w, h = self.app.size()
        width = min(420, w)
        return pygame.Rect(w - width, 0, width, h)

    def _layout(self):
        d = self._drawer()
        self.close_btn.rect.topright = (d.right - 16, d.top + 16)
        self.retry_btn.rect.topleft = (d.x + 24, d.top + 140)

    def on_enter(self, **kwargs):
        self.back = kwargs.get("back", "menu")
        self.backdrop = self.app.screen.copy()
        self._layout()
        self._load()

    def on_resize(self):
        self._layout()

    def _load(self):
        self.loading = True
        self.error = None
        self.scores = []
        self.app.leaderboard.fetch_async()

    def on_network(self, msg):
        t = msg.get("type")
        if t == "SCORES":
            self.loading = False
            self.scores = msg.get("scores", [])
        elif t == "ERROR":
            self.loading = False
            self.error = msg.get("message", "Unknown error")

    def handle_event(self, event):
        if self.close_btn.is_clicked(event):
            self.app.change_screen(self.back)
            return
        if self.error and self.retry_btn.is_clicked(event):
            self._load()
            return
        # click outside the drawer closes it
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not self._drawer().collidepoint(event.pos):
            self.app.change_screen(self.back)

    def draw(self, surface):
        w, h = self.app.size()
        if self.backdrop is not None and self.backdrop.get_size() == (w, h):
            surface.blit(self.backdrop, (0, 0))
        else:
            surface.fill(DARK)
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surface.blit(overlay, (0, 0))

        d = self._drawer()
        pygame.draw.rect(surface, (24, 30, 44), d)
        title = self.title_font.render("Leaderboard", True, WHITE)
        surface.blit(title, (d.x + 24, d.top + 24))
        self.close_btn.draw(surface)

        y = d.top + 90
        if self.loading:
            lines = [("Loading...", GRAY)]
        elif self.error:
            lines = [(f"Error: {self.error}", RED)]
        elif not self.scores:
            lines = [("No scores yet.", GRAY)]
        else:
            lines = []

        for text, color in lines:
            img = self.small_font.render(text, True, color)
            surface.blit(img, (d.x + 24, y))
        if self.error and not self.loading:
            self.retry_btn.draw(surface)

        for i, entry in enumerate(self.scores):
            row = y + i * 34
            if row > d.bottom - 30:
                break
            name = self.small_font.render(f"{i + 1}. {entry.name}", True, WHITE)
            score = self.small_font.render(str(entry.score), True, WHITE)
            surface.blit(name, (d.x + 24, row))
            surface.blit(score, score.get_rect(topright=(d.right - 24, row)))
