# pong_client/main.py
import logging
import os
import sys

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pong_arena.constants import APP_TITLE, FPS, BLACK, WHITE
from pong_arena.scheduler import FrameScheduler
from pong_client.config import load_config
from pong_client.network import LeaderboardClient
from pong_client.screens import MenuScreen, GameScreen, LeaderboardScreen
from pong_client.sound import MixerSound, load_sounds

logger = logging.getLogger(__name__)


class App:
    def __init__(self, cfg=None):
        self.cfg = cfg or load_config()

        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((self.cfg.width, self.cfg.height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)

        self.scheduler = FrameScheduler()
        self.sound = MixerSound(load_sounds(self.cfg.sound_dir))
        self.leaderboard = LeaderboardClient(self.cfg.api_url, timeout=self.cfg.timeout)

        self.screens = {
            "menu": MenuScreen(self),
            "game": GameScreen(self),
            "leaderboard": LeaderboardScreen(self),
        }

        self.current = None
        self.running = True
        self.change_screen("menu")

    # ---------------- Layout ----------------
    def size(self):
        return self.screen.get_size()

    def dash_rect(self) -> pygame.Rect:
        w, _ = self.size()
        return pygame.Rect(0, 0, w, self.cfg.dash_h)

    def field_rect(self) -> pygame.Rect:
        w, h = self.size()
        return pygame.Rect(0, self.cfg.dash_h, w, max(1, h - self.cfg.dash_h))

    def field_surface(self) -> pygame.Surface:
        return self.screen.subsurface(self.field_rect())

    def on_resize(self, size):
        w = max(320, size[0])
        h = max(240 + self.cfg.dash_h, size[1])
        self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
        for screen in self.screens.values():
            screen.on_resize()

    # ---------------- Screens ----------------
    def change_screen(self, name, **kwargs):
        if self.current:
            self.current.on_exit()
        logger.debug("Screen -> %s", name)
        self.current = self.screens[name]
        self.current.on_enter(**kwargs)

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def pump_network(self):
        for msg in self.leaderboard.poll():
            # submit replies belong to the game screen even while the drawer is open
            if msg.get("type") == "SUBMITTED":
                self.screens["game"].on_network(msg)
            else:
                self.current.on_network(msg)

    def draw_footer(self):
        w, h = self.size()
        text = "ESC: Quit | move the mouse to play"
        img = self.font.render(text, True, WHITE)
        rect = img.get_rect(midbottom=(w // 2, h - 8))
        shadow = self.font.render(text, True, BLACK)
        self.screen.blit(shadow, (rect.x + 1, rect.y + 1))
        self.screen.blit(img, rect)

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.VIDEORESIZE:
                        self.on_resize(event.size)
                    self.handle_global_keys(event)
                    self.current.handle_event(event)

                self.current.update(dt)

                self.pump_network()

                self.current.draw(self.screen)
                self.draw_footer()
                pygame.display.flip()

        finally:
            self.screens["game"].engine.stop()
            self.scheduler.cancel_all()
            logger.info("Shutting down after %d frames", self.scheduler.frame)
            self.leaderboard.close()
            pygame.quit()


def main():
    cfg = load_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App(cfg).run()


if __name__ == "__main__":
    main()
