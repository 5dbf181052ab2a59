# pong_client/render.py
import math

import pygame

from pong_arena.geometry import Field
from pong_arena.hooks import Renderer

BG = (17, 24, 39)
MARKINGS = (255, 255, 255, 128)
BALL = (255, 255, 255)


def draw_dashed_line(surf, color, start, end, dash=5, gap=5, width=2):
    start = pygame.math.Vector2(start)
    end = pygame.math.Vector2(end)
    span = end - start
    total = span.length()
    if total == 0:
        return
    step = span / total
    d = 0.0
    while d < total:
        a = start + step * d
        b = start + step * min(d + dash, total)
        pygame.draw.line(surf, color, a, b, width)
        d += dash + gap


def draw_dashed_circle(surf, color, center, radius, dash=3, gap=6, width=2):
    circumference = 2 * math.pi * radius
    n = max(1, int(circumference // (dash + gap)))
    for i in range(n):
        a0 = 2 * math.pi * i / n
        a1 = a0 + 2 * math.pi * dash / circumference
        rect = pygame.Rect(0, 0, radius * 2, radius * 2)
        rect.center = (int(center[0]), int(center[1]))
        # pygame arcs run counter-clockwise with y up; fine for a symmetric pattern
        pygame.draw.arc(surf, color, rect, a0, a1, width)


class PygameRenderer(Renderer):
    """Draws the engine's world onto the field surface (a subsurface of the window)."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def set_surface(self, surface: pygame.Surface):
        self.surface = surface
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def clear(self):
        self.surface.fill(BG)

    def draw_board(self, field: Field):
        self._overlay.fill((0, 0, 0, 0))
        w, h = field.width, field.height
        if field.goal_axis == 0:
            draw_dashed_line(self._overlay, MARKINGS, (w / 2, 0), (w / 2, h))
        else:
            draw_dashed_line(self._overlay, MARKINGS, (0, h / 2), (w, h / 2))
        draw_dashed_circle(self._overlay, MARKINGS, (w / 2, h / 2), 25)
        self.surface.blit(self._overlay, (0, 0))

    def draw_trail(self, points, radius):
        if not points:
            return
        glow = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        n = len(points)
        for i, p in enumerate(points):
            t = i / max(1, n)
            size = max(1, int(radius * (1 - t * 0.9)))
            alpha = int(255 * (1 - t))
            pygame.draw.circle(glow, (255, 255, 255, alpha), (int(p.x), int(p.y)), size)
        self.surface.blit(glow, (0, 0), special_flags=pygame.BLEND_RGBA_ADD)

    def draw_ball(self, ball):
        pygame.draw.circle(self.surface, BALL, (int(ball.pos.x), int(ball.pos.y)), max(1, int(ball.r)))

    def draw_paddle(self, paddle):
        x, y, w, h = paddle.rect()
        pygame.draw.rect(self.surface, paddle.color, pygame.Rect(int(x), int(y), max(1, int(w)), max(1, int(h))))
