import pygame

from pong_arena.constants import WHITE, RED
from pong_arena.hooks import ScoreSink, LevelSink


class Button:
    def __init__(self, rect, text, font, bg, fg):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.fg = fg
        self.enabled = True

    def draw(self, surface):
        bg = self.bg if self.enabled else (90, 90, 90)
        pygame.draw.rect(surface, bg, self.rect, border_radius=10)
        pygame.draw.rect(surface, (0, 0, 0), self.rect, width=2, border_radius=10)
        txt = self.font.render(self.text, True, self.fg)
        surface.blit(txt, txt.get_rect(center=self.rect.center))

    def is_clicked(self, event):
        return (self.enabled and event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.rect.collidepoint(event.pos))


class TextInput:
    def __init__(self, rect, font, placeholder="", max_len=24):
        self.rect = pygame.Rect(rect)
        self.font = font
        self.placeholder = placeholder
        self.max_len = max_len
        self.text = ""
        self.active = False

    def handle_event(self, event) -> bool:
        """Returns True when Enter is pressed in the field."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.active = self.rect.collidepoint(event.pos)

        if event.type == pygame.KEYDOWN and self.active:
            if event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return True
            elif event.unicode and event.unicode.isprintable() and len(self.text) < self.max_len:
                self.text += event.unicode
        return False

    def draw(self, surface):
        bg = (240, 240, 240) if self.active else (220, 220, 220)
        pygame.draw.rect(surface, bg, self.rect, border_radius=8)
        pygame.draw.rect(surface, (0, 0, 0), self.rect, width=2, border_radius=8)

        if not self.text:
            img = self.font.render(self.placeholder, True, (120, 120, 120))
        else:
            img = self.font.render(self.text, True, (20, 20, 20))

        surface.blit(img, (self.rect.x + 10, self.rect.y + 10))

    def value(self):
        return self.text.strip()


# -------------------- Dashboard --------------------
class Dashboard:
    """Score, hearts, volume toggle and level across the top strip."""

    def __init__(self, font):
        self.font = font
        self.score = 0
        self.level = 1
        self.volume_rect = pygame.Rect(0, 0, 34, 28)

    def reset(self):
        self.score = 0
        self.level = 1

    def draw(self, surface, rect, lives, muted):
        pygame.draw.rect(surface, (12, 18, 30), rect)
        cy = rect.centery

        score = self.font.render(f"Score : {self.score}", True, WHITE)
        surface.blit(score, score.get_rect(midleft=(rect.x + 16, cy)))

        x = rect.x + 30 + score.get_width()
        for _ in range(max(0, lives)):
            _draw_heart(surface, (x, cy), 8, RED)
            x += 24

        level = self.font.render(f"Level : {self.level}", True, WHITE)
        level_rect = level.get_rect(midright=(rect.right - 16, cy))
        surface.blit(level, level_rect)

        self.volume_rect.midright = (level_rect.left - 14, cy)
        _draw_speaker(surface, self.volume_rect, muted)


def _draw_heart(surface, center, r, color):
    x, y = center
    pygame.draw.circle(surface, color, (x - r // 2, y - r // 3), r // 2 + 1)
    pygame.draw.circle(surface, color, (x + r // 2, y - r // 3), r // 2 + 1)
    pygame.draw.polygon(surface, color, [(x - r, y - r // 4), (x + r, y - r // 4), (x, y + r)])


def _draw_speaker(surface, rect, muted):
    body = pygame.Rect(rect.x, rect.centery - 5, 8, 10)
    pygame.draw.rect(surface, WHITE, body)
    pygame.draw.polygon(surface, WHITE, [(body.right, body.top), (body.right + 8, rect.top + 4),
                                         (body.right + 8, rect.bottom - 4), (body.right, body.bottom)])
    tip = body.right + 12
    if muted:
        pygame.draw.line(surface, WHITE, (tip, rect.top + 8), (tip + 8, rect.bottom - 8), 2)
        pygame.draw.line(surface, WHITE, (tip, rect.bottom - 8), (tip + 8, rect.top + 8), 2)
    else:
        arc = pygame.Rect(tip - 8, rect.top + 6, 14, rect.height - 12)
        pygame.draw.arc(surface, WHITE, arc, -1.0, 1.0, 2)


class DashboardScore(ScoreSink):
    def __init__(self, dash: Dashboard):
        self.dash = dash

    def set(self, paddle_id, value):
        self.dash.score = int(value)


class DashboardLevel(LevelSink):
    def __init__(self, dash: Dashboard):
        self.dash = dash

    def set(self, paddle_id, value):
        self.dash.level = int(value)
