# pong_arena/constants.py

APP_TITLE = "The Pong Arena"
WIDTH, HEIGHT = 1000, 600
FPS = 60

# viewport at or below this width plays vertically
VERTICAL_BREAKPOINT = 768

PLAYER_ID = "player"
AI_ID = "ai"

# sound effects
PADDLE_HIT = "paddle_hit"
WALL_HIT = "wall_hit"
GAME_OVER = "game_over"
EFFECTS = (PADDLE_HIT, WALL_HIT, GAME_OVER)

WHITE = (245, 245, 245)
BLACK = (20, 20, 20)
GRAY = (120, 120, 120)
DARK = (30, 30, 30)
BLUE = (52, 152, 219)
GREEN = (60, 200, 120)
ORANGE = (255, 170, 70)
RED = (231, 76, 60)
