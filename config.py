import logging
import math

# --- Core Game Constants ---
SCREEN_WIDTH = 900
SCREEN_HEIGHT = 600
FPS = 60
WINDOW_CAPTION = "Pong"

# --- Paddles ---
PADDLE_WIDTH = 12
PADDLE_HEIGHT = 110
PADDLE_INSET = 14  # Gap between paddle and side wall
PLAYER_PADDLE_SPEED = 7
AI_PADDLE_SPEED = 5  # AI max speed
AI_DEADZONE = 6  # AI ignores offsets up to this many units

# --- Ball Dynamics ---
BALL_RADIUS = 9
BALL_BASE_SPEED = 6
BALL_MAX_SPEED = 14
BALL_SPEED_INCREMENT_FACTOR = 1.03
MAX_BOUNCE_ANGLE = math.radians(75)
SERVE_ANGLE_RANGE = math.radians(30)  # Serve angle drawn from [-range, +range]
BOUNCE_NUDGE = 0.1  # Extra gap so the ball clears the paddle after a bounce

# --- Frame Timing ---
# Velocities are expressed in units per frame. When enabled, motion is scaled
# by dt / REFERENCE_FRAME_MS so the game plays the same at any frame rate.
SCALE_MOTION_BY_DT = False
REFERENCE_FRAME_MS = 1000 / 60

# --- Rendering ---
BACKGROUND_COLOR = (7, 18, 24)
CENTER_LINE_COLOR = (19, 30, 36)
CENTER_DASH_HEIGHT = 18
CENTER_DASH_GAP = 12
CENTER_DASH_START = 10
PADDLE_COLOR = (223, 252, 240)
PADDLE_CORNER_RADIUS = 6
BALL_COLOR = (78, 225, 162)
HUD_PANEL_COLOR = (22, 32, 38)
HUD_PANEL_RECT = (8, SCREEN_HEIGHT - 28, 160, 20)
HUD_TEXT_COLOR = (119, 127, 131)
HUD_TEXT_POS = (12, SCREEN_HEIGHT - 22)
HUD_FONT_SIZE = 16
SCORE_COLOR = (220, 220, 250)
SCORE_FONT_SIZE = 48
SCORE_TOP = 15
FONT_NAME = "arial"

# --- Logging ---
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
