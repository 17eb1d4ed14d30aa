"""
game_settings.py
----------------
Centralized constants for the brick breaker.

Size-related values are ratios of the arena (W x H) and are turned into
pixels by SimulationLoop.configure() whenever the arena is resized.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window and frame pacing."""
    FPS: int = 60
    CAPTION: str = "Brick Breaker"
    DEFAULT_WINDOW_SIZE: tuple = (1024, 768)

    # Arena = ARENA_SCALE of the smaller window side, 4:3
    ARENA_SCALE: float = 0.8
    ARENA_ASPECT: float = 0.75

    BACKGROUND_COLOR: tuple = (18, 18, 24)
    ARENA_COLOR: tuple = (0, 0, 0)


# ===========================================================
# Paddle
# ===========================================================

class Paddle:
    WIDTH_RATIO: float = 0.15       # of arena width
    HEIGHT_RATIO: float = 0.025     # of arena height
    SPEED_RATIO: float = 0.01       # of arena width, per frame
    BOTTOM_OFFSET: int = 40         # px from the bottom edge to the paddle top
    COLOR: tuple = (0, 149, 221)


# ===========================================================
# Ball
# ===========================================================

class Ball:
    RADIUS_RATIO: float = 0.01      # of arena width
    SPEED_FACTOR: float = 0.8       # initial ball speed = paddle speed * factor
    SPEED_GROWTH: float = 1.2       # per cleared level
    COLOR: tuple = (0, 149, 221)


# ===========================================================
# Bricks
# ===========================================================

class Bricks:
    WIDTH_RATIO: float = 0.04       # of arena width
    HEIGHT_RATIO: float = 0.015     # of arena height
    PADDING_RATIO: float = 0.005    # of arena width
    COLS: int = 16
    INITIAL_ROWS: int = 10
    MAX_ROWS: int = 20
    TOP_OFFSET: int = 40

    # HSL row coloring: hue sweeps 0..360 across the rows
    SATURATION: float = 0.7
    LIGHTNESS: float = 0.5


# ===========================================================
# Round Rules
# ===========================================================

class Rules:
    START_LIVES: int = 3
    BRICK_SCORE: int = 10
    TRANSITION_DELAY: float = 0.5   # seconds between clearing and next level
    TRANSITION_COLOR: tuple = (255, 255, 255)


# ===========================================================
# HUD
# ===========================================================

class Hud:
    FONT_NAME = None  # pygame default font
    FONT_SIZE: int = 28
    COLOR: tuple = (235, 235, 235)
    MARGIN: int = 12


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Runtime diagnostics -- not related to logging categories."""
    FRAME_TIME_WARNING: float = 16.67   # ms
    PERF_WARN_INTERVAL: float = 1.0     # s between slow-frame warnings
