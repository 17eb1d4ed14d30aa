"""
simulation_loop.py
------------------
The brick breaker core: owns the GameState and advances it one frame at a
time.

Responsibilities
----------------
- Derive all pixel sizes from the arena dimensions (configure)
- Run one frame: draw, move paddle, move ball, resolve collisions,
  check for a cleared level (advance)
- Drive the timed level transition while the frame loop is paused (update)
- Apply player input (direction hold, pointer, launch)

Collaborators are injected and only called, never implemented here:
    renderer        clear(w, h), draw_rect(x, y, w, h, color), draw_circle(x, y, r, color)
    sound_player    play(cue_name)
    display_binding set_score(n), set_lives(n), set_level(n)
"""

from math import copysign

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Ball as BallSettings
from src.core.runtime.game_settings import Bricks as BrickSettings
from src.core.runtime.game_settings import Paddle as PaddleSettings
from src.core.runtime.game_settings import Rules
from src.core.runtime.game_state import GameState
from src.entities import RoundPhase
from src.systems.collision.collision_manager import CollisionManager
from src.systems.level.level_manager import LevelManager


class SimulationLoop:
    """Single-threaded, frame-driven game simulation."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, renderer, sound_player, display_binding, state=None):
        """
        Args:
            renderer: Drawing collaborator
            sound_player: Sound cue collaborator
            display_binding: Score/lives/level display collaborator
            state: Optional pre-built GameState (a fresh one otherwise)
        """
        self.renderer = renderer
        self.sound = sound_player
        self.display = display_binding
        self.state = state or GameState()

        self.levels = LevelManager(self.state, display_binding)
        self.collisions = CollisionManager(
            self.state, sound_player, display_binding, self.levels
        )
        DebugLogger.init_entry("SimulationLoop")

    # ===========================================================
    # Arena Configuration
    # ===========================================================

    def configure(self, width: float, height: float):
        """
        Size everything for a (new) arena of width x height.

        Paddle, ball and brick sizes, padding and speeds are recomputed as
        ratios of the arena. The paddle is re-centered, the ball parked on
        it and the brick grid rebuilt for the current row count. Score,
        lives and level are untouched.

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Arena dimensions must be positive, got {width}x{height}")

        state = self.state
        state.width = width
        state.height = height

        m = state.metrics
        m.paddle_width = width * PaddleSettings.WIDTH_RATIO
        m.paddle_height = height * PaddleSettings.HEIGHT_RATIO
        m.paddle_speed = width * PaddleSettings.SPEED_RATIO
        m.ball_radius = width * BallSettings.RADIUS_RATIO
        m.ball_speed = m.paddle_speed * BallSettings.SPEED_FACTOR
        m.brick_width = width * BrickSettings.WIDTH_RATIO
        m.brick_height = height * BrickSettings.HEIGHT_RATIO
        m.brick_padding = width * BrickSettings.PADDING_RATIO

        paddle = state.paddle
        paddle.width = m.paddle_width
        paddle.height = m.paddle_height
        paddle.speed = m.paddle_speed
        paddle.dx = copysign(paddle.speed, paddle.dx) if paddle.dx else 0
        paddle.y = height - PaddleSettings.BOTTOM_OFFSET
        paddle.x = width / 2 - paddle.width / 2

        ball = state.ball
        ball.radius = m.ball_radius
        ball.speed = m.ball_speed
        ball.rest_on(paddle)

        self.levels.regenerate_bricks()
        DebugLogger.state(f"Arena configured: {width:.0f}x{height:.0f}", category="display")

    # ===========================================================
    # Frame Entry Points
    # ===========================================================

    def update(self, now: float) -> bool:
        """
        Host tick. Runs a frame, or polls the transition while paused.

        Args:
            now: Monotonic time in seconds

        Returns:
            bool: True if the host should keep requesting frames
        """
        if self.state.transitioning:
            return self.levels.poll(now)
        return self.advance(now)

    def advance(self, now: float = 0.0) -> bool:
        """
        Run exactly one simulation frame.

        Order: redraw, paddle movement, ball movement, collisions,
        level-completion check.

        Args:
            now: Monotonic time in seconds, used to time the level transition

        Returns:
            bool: False once the level is cleared (frame loop pauses)
        """
        if self.state.transitioning:
            return False

        self.draw()
        self.move_paddle()
        self.move_ball()
        self.collision_detection()

        if not self.state.bricks:
            self.begin_transition(now)
            return False
        return True

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self):
        state = self.state
        paddle, ball = state.paddle, state.ball

        self.renderer.clear(state.width, state.height)
        self.renderer.draw_rect(paddle.x, paddle.y, paddle.width, paddle.height,
                                PaddleSettings.COLOR)
        self.renderer.draw_circle(ball.x, ball.y, ball.radius, BallSettings.COLOR)
        for brick in state.bricks:
            self.renderer.draw_rect(brick.x, brick.y, brick.width, brick.height, brick.color)

    def draw_transition(self):
        """Blank frame shown while the next level is being prepared."""
        state = self.state
        self.renderer.clear(state.width, state.height)
        self.renderer.draw_rect(0, 0, state.width, state.height, Rules.TRANSITION_COLOR)

    # ===========================================================
    # Step Functions
    # ===========================================================

    def move_paddle(self):
        """Apply paddle.dx only if the paddle stays fully inside the arena."""
        paddle = self.state.paddle
        target = paddle.x + paddle.dx
        if paddle.fits(target, self.state.width):
            paddle.x = target

    def move_ball(self):
        """Integrate the ball, or keep it parked on the paddle before launch."""
        state = self.state
        ball = state.ball

        if not state.started:
            ball.rest_on(state.paddle)
            return

        ball.integrate()
        self.collisions.bounce_walls()
        self.collisions.check_floor()

    def collision_detection(self):
        self.collisions.check_paddle()
        self.collisions.check_bricks()

    # ===========================================================
    # Level Transition
    # ===========================================================

    def begin_transition(self, now: float):
        self.draw_transition()
        self.levels.begin_transition(now)

    def poll_transition(self, now: float) -> bool:
        return self.levels.poll(now)

    def finish_transition(self):
        self.levels.finish_transition()

    def full_reset(self):
        self.levels.full_reset()

    # ===========================================================
    # Input
    # ===========================================================

    def press_left(self):
        self.state.paddle.dx = -self.state.paddle.speed

    def press_right(self):
        self.state.paddle.dx = self.state.paddle.speed

    def release_left(self):
        """Stop only if the paddle is still moving left."""
        if self.state.paddle.dx < 0:
            self.state.paddle.dx = 0

    def release_right(self):
        if self.state.paddle.dx > 0:
            self.state.paddle.dx = 0

    def point_at(self, x: float):
        """
        Center the paddle on an arena x coordinate.

        Pointer positions outside (0, width) are ignored; the paddle is
        clamped to [0, width - paddle.width].
        """
        state = self.state
        if not 0 < x < state.width:
            return
        paddle = state.paddle
        paddle.x = min(max(x - paddle.width / 2, 0), state.width - paddle.width)

    def launch(self) -> bool:
        """
        Start the round if the ball is waiting on the paddle.

        Returns:
            bool: True if the ball was launched
        """
        state = self.state
        if state.phase is not RoundPhase.NOT_STARTED:
            return False
        state.phase = RoundPhase.ACTIVE
        state.ball.arm()
        DebugLogger.action(f"Launch (level {state.level}, lives {state.lives})")
        return True
