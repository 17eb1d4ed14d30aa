"""
level_manager.py
----------------
Level progression for the brick breaker.

Responsibilities
----------------
- (Re)generate the brick grid for the current target row count
- Run the timed transition between a cleared level and the next one
- Perform the full game-over reset

The transition is an explicit state: begin_transition() records a deadline
on the GameState and switches the round to TRANSITIONING; poll() finishes
the transition once the deadline has passed. While transitioning the host
does not call SimulationLoop.advance().
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Ball as BallSettings
from src.core.runtime.game_settings import Rules
from src.entities import RoundPhase
from src.systems.level.brick_layout import build_bricks, rows_for_level


class LevelManager:
    """Owns brick regeneration, level-up and game-over reset."""

    def __init__(self, state, display_binding):
        """
        Args:
            state: Shared GameState
            display_binding: Collaborator with set_score/set_lives/set_level
        """
        self.state = state
        self.display = display_binding

    # ===========================================================
    # Bricks
    # ===========================================================

    def regenerate_bricks(self):
        """Replace the active bricks with a full grid for state.brick_rows."""
        state = self.state
        m = state.metrics
        state.bricks = build_bricks(
            state.width,
            state.brick_rows,
            m.brick_width,
            m.brick_height,
            m.brick_padding,
        )
        DebugLogger.trace(
            f"Generated {len(state.bricks)} bricks ({state.brick_rows} rows)",
            category="level"
        )

    def initial_ball_speed(self) -> float:
        return self.state.metrics.paddle_speed * BallSettings.SPEED_FACTOR

    # ===========================================================
    # Game Over
    # ===========================================================

    def full_reset(self):
        """
        Restore a fresh game after the last life is lost.

        Lives, score, level, row count and ball speed go back to their
        initial values, the displays are refreshed and the bricks rebuilt.
        """
        state = self.state
        final = state.snapshot()

        state.reset_round_values()
        state.ball.speed = self.initial_ball_speed()

        self.display.set_score(state.score)
        self.display.set_lives(state.lives)
        self.display.set_level(state.level)
        self.regenerate_bricks()

        DebugLogger.state(f"Game over {final} - full reset")

    # ===========================================================
    # Level Transition
    # ===========================================================

    def begin_transition(self, now: float):
        """Enter TRANSITIONING; the next level starts after Rules.TRANSITION_DELAY."""
        state = self.state
        state.phase = RoundPhase.TRANSITIONING
        state.transition_deadline = now + Rules.TRANSITION_DELAY
        DebugLogger.state(
            f"Level {state.level} cleared - next level at t={state.transition_deadline:.2f}",
            category="level"
        )

    def poll(self, now: float) -> bool:
        """
        Finish the transition if its deadline has passed.

        Returns:
            bool: True if the transition completed on this call
        """
        state = self.state
        if not state.transitioning:
            return False
        if now < state.transition_deadline:
            return False
        self.finish_transition()
        return True

    def finish_transition(self):
        """Set up the next level and leave the ball ready on the paddle."""
        state = self.state

        state.level += 1
        self.display.set_level(state.level)
        state.brick_rows = rows_for_level(state.level)
        state.ball.speed *= BallSettings.SPEED_GROWTH

        state.phase = RoundPhase.NOT_STARTED
        state.transition_deadline = None
        self.regenerate_bricks()

        state.ball.rest_on(state.paddle)
        state.ball.arm()

        DebugLogger.state(
            f"Level {state.level} started: {state.snapshot()}",
            category="level"
        )
