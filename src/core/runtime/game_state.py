"""
game_state.py
-------------
The single mutable aggregate for one running game.

Owned by SimulationLoop and passed to the collision and level systems, so
every step function works on explicit state instead of module globals.
"""

from src.core.runtime.game_settings import Bricks, Rules
from src.entities import Ball, Paddle, RoundPhase


class Metrics:
    """Pixel sizes derived from the current arena dimensions."""

    __slots__ = (
        "paddle_width", "paddle_height", "paddle_speed",
        "ball_radius", "ball_speed",
        "brick_width", "brick_height", "brick_padding",
    )

    def __init__(self):
        self.paddle_width = 0.0
        self.paddle_height = 0.0
        self.paddle_speed = 0.0
        self.ball_radius = 0.0
        self.ball_speed = 0.0
        self.brick_width = 0.0
        self.brick_height = 0.0
        self.brick_padding = 0.0


class GameState:
    """Arena, entities and round bookkeeping."""

    def __init__(self):
        # Arena
        self.width = 0.0
        self.height = 0.0
        self.metrics = Metrics()

        # Entities
        self.paddle = Paddle()
        self.ball = Ball()
        self.bricks = []

        # Round bookkeeping
        self.score = 0
        self.lives = Rules.START_LIVES
        self.level = 1
        self.brick_rows = Bricks.INITIAL_ROWS
        self.phase = RoundPhase.NOT_STARTED
        self.transition_deadline = None

    # ===========================================================
    # Phase Helpers
    # ===========================================================

    @property
    def started(self) -> bool:
        """True while the ball moves on its own (ACTIVE or TRANSITIONING)."""
        return self.phase is not RoundPhase.NOT_STARTED

    @property
    def transitioning(self) -> bool:
        return self.phase is RoundPhase.TRANSITIONING

    def reset_round_values(self):
        """Restore score, lives, level and brick rows to a fresh game."""
        self.score = 0
        self.lives = Rules.START_LIVES
        self.level = 1
        self.brick_rows = Bricks.INITIAL_ROWS

    def snapshot(self) -> dict:
        """Small dict summary for log lines."""
        return {
            "score": self.score,
            "lives": self.lives,
            "level": self.level,
            "brick_rows": self.brick_rows,
            "bricks": len(self.bricks),
            "phase": self.phase.value,
            "ball_speed": self.ball.speed,
        }
