"""
collision_manager.py
--------------------
Collision rules for the ball against the arena, the paddle and the bricks.

Responsibilities
----------------
- Reflect the ball off the side walls and the ceiling.
- Handle floor contact (life loss, game-over reset, ball re-arm).
- Reflect off the paddle with position-based steering.
- Destroy overlapping bricks and award score.

The ball is treated as its bounding square when tested against bricks;
this keeps the same feel as a plain rectangle test.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Rules
from src.entities import RoundPhase


class CollisionManager:
    """Detects ball contacts and applies their effects to the GameState."""

    def __init__(self, state, sound_player, display_binding, level_manager):
        """
        Args:
            state: Shared GameState
            sound_player: Collaborator with play(cue_name)
            display_binding: Collaborator with set_score/set_lives/set_level
            level_manager: LevelManager used for the game-over reset
        """
        self.state = state
        self.sound = sound_player
        self.display = display_binding
        self.levels = level_manager

    # ===========================================================
    # Arena Bounds
    # ===========================================================

    def bounce_walls(self):
        """Flip dx on side-wall contact and dy on ceiling contact."""
        ball = self.state.ball
        if ball.right > self.state.width or ball.left < 0:
            ball.dx = -ball.dx
        if ball.top < 0:
            ball.dy = -ball.dy

    def check_floor(self) -> bool:
        """
        Handle the ball crossing the bottom edge.

        Costs a life and stops the round. When no lives are left the whole
        game is reset. In every case the ball velocity is re-armed to
        (speed, -speed).

        Returns:
            bool: True if the floor was touched this frame
        """
        state = self.state
        ball = state.ball
        if ball.bottom <= state.height:
            return False

        state.lives -= 1
        self.display.set_lives(state.lives)
        state.phase = RoundPhase.NOT_STARTED
        DebugLogger.state(f"Ball lost - {state.lives} lives left")

        if state.lives <= 0:
            self.levels.full_reset()

        ball.arm()
        return True

    # ===========================================================
    # Paddle
    # ===========================================================

    def check_paddle(self) -> bool:
        """
        Reflect the ball off the paddle.

        dx is replaced by hit_ratio * speed, so the left edge sends the ball
        left at full speed, the center straight up and the right edge right.
        """
        ball = self.state.ball
        paddle = self.state.paddle

        if not (ball.bottom > paddle.y and paddle.x <= ball.x <= paddle.right):
            return False

        ball.dy = -ball.dy
        ball.dx = paddle.hit_ratio(ball.x) * ball.speed
        self.sound.play("paddle")
        DebugLogger.trace(f"Paddle hit at ratio {paddle.hit_ratio(ball.x):+.2f}")
        return True

    # ===========================================================
    # Bricks
    # ===========================================================

    def check_bricks(self) -> int:
        """
        Destroy every brick overlapping the ball's bounding square.

        Each hit flips dy, so several hits in one frame can cancel out.

        Returns:
            int: Number of bricks destroyed this frame
        """
        state = self.state
        ball = state.ball
        box = (ball.left, ball.top, ball.right, ball.bottom)

        survivors = []
        destroyed = 0
        for brick in state.bricks:
            if not brick.overlaps_box(*box):
                survivors.append(brick)
                continue

            ball.dy = -ball.dy
            state.score += Rules.BRICK_SCORE
            self.display.set_score(state.score)
            self.sound.play("brick")
            destroyed += 1
            DebugLogger.trace(f"Brick hit at ({brick.x:.0f}, {brick.y:.0f}) - score {state.score}")

        if destroyed:
            state.bricks = survivors
        return destroyed
