"""
paddle.py
---------
Player-controlled paddle near the bottom of the arena.

Coordinates are top-left based (x, y is the paddle's upper-left corner),
matching how the renderer draws rectangles.
"""


class Paddle:
    """Horizontal paddle with a per-frame velocity of -speed, 0 or +speed."""

    __slots__ = ("x", "y", "width", "height", "dx", "speed")

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0, speed=0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.dx = 0.0
        self.speed = speed

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    def fits(self, x: float, arena_width: float) -> bool:
        """True if a paddle at x would lie fully inside [0, arena_width]."""
        return x >= 0 and x + self.width <= arena_width

    def hit_ratio(self, ball_x: float) -> float:
        """
        Where ball_x falls along the paddle.

        Returns -1.0 at the left edge, 0.0 at the center and +1.0 at the
        right edge.
        """
        half = self.width / 2
        return (ball_x - self.center_x) / half

    def __repr__(self):
        return f"Paddle(x={self.x:.1f}, y={self.y:.1f}, w={self.width:.1f}, dx={self.dx:.1f})"
