"""
ball.py
-------
The single ball. Position is the circle center.
"""


class Ball:
    """Ball with per-frame velocity (dx, dy) and a scalar speed magnitude."""

    __slots__ = ("x", "y", "radius", "dx", "dy", "speed")

    def __init__(self, x=0.0, y=0.0, radius=0.0, speed=0.0):
        self.x = x
        self.y = y
        self.radius = radius
        self.dx = 0.0
        self.dy = 0.0
        self.speed = speed

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    def rest_on(self, paddle):
        """Park the ball centered on top of the paddle."""
        self.x = paddle.center_x
        self.y = paddle.y - self.radius

    def arm(self):
        """Set the launch velocity: up and to the right at current speed."""
        self.dx = self.speed
        self.dy = -self.speed

    def integrate(self):
        self.x += self.dx
        self.y += self.dy

    def __repr__(self):
        return (f"Ball(x={self.x:.1f}, y={self.y:.1f}, r={self.radius:.1f}, "
                f"dx={self.dx:.2f}, dy={self.dy:.2f}, speed={self.speed:.2f})")
