"""
brick.py
--------
Immutable brick record. Bricks are never mutated, only removed from the
active collection when hit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Brick:
    x: float
    y: float
    width: float
    height: float
    color: tuple

    def overlaps_box(self, left: float, top: float, right: float, bottom: float) -> bool:
        """Strict axis-aligned overlap test against another box."""
        return (right > self.x and
                left < self.x + self.width and
                bottom > self.y and
                top < self.y + self.height)
