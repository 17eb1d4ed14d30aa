"""
draw_manager.py
---------------
Renderer collaborator: immediate-mode drawing onto the arena surface.

The simulation calls clear() once per frame and then one draw call per
shape, so there is no batching or layering here.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display


class DrawManager:
    """Draws rectangles and circles on a bound pygame surface."""

    def __init__(self, surface=None):
        self.surface = surface
        self.draw_calls = 0
        DebugLogger.init_entry("DrawManager")

    def bind(self, surface):
        """Point the renderer at a new target (after a resize)."""
        self.surface = surface
        DebugLogger.trace(f"Bound surface {surface.get_size()}", category="render")

    # ===========================================================
    # Renderer API
    # ===========================================================

    def clear(self, width, height):
        """Fill the arena area with the arena color."""
        self.draw_calls = 0
        self.surface.fill(Display.ARENA_COLOR, pygame.Rect(0, 0, width, height))

    def draw_rect(self, x, y, width, height, color):
        self.draw_calls += 1
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, width, height))

    def draw_circle(self, x, y, radius, color):
        self.draw_calls += 1
        pygame.draw.circle(self.surface, color, (x, y), radius)
