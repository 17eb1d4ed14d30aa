"""
display_manager.py
------------------
Window management and arena sizing.

Responsibilities:
- Resizable window creation
- Arena size derived from the window (80% of the smaller side, 4:3)
- Arena surface centered in the window
- Window-to-arena coordinate conversion
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display


def arena_size(window_width: int, window_height: int) -> tuple:
    """
    Arena dimensions for a window.

    Width is ARENA_SCALE of the smaller window side; height keeps the
    ARENA_ASPECT (4:3) ratio. Both are whole pixels and at least 1.
    """
    size = min(window_width * Display.ARENA_SCALE, window_height * Display.ARENA_SCALE)
    width = max(int(size), 1)
    height = max(int(size * Display.ARENA_ASPECT), 1)
    return width, height


class DisplayManager:
    """Owns the window and the arena surface the simulation draws into."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Args:
            window_size: Initial (width, height) of the window in pixels
        """
        DebugLogger.init_entry("DisplayManager")

        self.window = None
        self.arena_surface = None
        self.arena_width = 0
        self.arena_height = 0
        self.offset_x = 0
        self.offset_y = 0

        self.window = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        self._layout(*self.window.get_size())
        DebugLogger.init_sub(f"Window {window_size[0]}x{window_size[1]} (resizable)", level=1)

    # ===========================================================
    # Window Management
    # ===========================================================

    def handle_resize(self, window_width: int, window_height: int) -> tuple:
        """
        Re-layout after the window changed size.

        Returns:
            tuple: New (arena_width, arena_height)
        """
        self._layout(window_width, window_height)
        DebugLogger.state(
            f"Window resized to {window_width}x{window_height} -> "
            f"arena {self.arena_width}x{self.arena_height}",
            category="display"
        )
        return self.arena_width, self.arena_height

    def _layout(self, window_width: int, window_height: int):
        self.arena_width, self.arena_height = arena_size(window_width, window_height)
        self.offset_x = (window_width - self.arena_width) // 2
        self.offset_y = (window_height - self.arena_height) // 2
        self.arena_surface = pygame.Surface((self.arena_width, self.arena_height))

    def get_arena_surface(self) -> pygame.Surface:
        return self.arena_surface

    def get_arena_size(self) -> tuple:
        return self.arena_width, self.arena_height

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, overlays=()):
        """
        Compose the window: background, arena, then overlays.

        Args:
            overlays: Objects with draw(window) called after the arena blit
        """
        self.window.fill(Display.BACKGROUND_COLOR)
        self.window.blit(self.arena_surface, (self.offset_x, self.offset_y))
        for overlay in overlays:
            overlay.draw(self.window)
        pygame.display.flip()

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def window_to_arena(self, window_x: float, window_y: float) -> tuple:
        """Convert window coordinates to arena coordinates."""
        return window_x - self.offset_x, window_y - self.offset_y

    def is_in_arena(self, window_x: float, window_y: float) -> bool:
        x, y = self.window_to_arena(window_x, window_y)
        return 0 <= x <= self.arena_width and 0 <= y <= self.arena_height
