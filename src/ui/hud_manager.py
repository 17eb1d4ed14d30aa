"""
hud_manager.py
---------------
DisplayBinding collaborator: shows score, lives and level as text along the
top of the window.

Responsibilities
----------------
- Receive set_score / set_lives / set_level calls from the simulation.
- Re-render a label only when its value changes.
- Draw the cached labels onto the window each frame.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Hud, Rules


class HUDManager:
    """Score / lives / level readout."""

    LABELS = ("score", "lives", "level")

    def __init__(self):
        DebugLogger.init_entry("HUDManager")
        self.values = {"score": 0, "lives": Rules.START_LIVES, "level": 1}
        self._surfaces = {}

        try:
            self.font = pygame.font.Font(Hud.FONT_NAME, Hud.FONT_SIZE)
        except (pygame.error, OSError) as e:
            DebugLogger.warn(f"HUD font unavailable: {e}", category="system")
            self.font = None

        for name in self.LABELS:
            self._render_label(name)

    # ===========================================================
    # DisplayBinding API
    # ===========================================================

    def set_score(self, value):
        self._set("score", value)

    def set_lives(self, value):
        self._set("lives", value)

    def set_level(self, value):
        self._set("level", value)

    def _set(self, name, value):
        if self.values.get(name) == value and name in self._surfaces:
            return
        self.values[name] = value
        self._render_label(name)
        DebugLogger.trace(f"{name} -> {value}", category="ui")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _render_label(self, name):
        if self.font is None:
            return
        text = f"{name.capitalize()}: {self.values[name]}"
        self._surfaces[name] = self.font.render(text, True, Hud.COLOR)

    def draw(self, window):
        """Blit score left, lives center and level right along the top edge."""
        if self.font is None:
            return
        width = window.get_width()
        y = Hud.MARGIN

        score = self._surfaces["score"]
        lives = self._surfaces["lives"]
        level = self._surfaces["level"]

        window.blit(score, (Hud.MARGIN, y))
        window.blit(lives, ((width - lives.get_width()) // 2, y))
        window.blit(level, (width - level.get_width() - Hud.MARGIN, y))
