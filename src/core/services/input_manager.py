"""
input_manager.py
----------------
Translates pygame events into simulation input calls.

Provides:
- Configurable key bindings (src/config/controls.json)
- Directional hold (press/release) for the paddle
- Absolute pointer control and click-to-launch
- Quit detection

Events are applied directly to the simulation as they arrive; the whole
game runs on one thread, so no queueing is needed.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.services.config_manager import load_config


DEFAULT_KEY_BINDINGS = {
    "move_left": ["left", "a"],
    "move_right": ["right", "d"],
    "launch": ["space"],
    "quit": ["escape"],
}

LEFT_MOUSE_BUTTON = 1


class InputManager:
    """
    Routes keyboard and mouse events to a SimulationLoop.

    Usage:
        running = input_manager.handle_event(event, simulation)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, display_manager, key_bindings=None):
        """
        Args:
            display_manager: Used to convert pointer positions into arena space
            key_bindings: {action: [key names]}; loaded from controls.json if None
        """
        DebugLogger.init_entry("InputManager")
        self.display = display_manager
        if key_bindings is None:
            key_bindings = load_config("controls.json", DEFAULT_KEY_BINDINGS)
        self.key_to_action = self._build_lookup(key_bindings)

    @staticmethod
    def _build_lookup(key_bindings):
        """Map pygame key codes to action names, skipping unknown key names."""
        lookup = {}
        for action, names in key_bindings.items():
            for name in names:
                try:
                    lookup[pygame.key.key_code(name)] = action
                except ValueError:
                    DebugLogger.warn(f"Unknown key '{name}' for action '{action}'", category="input")
        return lookup

    # ===========================================================
    # Event Routing
    # ===========================================================

    def handle_event(self, event, simulation) -> bool:
        """
        Apply one event to the simulation.

        Returns:
            bool: False if the event asks the game to quit
        """
        if event.type == pygame.QUIT:
            DebugLogger.action("Quit signal received", category="input")
            return False

        if event.type == pygame.KEYDOWN:
            return self._on_key_down(self.key_to_action.get(event.key), simulation)

        if event.type == pygame.KEYUP:
            action = self.key_to_action.get(event.key)
            if action == "move_left":
                simulation.release_left()
            elif action == "move_right":
                simulation.release_right()
            return True

        if event.type == pygame.MOUSEMOTION:
            if self.display.is_in_arena(*event.pos):
                x, _ = self.display.window_to_arena(*event.pos)
                simulation.point_at(x)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
            if self.display.is_in_arena(*event.pos):
                simulation.launch()
            return True

        return True

    def _on_key_down(self, action, simulation) -> bool:
        if action == "move_left":
            simulation.press_left()
        elif action == "move_right":
            simulation.press_right()
        elif action == "launch":
            simulation.launch()
        elif action == "quit":
            DebugLogger.action("Quit key pressed", category="input")
            return False
        return True
