"""
game_loop.py
------------
Defines the GameLoop class: the pygame host that drives the simulation once
per display refresh.

Responsibilities
----------------
- Initialize pygame and the collaborators (display, renderer, HUD, sound)
- Route window and input events (resize, keys, pointer, quit)
- Call SimulationLoop.update() once per frame
- Compose and flip the window
"""

import time

import pygame

from src.audio.sound_manager import SoundManager
from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Debug, Display
from src.core.runtime.simulation_loop import SimulationLoop
from src.core.services.display_manager import DisplayManager
from src.core.services.input_manager import InputManager
from src.graphics.draw_manager import DrawManager
from src.ui.hud_manager import HUDManager


class GameLoop:
    """Core runtime controller that owns the window and the frame cadence."""

    def __init__(self, window_size=Display.DEFAULT_WINDOW_SIZE):
        """Initialize pygame and all foundational systems."""
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        # -------------------------------------------------------
        # Collaborators
        # -------------------------------------------------------
        self.display = DisplayManager(window_size)
        self.renderer = DrawManager(self.display.get_arena_surface())
        self.hud = HUDManager()
        self.sound = SoundManager()

        # -------------------------------------------------------
        # Simulation
        # -------------------------------------------------------
        self.simulation = SimulationLoop(self.renderer, self.sound, self.hud)
        self.simulation.configure(*self.display.get_arena_size())
        self.input_manager = InputManager(self.display)

        self.clock = pygame.time.Clock()
        self.running = True
        self.frame_scheduled = True
        self._last_perf_warn_time = 0.0

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            self.clock.tick(Display.FPS)
            frame_start = time.perf_counter()

            self._handle_events()
            if not self.running:
                break

            self._tick(pygame.time.get_ticks() / 1000.0)
            self.display.render(overlays=(self.hud,))

            self._check_frame_time((time.perf_counter() - frame_start) * 1000)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _tick(self, now: float):
        """
        Advance the simulation, tracking when the frame loop pauses.

        While the level transition runs, update() only polls its deadline;
        frames resume once it reports the transition finished.
        """
        scheduled = self.simulation.update(now)
        if scheduled != self.frame_scheduled:
            DebugLogger.state(
                "Frame loop resumed" if scheduled else "Frame loop paused for level transition",
                category="level"
            )
        self.frame_scheduled = scheduled

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)
                continue
            if not self.input_manager.handle_event(event, self.simulation):
                self.running = False
                break

    def _on_resize(self, window_width, window_height):
        """New arena size -> new renderer target and simulation reconfigure."""
        arena = self.display.handle_resize(window_width, window_height)
        self.renderer.bind(self.display.get_arena_surface())
        self.simulation.configure(*arena)

    # ===========================================================
    # Diagnostics
    # ===========================================================

    def _check_frame_time(self, frame_time_ms: float):
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > Debug.PERF_WARN_INTERVAL:
            self._last_perf_warn_time = now
            DebugLogger.warn(
                f"Slow frame: {frame_time_ms:.2f} ms (draw calls {self.renderer.draw_calls})",
                category="performance"
            )
