"""
conftest.py
-----------
Shared pytest configuration and fixtures for the brick breaker tests.

Contains:
- Mock collaborators (renderer, sound player, display binding)
- A SimulationLoop configured on a fixed 800x600 arena
- Pytest markers
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Make `import src...` work no matter where pytest is started from
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.core.debug.debug_logger import LoggerConfig
from src.core.runtime.simulation_loop import SimulationLoop
from src.entities import RoundPhase


ARENA_WIDTH = 800
ARENA_HEIGHT = 600


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean; individual tests can re-enable logging."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Collaborator Mocks
# ===========================================================

@pytest.fixture
def mock_renderer():
    """Renderer with clear/draw_rect/draw_circle."""
    renderer = MagicMock()
    renderer.clear = MagicMock()
    renderer.draw_rect = MagicMock()
    renderer.draw_circle = MagicMock()
    return renderer


@pytest.fixture
def mock_sound():
    """SoundPlayer with play(cue)."""
    sound = MagicMock()
    sound.play = MagicMock()
    return sound


@pytest.fixture
def mock_display():
    """DisplayBinding with set_score/set_lives/set_level."""
    display = MagicMock()
    display.set_score = MagicMock()
    display.set_lives = MagicMock()
    display.set_level = MagicMock()
    return display


@pytest.fixture
def simulation(mock_renderer, mock_sound, mock_display):
    """SimulationLoop configured on an 800x600 arena, ball waiting on the paddle."""
    sim = SimulationLoop(mock_renderer, mock_sound, mock_display)
    sim.configure(ARENA_WIDTH, ARENA_HEIGHT)
    return sim


# Test utilities
@pytest.fixture
def activate():
    """Returns a helper that puts a simulation into ACTIVE and places/steers the ball."""
    def _activate(sim, x=None, y=None, dx=None, dy=None):
        sim.state.phase = RoundPhase.ACTIVE
        ball = sim.state.ball
        if x is not None:
            ball.x = x
        if y is not None:
            ball.y = y
        if dx is not None:
            ball.dx = dx
        if dy is not None:
            ball.dy = dy
        return ball
    return _activate


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "scenario: multi-step gameplay scenarios")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything under tests/ as a unit test."""
    for item in items:
        if "scenario" not in item.keywords:
            item.add_marker(pytest.mark.unit)
