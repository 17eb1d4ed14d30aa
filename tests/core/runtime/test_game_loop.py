"""
test_game_loop.py
-----------------
Tests for the pygame host: wiring, resize handling and frame pausing.
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from src.core.runtime.game_loop import GameLoop


@pytest.fixture
def loop():
    target = "src.core.runtime.game_loop"
    with patch(f"{target}.pygame") as mock_pygame, \
            patch(f"{target}.DisplayManager") as display_cls, \
            patch(f"{target}.DrawManager") as draw_cls, \
            patch(f"{target}.HUDManager") as hud_cls, \
            patch(f"{target}.SoundManager") as sound_cls, \
            patch(f"{target}.SimulationLoop") as sim_cls, \
            patch(f"{target}.InputManager") as input_cls:
        mock_pygame.VIDEORESIZE = pygame.VIDEORESIZE
        display_cls.return_value.get_arena_size.return_value = (640, 480)
        game = GameLoop()
        yield game, mock_pygame, sim_cls


def test_collaborators_are_wired(loop):
    game, _, sim_cls = loop
    sim_cls.assert_called_once_with(game.renderer, game.sound, game.hud)
    game.simulation.configure.assert_called_once_with(640, 480)


def test_resize_rebinds_and_reconfigures(loop):
    game, mock_pygame, _ = loop
    game.display.handle_resize.return_value = (800, 600)
    mock_pygame.event.get.return_value = [
        pygame.event.Event(pygame.VIDEORESIZE, w=1000, h=750, size=(1000, 750)),
    ]

    game._handle_events()

    game.display.handle_resize.assert_called_once_with(1000, 750)
    game.renderer.bind.assert_called_once_with(game.display.get_arena_surface.return_value)
    game.simulation.configure.assert_called_with(800, 600)
    game.input_manager.handle_event.assert_not_called()


def test_quit_stops_loop(loop):
    game, mock_pygame, _ = loop
    game.input_manager.handle_event.return_value = False
    mock_pygame.event.get.return_value = [MagicMock(type=pygame.QUIT)]

    game._handle_events()

    assert game.running is False


def test_tick_tracks_pause_and_resume(loop):
    game, _, _ = loop
    game.simulation.update.side_effect = [True, False, False, True]

    seen = []
    for now in (0.0, 0.1, 0.2, 0.7):
        game._tick(now)
        seen.append(game.frame_scheduled)

    assert seen == [True, False, False, True]
    assert [c.args[0] for c in game.simulation.update.call_args_list] == [0.0, 0.1, 0.2, 0.7]
