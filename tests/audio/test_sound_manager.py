"""
test_sound_manager.py
---------------------
Tests for sound cue loading and fire-and-forget playback.

Covers:
- Tone synthesis fallback when the audio file is missing
- Per-cue volume
- Restart-on-play
- Playback and mixer failures are logged, never raised
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from src.audio.sound_manager import DEFAULT_AUDIO_CONFIG, SoundManager, synth_tone


@pytest.fixture
def mock_pygame():
    with patch("src.audio.sound_manager.pygame") as mocked, \
            patch("src.audio.sound_manager.load_config", return_value=DEFAULT_AUDIO_CONFIG):
        mocked.error = pygame.error
        mocked.mixer.get_init.return_value = (44100, -16, 2)
        mocked.mixer.Sound.side_effect = lambda *a, **kw: MagicMock()
        yield mocked


@pytest.fixture
def sound_manager(mock_pygame):
    return SoundManager()


def test_synth_tone_length_and_range():
    samples = synth_tone(440, 0.01, "square", sample_rate=44100, channels=2)
    assert len(samples) == int(0.01 * 44100) * 2
    assert max(samples) <= 32767
    assert min(samples) >= -32767
    # fade-out ends near silence
    assert abs(samples[-1]) < 1000


def test_missing_files_fall_back_to_tones(sound_manager, mock_pygame):
    assert set(sound_manager.sounds) == {"brick", "paddle"}
    for _, kwargs in mock_pygame.mixer.Sound.call_args_list:
        assert "buffer" in kwargs


def test_cue_volumes(sound_manager):
    sound_manager.sounds["brick"].set_volume.assert_called_once_with(0.3)
    sound_manager.sounds["paddle"].set_volume.assert_called_once_with(0.4)


def test_play_restarts_cue(sound_manager):
    cue = sound_manager.sounds["paddle"]
    sound_manager.play("paddle")
    cue.stop.assert_called_once()
    cue.play.assert_called_once()


def test_unknown_cue_is_ignored(sound_manager):
    sound_manager.play("explosion")


def test_playback_error_is_swallowed(sound_manager):
    sound_manager.sounds["brick"].play.side_effect = pygame.error("device lost")
    sound_manager.play("brick")


def test_mixer_failure_disables_audio(mock_pygame):
    mock_pygame.mixer.get_init.return_value = None
    mock_pygame.mixer.init.side_effect = pygame.error("no audio device")

    manager = SoundManager()

    assert manager.enabled is False
    assert manager.sounds == {}
    manager.play("brick")
