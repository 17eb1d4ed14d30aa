"""
sound_manager.py
----------------
Fire-and-forget sound cues on top of pygame.mixer.

Cues are described in src/config/audio.json. Each cue loads its audio file
if present, otherwise a short synthesized tone is used. Playback failures
are logged and never reach the simulation.
"""

import array
import math
import os

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.services.config_manager import load_config


DEFAULT_AUDIO_CONFIG = {
    "mixer": {"frequency": 44100, "channels": 2},
    "cues": {
        "brick": {"path": None, "volume": 0.3,
                  "tone": {"frequency": 880, "duration": 0.05, "wave": "square"}},
        "paddle": {"path": None, "volume": 0.4,
                   "tone": {"frequency": 440, "duration": 0.06, "wave": "sine"}},
    },
}

MAX_AMPLITUDE = 32767


def synth_tone(frequency, duration, wave="sine", sample_rate=44100, channels=2, level=0.5):
    """
    Build interleaved signed 16-bit samples for a short tone.

    A linear fade-out over the last quarter avoids an audible click.
    """
    count = max(int(duration * sample_rate), 1)
    fade_start = int(count * 0.75)
    samples = array.array("h")
    for i in range(count):
        phase = (frequency * i / sample_rate) % 1.0
        if wave == "square":
            v = 1.0 if phase < 0.5 else -1.0
        else:
            v = math.sin(2 * math.pi * phase)
        if i >= fade_start:
            v *= (count - i) / (count - fade_start)
        value = max(-MAX_AMPLITUDE, min(MAX_AMPLITUDE, int(v * level * MAX_AMPLITUDE)))
        samples.extend([value] * channels)
    return samples


class SoundManager:
    """SoundPlayer collaborator: play(cue_name)."""

    def __init__(self, config_file="audio.json"):
        DebugLogger.init_entry("SoundManager")
        self.config = load_config(config_file, DEFAULT_AUDIO_CONFIG)
        self.sounds = {}
        self.enabled = self._init_mixer()
        if self.enabled:
            self.load_cues()

    # ===========================================================
    # Setup
    # ===========================================================

    def _init_mixer(self) -> bool:
        mixer_cfg = self.config.get("mixer", {})
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(
                    frequency=mixer_cfg.get("frequency", 44100),
                    size=-16,
                    channels=mixer_cfg.get("channels", 2),
                )
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled, mixer unavailable: {e}", category="audio")
            return False
        return True

    def load_cues(self):
        for name, cue in self.config.get("cues", {}).items():
            sound = self._load_cue(name, cue)
            if sound is None:
                continue
            sound.set_volume(cue.get("volume", 1.0))
            self.sounds[name] = sound
        DebugLogger.init_sub(f"Loaded cues: {sorted(self.sounds)}")

    def _load_cue(self, name, cue):
        """Load from file, fall back to a synthesized tone, else None."""
        path = cue.get("path")
        try:
            if path and os.path.exists(path):
                return pygame.mixer.Sound(path)

            tone = cue.get("tone")
            if not tone:
                DebugLogger.warn(f"Cue '{name}' has no audio file or tone", category="audio")
                return None

            frequency, _, channels = pygame.mixer.get_init()
            samples = synth_tone(
                tone.get("frequency", 440),
                tone.get("duration", 0.05),
                tone.get("wave", "sine"),
                sample_rate=frequency,
                channels=channels,
            )
            return pygame.mixer.Sound(buffer=samples.tobytes())
        except pygame.error as e:
            DebugLogger.warn(f"Failed to load cue '{name}': {e}", category="audio")
            return None

    # ===========================================================
    # Playback
    # ===========================================================

    def play(self, cue_name):
        """Restart and play a cue. Errors are logged, never raised."""
        if not self.enabled:
            return
        sound = self.sounds.get(cue_name)
        if sound is None:
            DebugLogger.warn(f"Unknown sound cue '{cue_name}'", category="audio")
            return
        try:
            sound.stop()
            sound.play()
        except pygame.error as e:
            DebugLogger.warn(f"Error playing sound '{cue_name}': {e}", category="audio")
