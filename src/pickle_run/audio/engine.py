"""
Pickle Run Audio Engine - the crunch.

The mixer is opened lazily, on the first tap, and then plays one short
square-wave tone per collected pickle.
"""

import logging
import random
from typing import Optional

import pygame

from pickle_run.audio.synth import ExponentialDecay, render_tone, to_channels
from pickle_run.config.settings import AudioSettings

logger = logging.getLogger(__name__)


class AudioEngine:
    """
    Two-phase audio resource: uninitialized until the first user input,
    initialized afterwards.

    ensure_initialized() is idempotent and meant to be called from input
    handling. play_collect_tone() does nothing until initialization has
    succeeded.
    """

    def __init__(self, settings: AudioSettings | None = None, rng: random.Random | None = None):
        self.settings = settings or AudioSettings()
        self._rng = rng or random.Random()
        self._initialized = False
        self._channels = 2
        self._sample_rate = self.settings.sample_rate
        self._envelope = ExponentialDecay(
            start=self.settings.tone_start_gain,
            end=self.settings.tone_end_gain,
            duration=self.settings.tone_duration,
        )

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> bool:
        """Open the mixer once. Returns True when audio is available."""
        if self._initialized:
            return True
        if not self.settings.enabled:
            return False

        try:
            pygame.mixer.init(frequency=self.settings.sample_rate, size=-16, channels=2, buffer=512)
            pygame.mixer.set_num_channels(16)
        except (pygame.error, OSError) as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        # The device may not honour the requested format
        init_info = pygame.mixer.get_init()
        if init_info:
            self._sample_rate, _, self._channels = init_info

        self._initialized = True
        logger.info(f"Audio engine initialized ({self._sample_rate} Hz, {self._channels} ch)")
        return True

    def pick_frequency(self) -> float:
        """Random tone pitch in [tone_min_hz, tone_max_hz)."""
        low, high = self.settings.tone_min_hz, self.settings.tone_max_hz
        return low + self._rng.random() * (high - low)

    def play_collect_tone(self) -> Optional[pygame.mixer.Channel]:
        """Fire-and-forget crunch. Overlapping calls play independently."""
        if not self._initialized:
            return None

        frequency = self.pick_frequency()
        samples = render_tone(frequency, self._envelope, self._sample_rate)
        sound = pygame.mixer.Sound(buffer=to_channels(samples, self._channels))
        logger.debug(f"Collect tone at {frequency:.0f} Hz")
        return sound.play()

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")


# Global audio engine instance
_audio_engine: Optional[AudioEngine] = None


def get_audio_engine(settings: AudioSettings | None = None) -> AudioEngine:
    """Get the global audio engine instance."""
    global _audio_engine
    if _audio_engine is None:
        _audio_engine = AudioEngine(settings)
    return _audio_engine
