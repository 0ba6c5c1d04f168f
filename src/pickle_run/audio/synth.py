"""
Waveform and envelope generation for the collect tone.

Samples are produced with numpy and returned as signed 16-bit arrays
ready to hand to pygame.mixer.Sound.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


def square(t: NDArray[np.float64], freq: float) -> NDArray[np.float64]:
    """Square wave oscillator (+1 for the first half of each period)."""
    return np.where((t * freq) % 1.0 < 0.5, 1.0, -1.0)


@dataclass
class ExponentialDecay:
    """Gain that ramps exponentially from start to end over duration seconds."""
    start: float = 0.14
    end: float = 0.001
    duration: float = 0.12

    def gain_at(self, t: NDArray[np.float64]) -> NDArray[np.float64]:
        """Gain at each time t (seconds), held at end once duration elapses."""
        progress = np.clip(t / self.duration, 0.0, 1.0)
        return self.start * (self.end / self.start) ** progress


def render_tone(
    frequency: float,
    envelope: ExponentialDecay,
    sample_rate: int = 44100,
) -> NDArray[np.int16]:
    """Render a square-wave tone shaped by envelope, mono int16.

    The tone stops when the envelope ends.
    """
    num_samples = int(sample_rate * envelope.duration)
    t = np.arange(num_samples, dtype=np.float64) / sample_rate
    wave = square(t, frequency) * envelope.gain_at(t)
    return np.clip(wave * 32767, -32767, 32767).astype(np.int16)


def to_channels(samples: NDArray[np.int16], channels: int) -> NDArray[np.int16]:
    """Duplicate mono samples across the mixer's channel count."""
    if channels <= 1:
        return np.ascontiguousarray(samples)
    return np.ascontiguousarray(np.repeat(samples[:, np.newaxis], channels, axis=1))
