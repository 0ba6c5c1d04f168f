"""
Pickle Run audio: a single synthesized crunch tone.
"""

from .engine import AudioEngine, get_audio_engine

__all__ = ["AudioEngine", "get_audio_engine"]
