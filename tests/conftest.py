"""Shared fixtures. pygame runs headless through SDL's dummy drivers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from pickle_run.config.settings import AudioSettings, DisplaySettings, Settings
from pickle_run.core.viewport import Viewport
from pickle_run.game.session import GameSession


class FakeAudio:
    """Counts calls instead of touching the mixer."""

    def __init__(self):
        self.init_calls = 0
        self.tones = 0

    def ensure_initialized(self) -> bool:
        self.init_calls += 1
        return True

    def play_collect_tone(self):
        self.tones += 1

    def cleanup(self) -> None:
        pass


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        display=DisplaySettings(width=800, height=600),
        audio=AudioSettings(enabled=False),
    )


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def session(settings, viewport, audio):
    return GameSession(
        settings=settings,
        viewport=viewport,
        audio=audio,
        rng=random.Random(1234),
    )


@pytest.fixture
def make_session(settings):
    """Build fresh 800x600 sessions from a seed."""
    def _make(seed):
        return GameSession(
            settings=settings,
            viewport=Viewport(800, 600),
            audio=FakeAudio(),
            rng=random.Random(seed),
        )
    return _make


@pytest.fixture
def playing(session):
    """A session that has just started a run."""
    session.handle_jump()
    return session


@pytest.fixture
def pygame_video():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.quit()


def _put_on_player(session, pickle):
    """Place a pickle so the next update() lands it on a grounded player."""
    player = session.player
    pickle.x = player.x + session.scroll_speed
    pickle.base_y = session.ground_y
    pickle.bob_phase = -session.gameplay.bob_step


def _win(session):
    """Drive a started session into WIN in one frame."""
    for pickle in session.collectibles:
        _put_on_player(session, pickle)
    session.update()


@pytest.fixture
def put_on_player():
    return _put_on_player


@pytest.fixture
def win():
    return _win


@pytest.fixture
def record():
    """Collect events of the given types from a bus into a list."""
    def _record(bus, *event_types):
        seen = []
        for event_type in event_types:
            bus.subscribe(event_type, seen.append)
        return seen
    return _record
