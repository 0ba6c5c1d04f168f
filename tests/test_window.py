"""Game window: input translation and the frame loop."""

import asyncio

import pygame
import pytest

from pickle_run.app.window import GameWindow, WindowConfig
from pickle_run.config.settings import DisplaySettings
from pickle_run.config.theme import Theme
from pickle_run.core.events import EventBus, EventType
from pickle_run.core.state import GameState
from pickle_run.graphics.renderer import Renderer
from pickle_run.graphics.sprites import SpriteLoader


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def window(session, bus, pygame_video):
    return GameWindow(
        session=session,
        renderer=Renderer(Theme(), SpriteLoader(None)),
        config=WindowConfig(width=800, height=600, fps=1000),
        event_bus=bus,
    )


def test_config_from_settings():
    config = WindowConfig.from_settings(
        DisplaySettings(width=1024, height=768, fps=30, title="T"), debug=True
    )
    assert (config.width, config.height, config.fps, config.title) == (1024, 768, 30, "T")
    assert config.show_debug


def test_mouse_click_jumps(window, session):
    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert session.state == GameState.PLAYING

    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert session.player.jumps == 1


def test_touch_jumps_once(window, session, bus, record):
    jumps = record(bus, EventType.JUMP)
    window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0), touch=True))
    assert session.state == GameState.START

    window.handle_event(pygame.event.Event(
        pygame.FINGERDOWN, touch_id=0, finger_id=0, x=0.5, y=0.5, dx=0.0, dy=0.0, pressure=1.0
    ))
    assert session.state == GameState.PLAYING
    assert [e.source for e in jumps] == ["touch"]


def test_keyboard_jumps(window, session):
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert session.state == GameState.PLAYING
    assert session.player.jumps == 1


def test_resize_updates_viewport(window, session):
    window.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768, size=(1024, 768)))
    assert session.viewport.size == (1024, 768)


def test_window_size_changed_updates_viewport(window, session):
    window.handle_event(pygame.event.Event(pygame.WINDOWSIZECHANGED, x=640, y=480))
    assert session.viewport.size == (640, 480)


@pytest.mark.parametrize("event", [
    pygame.event.Event(pygame.QUIT),
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q),
])
def test_quit(window, event):
    window._running = True
    window.handle_event(event)
    assert window._running is False


def test_debug_toggle_and_overlay(window, session):
    window.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    assert window._show_debug

    window._screen = pygame.Surface((800, 600))
    window._render_debug_overlay()


def test_run_loop_ticks_session(window, session, bus, record, monkeypatch):
    ticks = record(bus, EventType.TICK)
    shutdown = record(bus, EventType.SHUTDOWN)
    handle_events = window._handle_events

    def scripted_events():
        handle_events()
        if window.frame_count == 0:
            window.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))
        if window.frame_count == 5:
            window.stop()

    monkeypatch.setattr(window, "_handle_events", scripted_events)

    asyncio.run(window.run())

    assert window.frame_count == 6
    assert session.state == GameState.PLAYING
    assert [e.data["frame"] for e in ticks] == [0, 1, 2, 3, 4, 5]
    assert len(shutdown) == 1
    # First pickle has scrolled 6 frames
    assert session.collectibles[0].x == pytest.approx(0.65 * 800 - 6 * 2.6)
