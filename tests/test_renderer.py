"""Frame rendering."""

import numpy as np
import pygame
import pytest

from pickle_run.config.theme import Theme
from pickle_run.graphics.renderer import Renderer
from pickle_run.graphics.sprites import SpriteLoader

BACKGROUND = Theme().colors.to_rgb("background")


@pytest.fixture
def surface(pygame_video):
    return pygame.Surface((800, 600))


@pytest.fixture
def renderer(pygame_video):
    sprites = SpriteLoader(None)
    sprites.load()
    return Renderer(Theme(), sprites)


def pixel(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def dark_pixels(surface, top=0, bottom=None):
    rgb = pygame.surfarray.array3d(surface)[:, top:bottom]
    return int(np.count_nonzero(rgb.sum(axis=2) < 100))


def test_start_screen(surface, renderer, session):
    renderer.render(surface, session)

    assert pixel(surface, 0, 0) == BACKGROUND
    # Instructions sit around the vertical middle
    assert dark_pixels(surface, 240, 340) > 0
    assert dark_pixels(surface, 0, 200) == 0


def test_playing_draws_player(surface, renderer, playing):
    renderer.render(surface, playing)

    assert pixel(surface, playing.player.x, playing.player.y) == (0, 0, 0)
    assert pixel(surface, 0, 0) == BACKGROUND


def test_playing_draws_uncollected_pickles(surface, renderer, playing):
    pickle = playing.collectibles[0]
    pickle.x, pickle.y = 400, 200

    renderer.render(surface, playing)

    assert pixel(surface, 400, 200) != BACKGROUND


def test_collected_pickles_are_hidden(surface, renderer, playing):
    pickle = playing.collectibles[0]
    pickle.x, pickle.y = 400, 200
    pickle.collected = True

    renderer.render(surface, playing)

    assert pixel(surface, 400, 200) == BACKGROUND


def test_pickles_skipped_while_sprite_loading(surface, playing, pygame_video):
    renderer = Renderer(Theme(), SpriteLoader(None))
    pickle = playing.collectibles[0]
    pickle.x, pickle.y = 400, 200

    renderer.render(surface, playing)

    assert pixel(surface, 400, 200) == BACKGROUND
    assert pixel(surface, playing.player.x, playing.player.y) == (0, 0, 0)


def test_win_screen(surface, renderer, playing, win):
    win(playing)
    playing.celebration.particles = []

    renderer.render(surface, playing)

    assert pixel(surface, 0, 0) == BACKGROUND
    # Title, label and code
    assert dark_pixels(surface, 160, 220) > 0
    assert dark_pixels(surface, 260, 300) > 0
    assert dark_pixels(surface, 310, 360) > 0
    # Player is not drawn on the win screen
    assert pixel(surface, playing.player.x, playing.player.y) == BACKGROUND


def test_win_screen_draws_confetti(surface, renderer, playing, win):
    win(playing)
    particle = playing.confetti[0]
    particle.x, particle.y, particle.size, particle.rotation = 100, 550, 20, 0.5
    particle.text = "pickle"

    renderer.render(surface, playing)

    assert dark_pixels(surface, 520, 580) > 0
