import random

import pygame
import pytest

from serpentine.app import Ticker, draw, grid_offset
from serpentine.config import DARK_GREEN, GRID_SIZE, LIGHT_GREEN
from serpentine.game import Game
from serpentine.grid import Cell


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 40)


def _game():
    game = Game(random.Random(5))
    game.food.position = Cell(14, 14)
    return game


def test_ticker_waits_for_interval():
    ticker = Ticker()
    assert ticker.ready(0.1, 0.2) is False
    assert ticker.ready(0.25, 0.2) is True
    assert ticker.ready(0.3, 0.2) is False
    assert ticker.ready(0.45, 0.2) is True


def test_grid_offset_centres_grid():
    x, y = grid_offset(GRID_SIZE + 200, GRID_SIZE + 100)
    assert x * 2 + GRID_SIZE == GRID_SIZE + 200
    assert y * 2 + GRID_SIZE == GRID_SIZE + 100


def test_grid_offset_exact_fit():
    assert grid_offset(GRID_SIZE, GRID_SIZE) == (0, 0)


def test_draw_background_and_grid(font):
    surface = pygame.Surface((GRID_SIZE + 100, GRID_SIZE + 160))
    draw(surface, _game(), 50, 80, font)
    assert tuple(surface.get_at((2, 2)))[:3] == LIGHT_GREEN[:3]
    assert tuple(surface.get_at((50, 300)))[:3] == DARK_GREEN[:3]


def test_draw_snake_cells(font):
    surface = pygame.Surface((GRID_SIZE + 100, GRID_SIZE + 160))
    game = _game()
    draw(surface, game, 50, 80, font)
    head = game.snake.head
    centre = (50 + head.x * 40 + 20, 80 + head.y * 40 + 20)
    assert tuple(surface.get_at(centre))[:3] == DARK_GREEN[:3]


def test_draw_game_over_shades_screen(font):
    surface = pygame.Surface((GRID_SIZE + 100, GRID_SIZE + 160))
    game = _game()
    game.game_over()
    draw(surface, game, 50, 80, font)
    shaded = tuple(surface.get_at((2, 2)))[:3]
    assert all(s < c for s, c in zip(shaded, LIGHT_GREEN[:3]))