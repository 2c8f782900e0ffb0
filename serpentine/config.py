"""Board dimensions, starting layout and colour theme."""

from collections import deque

from serpentine.grid import Cell

FONT_SIZE = 40

CELL_SIZE = 40
CELL_COUNT = 15
GRID_SIZE = CELL_SIZE * CELL_COUNT

START_BODY = (Cell(5, 4), Cell(4, 4))
START_DIRECTION = Cell(1, 0)

LIGHT_GREEN = (173, 204, 96, 25)
DARK_GREEN = (43, 51, 24, 255)


def start_body() -> deque:
    """Return a fresh copy of the snake's starting body, head first."""
    return deque(START_BODY)