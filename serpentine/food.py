"""Food placed on a random free cell of the grid."""

import random
from typing import Iterable, Optional

from serpentine.config import CELL_COUNT
from serpentine.grid import Cell, contains


def random_cell(rng: random.Random) -> Cell:
    """Pick any cell of the grid uniformly at random."""
    return Cell(rng.randint(0, CELL_COUNT - 1), rng.randint(0, CELL_COUNT - 1))


class Food:
    """A piece of food that never lands on the snake."""

    def __init__(
        self, snake_body: Iterable[Cell], rng: Optional[random.Random] = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.position = Cell(0, 0)
        self.generate_position(snake_body)

    def generate_position(self, snake_body: Iterable[Cell]) -> Cell:
        """Move to a random cell not covered by *snake_body* and return it."""
        occupied = set(snake_body)
        if len(occupied) >= CELL_COUNT * CELL_COUNT and all(
            Cell(x, y) in occupied for x in range(CELL_COUNT) for y in range(CELL_COUNT)
        ):
            raise ValueError("no free cell left for food")
        position = random_cell(self.rng)
        while contains(position, occupied):
            position = random_cell(self.rng)
        self.position = position
        return position