"""Game rules: movement, eating, collisions, scoring and restart."""

import random
from enum import Enum
from typing import Callable, Optional

from serpentine.config import CELL_COUNT
from serpentine.food import Food
from serpentine.grid import Cell, contains, in_bounds
from serpentine.snake import Snake


class Direction(Enum):
    """Directions the player can steer in."""

    LEFT = Cell(-1, 0)
    RIGHT = Cell(1, 0)
    UP = Cell(0, -1)
    DOWN = Cell(0, 1)


SoundHook = Callable[[str], None]


class Game:
    """State of one game; sounds are reported by name to an optional hook."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_hook: Optional[SoundHook] = None,
    ) -> None:
        self.snake = Snake()
        self.food = Food(self.snake.body, rng)
        self.running = True
        self.over = False
        self.score = 0
        self._sound_hook = sound_hook

    def _play(self, name: str) -> None:
        if self._sound_hook is not None:
            self._sound_hook(name)

    def steer(self, direction: Direction) -> bool:
        """Turn the snake unless that would reverse it; return whether it turned."""
        step = direction.value
        current = self.snake.direction
        if (step.x != 0 and current.x == -step.x) or (
            step.y != 0 and current.y == -step.y
        ):
            return False
        self.snake.direction = step
        return True

    def confirm(self) -> None:
        """Restart after a game over; does nothing otherwise."""
        if not self.over:
            return
        self.running = True
        self.over = False
        self.snake.reset()
        self.food.generate_position(self.snake.body)

    def update(self) -> None:
        """Advance the game by one step."""
        if not self.running:
            return
        self.snake.update()
        self.check_collision_with_food()
        self.check_collision_with_edges()
        self.check_collision_with_tail()

    def check_collision_with_food(self) -> None:
        if self.snake.head == self.food.position:
            self.food.generate_position(self.snake.body)
            self.snake.grow()
            self.score += 1
            self._play("eat")

    def check_collision_with_edges(self) -> None:
        if not in_bounds(self.snake.head, CELL_COUNT):
            self.game_over()

    def check_collision_with_tail(self) -> None:
        tail = list(self.snake.body)[1:]
        if contains(self.snake.head, tail):
            self.game_over()

    def game_over(self) -> None:
        """End the round: reset the snake and food, clear the score."""
        self.snake.reset()
        self.food.generate_position(self.snake.body)
        self.running = False
        self.over = True
        self.score = 0
        self._play("wall")