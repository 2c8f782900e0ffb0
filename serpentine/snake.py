"""The snake: its body, heading and movement."""

from serpentine.config import START_DIRECTION, start_body
from serpentine.grid import Cell


class Snake:
    """A snake whose body is held head first."""

    def __init__(self) -> None:
        self.body = start_body()
        self.direction: Cell = START_DIRECTION
        self._pending_growth = False

    @property
    def head(self) -> Cell:
        """The cell the snake's head occupies."""
        return self.body[0]

    def grow(self) -> None:
        """Make the next move add a segment instead of dropping the tail."""
        self._pending_growth = True

    def update(self) -> None:
        """Move one cell in the current direction."""
        self.body.appendleft(self.body[0] + self.direction)
        if self._pending_growth:
            self._pending_growth = False
        else:
            self.body.pop()

    def reset(self) -> None:
        """Return to the starting body and direction."""
        self.body = start_body()
        self.direction = START_DIRECTION