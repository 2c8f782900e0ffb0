# serpentine

A small snake game played on a 15 × 15 grid. You steer the snake with the
arrow keys. Each piece of food it eats makes it one segment longer and adds a
point to the score. The game ends when the snake leaves the board or runs into
its own tail. The score then goes back to zero and the snake returns to its
starting place. Press Enter to play again.

## Installing

```
pip install .
```

This also installs `pygame`. The game uses it for its window, drawing and
sound.

## Playing

```
serpentine
```

| Key          | Action                                   |
|--------------|------------------------------------------|
| Arrow keys   | Change direction (a direct U-turn is ignored) |
| Enter        | Restart after a game over                |
| Escape       | Quit                                     |
| Close window | Quit                                     |

The snake moves one cell every 200 ms. The window can be resized, and the board
stays centred in it. Food is drawn as a dot in the middle of its cell.

Sound is optional. If the directory the game is started from holds a `Sounds`
directory with `eat.mp3` and `wall.mp3` in it, those sounds play when the snake
eats and when the round ends. If the files are missing, or no audio device is
available, the game runs without sound.

## Using the engine

The game logic does not need a window, so you can drive it directly:

```python
import random

from serpentine.game import Direction, Game

game = Game(rng=random.Random(1), sound_hook=print)
game.steer(Direction.DOWN)
game.update()
print(game.snake.head, game.food.position, game.score)
```

- `Game(rng=None, sound_hook=None)` holds a `Snake`, a `Food`, the `score`
  and the `running` / `over` flags. `sound_hook` is called with `"eat"` or
  `"wall"`.
- `Game.steer(direction)` turns the snake unless the turn would reverse it. It
  returns whether the snake turned.
- `Game.update()` moves the snake one step and checks for food, edges and tail.
- `Game.confirm()` restarts after a game over and does nothing otherwise.
- `serpentine.snake.Snake` keeps its `body` head first. It has a `head`
  property and the `grow()`, `update()` and `reset()` methods.
- `serpentine.food.Food` picks a random cell that the snake does not cover.
  `generate_position(snake_body)` raises `ValueError` if no free cell is left.
- `serpentine.grid.Cell` is an `(x, y)` named tuple that supports `+`.
  `contains()` and `in_bounds()` are helpers that work on cells.
- `serpentine.config` holds the board size, the starting layout and the
  colours.

## What it does not do

The game does not keep high scores between runs, and it has no menus or
settings. The score exists only while the window is open. It is cleared every
time a round ends.

## Running the tests

```
pip install .[test]
pytest
```