from serpentine.config import START_BODY, START_DIRECTION
from serpentine.grid import Cell
from serpentine.snake import Snake


def test_initial_state():
    snake = Snake()
    assert list(snake.body) == list(START_BODY)
    assert snake.direction == START_DIRECTION
    assert snake.head == Cell(5, 4)


def test_update_moves_forward_keeping_length():
    snake = Snake()
    snake.update()
    assert list(snake.body) == [Cell(6, 4), Cell(5, 4)]


def test_update_follows_direction():
    snake = Snake()
    snake.direction = Cell(0, 1)
    snake.update()
    assert snake.head == Cell(5, 5)
    assert len(snake.body) == len(START_BODY)


def test_grow_adds_one_segment_once():
    snake = Snake()
    snake.grow()
    snake.update()
    assert len(snake.body) == len(START_BODY) + 1
    snake.update()
    assert len(snake.body) == len(START_BODY) + 1


def test_reset_restores_start():
    snake = Snake()
    snake.direction = Cell(0, -1)
    snake.update()
    snake.update()
    snake.reset()
    assert list(snake.body) == list(START_BODY)
    assert snake.direction == START_DIRECTION