"""Window, drawing and main loop of the snake game."""

import argparse
import random
import time
from pathlib import Path
from typing import Dict, Optional, Sequence

import pygame

from serpentine.config import (
    CELL_COUNT,
    CELL_SIZE,
    DARK_GREEN,
    FONT_SIZE,
    GRID_SIZE,
    LIGHT_GREEN,
)
from serpentine.game import Direction, Game

TITLE = "Snake game"
RESTART_MESSAGE = "Press ENTER to continue..."
STEP_INTERVAL = 0.2
FPS = 60
RAY_WHITE = (245, 245, 245)
SOUND_DIR = Path("Sounds")

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class Ticker:
    """Fires at most once per interval, measured from the last firing."""

    def __init__(self) -> None:
        self.last = 0.0

    def ready(self, now: float, interval: float) -> bool:
        if now - self.last >= interval:
            self.last = now
            return True
        return False


def grid_offset(screen_width: int, screen_height: int) -> tuple:
    """Offsets that centre the grid on a screen of the given size."""
    return int((screen_width - GRID_SIZE) / 2), int((screen_height - GRID_SIZE) / 2)


def draw(surface, game: Game, offset_x: int, offset_y: int, fonts) -> None:
    """Draw the whole frame; *fonts* is the font used for all text."""
    surface.fill(LIGHT_GREEN[:3])
    dark = DARK_GREEN[:3]

    title = fonts.render(TITLE, True, dark)
    surface.blit(
        title,
        (offset_x + (GRID_SIZE - title.get_width()) // 2, offset_y - 20 - FONT_SIZE),
    )
    score = fonts.render(f"Score: {game.score}", True, dark)
    surface.blit(score, (offset_x, offset_y + GRID_SIZE + 20))

    for i in range(CELL_COUNT + 1):
        line = i * CELL_SIZE
        pygame.draw.line(
            surface, dark, (offset_x + line, offset_y), (offset_x + line, offset_y + GRID_SIZE)
        )
        pygame.draw.line(
            surface, dark, (offset_x, offset_y + line), (offset_x + GRID_SIZE, offset_y + line)
        )

    radius = int(0.4 * CELL_SIZE / 2)
    for cell in game.snake.body:
        rect = pygame.Rect(
            offset_x + cell.x * CELL_SIZE, offset_y + cell.y * CELL_SIZE, CELL_SIZE, CELL_SIZE
        )
        pygame.draw.rect(surface, dark, rect, border_radius=radius)

    food = game.food.position
    pygame.draw.circle(
        surface,
        dark,
        (
            offset_x + food.x * CELL_SIZE + CELL_SIZE // 2,
            offset_y + food.y * CELL_SIZE + CELL_SIZE // 2,
        ),
        CELL_SIZE // 3,
    )

    if game.over:
        width, height = surface.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 127))
        surface.blit(shade, (0, 0))
        message = fonts.render(RESTART_MESSAGE, True, RAY_WHITE)
        surface.blit(message, ((width - message.get_width()) // 2, height // 2))


def _load_sounds() -> Dict[str, "pygame.mixer.Sound"]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    sounds = {}
    for name in ("wall", "eat"):
        try:
            sounds[name] = pygame.mixer.Sound(str(SOUND_DIR / f"{name}.mp3"))
        except (pygame.error, FileNotFoundError):
            continue
    return sounds


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="serpentine", description="Play snake.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((0, 0), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        sounds = _load_sounds()

        def play(name: str) -> None:
            sound = sounds.get(name)
            if sound is not None:
                sound.play()

        game = Game(random.Random(), play)
        clock = pygame.time.Clock()
        ticker = Ticker()
        start = time.monotonic()

        while True:
            offset_x, offset_y = grid_offset(*screen.get_size())
            draw(screen, game, offset_x, offset_y, font)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return 0
                if event.key in _KEY_DIRECTIONS:
                    game.steer(_KEY_DIRECTIONS[event.key])
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    game.confirm()

            if ticker.ready(time.monotonic() - start, STEP_INTERVAL):
                game.update()

            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()