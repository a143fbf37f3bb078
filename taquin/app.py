"""Graphical front end: draws the game with pygame and runs the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .board import WINDOW_HEIGHT, WINDOW_WIDTH, board_to_screen, tile_size
from .game import Game, GameState

COLOR_BACKGROUND = (30, 30, 30)
COLOR_TILE = (70, 130, 180)
COLOR_EMPTY = (50, 50, 50)
COLOR_BORDER = (200, 200, 200)

MAX_TEXTURES = 25
FRAME_DELAY_MS = 16
WINDOW_TITLE = "Taquin - Sliding Puzzle"

# Index of the interface image shown on each screen.
_MENU_IMAGE = 0
_WIN_IMAGE = 4

_CONTROLS = (
    "=== Taquin - Sliding Puzzle Game ===\n"
    "Controls:\n"
    "  Menu: Press 3, 4, or 5 to select grid size\n"
    "  Game: Click tiles to move them\n"
    "  ESC: Return to menu\n"
    "  R: Reset current game\n"
    "  N: New shuffle\n"
    "  Q: Quit game\n"
)


def _load_images(
    directory: Path,
) -> tuple[dict[int, pygame.Surface], dict[int, pygame.Surface]]:
    """Load tile images keyed by tile value and interface images keyed by index."""
    numbers: dict[int, pygame.Surface] = {}
    for value in range(1, MAX_TEXTURES):
        path = directory / "numbers" / f"N{value}.bmp"
        try:
            numbers[value] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            print(f"Failed to load {path}: {exc}", file=sys.stderr)
    interface: dict[int, pygame.Surface] = {}
    for index in range(5):
        path = directory / "inteface" / f"{index + 1}.bmp"
        try:
            interface[index] = pygame.image.load(str(path))
        except (pygame.error, OSError):
            continue
    return numbers, interface


class Renderer:
    """Draws a game onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.number_images: dict[int, pygame.Surface] = {}
        self.ui_images: dict[int, pygame.Surface] = {}

    def draw(self, game: Game) -> None:
        """Draw the screen that matches the game's current state."""
        self.surface.fill(COLOR_BACKGROUND)
        if game.state is GameState.PLAYING:
            self._draw_board(game)
        elif game.state is GameState.WIN:
            self._draw_full(_WIN_IMAGE)
        else:
            self._draw_full(_MENU_IMAGE)

    def _draw_full(self, index: int) -> None:
        image = self.ui_images.get(index)
        if image is not None:
            scaled = pygame.transform.scale(image, self.surface.get_size())
            self.surface.blit(scaled, (0, 0))

    def _draw_board(self, game: Game) -> None:
        board = game.board
        for y, row in enumerate(board.rows()):
            for x, value in enumerate(row):
                self._draw_tile(x, y, value, board.size)

    def _draw_tile(self, x: int, y: int, value: int, board_size: int) -> None:
        size = tile_size(board_size)
        left, top = board_to_screen(x, y, board_size)
        rect = pygame.Rect(left, top, size, size)
        if value == 0:
            self.surface.fill(COLOR_EMPTY, rect)
        else:
            image = self.number_images.get(value)
            if image is not None:
                self.surface.blit(pygame.transform.scale(image, rect.size), rect.topleft)
            else:
                self.surface.fill(COLOR_TILE, rect)
        pygame.draw.rect(self.surface, COLOR_BORDER, rect, 1)


def _handle_event(game: Game, event: pygame.event.Event) -> None:
    if game.state is GameState.MENU:
        if event.type == pygame.KEYDOWN:
            game.menu_key(pygame.key.name(event.key))
    elif game.state is GameState.PLAYING:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            game.click(*event.pos)
        elif event.type == pygame.KEYDOWN:
            game.play_key(pygame.key.name(event.key))
    elif game.state is GameState.WIN:
        if event.type == pygame.KEYDOWN:
            game.win_key(pygame.key.name(event.key))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="taquin", description="Sliding puzzle game.")
    parser.add_argument(
        "--images", default="images", help="directory holding the game images"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    except pygame.error as exc:
        print(f"Failed to initialize game: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    pygame.display.set_caption(WINDOW_TITLE)

    renderer = Renderer(screen)
    renderer.number_images, renderer.ui_images = _load_images(Path(args.images))
    game = Game()

    print(_CONTROLS)

    last = pygame.time.get_ticks()
    try:
        while game.running:
            now = pygame.time.get_ticks()
            delta, last = now - last, now
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                else:
                    _handle_event(game, event)
            game.tick(delta)
            renderer.draw(game)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()

    print("Thanks for playing Taquin!")
    return 0