import random
from unittest import mock

import pygame
import pytest

from taquin.app import (
    COLOR_BACKGROUND,
    COLOR_BORDER,
    COLOR_EMPTY,
    COLOR_TILE,
    Renderer,
    _load_images,
    main,
)
from taquin.board import WINDOW_HEIGHT, WINDOW_WIDTH, board_to_screen, tile_size
from taquin.game import Game, GameState


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def _center(x, y, board_size):
    left, top = board_to_screen(x, y, board_size)
    half = tile_size(board_size) // 2
    return left + half, top + half


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


@pytest.fixture
def playing_game():
    game = Game(random.Random(1))
    game.reset(3)
    return game


def _solid(color, size=(10, 10)):
    image = pygame.Surface(size)
    image.fill(color)
    return image


def test_menu_draws_background(surface):
    Renderer(surface).draw(Game(random.Random(0)))
    assert _rgb(surface, (0, 0)) == (30, 30, 30)
    assert _rgb(surface, (400, 300)) == COLOR_BACKGROUND


def test_menu_uses_first_interface_image(surface):
    renderer = Renderer(surface)
    renderer.ui_images[0] = _solid((255, 0, 0))
    renderer.draw(Game(random.Random(0)))
    assert _rgb(surface, (5, 5)) == (255, 0, 0)
    assert _rgb(surface, (WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1)) == (255, 0, 0)


def test_playing_draws_empty_and_tiles(surface, playing_game):
    Renderer(surface).draw(playing_game)
    board = playing_game.board
    for y, row in enumerate(board.rows()):
        for x, value in enumerate(row):
            expected = COLOR_EMPTY if value == 0 else COLOR_TILE
            assert _rgb(surface, _center(x, y, board.size)) == expected


def test_playing_draws_borders_and_leaves_margin(surface, playing_game):
    Renderer(surface).draw(playing_game)
    left, top = board_to_screen(0, 0, playing_game.board.size)
    assert _rgb(surface, (left, top)) == COLOR_BORDER
    assert _rgb(surface, (0, 0)) == COLOR_BACKGROUND


def test_playing_uses_number_images(surface, playing_game):
    renderer = Renderer(surface)
    board = playing_game.board
    for value in range(1, board.size * board.size):
        renderer.number_images[value] = _solid((0, 255, 0))
    renderer.draw(playing_game)
    ex, ey = board.empty
    tx, ty = (1, 0) if (ex, ey) == (0, 0) else (0, 0)
    assert _rgb(surface, _center(tx, ty, board.size)) == (0, 255, 0)
    assert _rgb(surface, _center(ex, ey, board.size)) == COLOR_EMPTY


def test_win_screen_without_image_is_background(surface):
    game = Game(random.Random(0))
    game.state = GameState.WIN
    Renderer(surface).draw(game)
    assert _rgb(surface, (400, 300)) == COLOR_BACKGROUND


def test_win_screen_uses_fifth_interface_image(surface):
    game = Game(random.Random(0))
    game.state = GameState.WIN
    renderer = Renderer(surface)
    renderer.ui_images[0] = _solid((255, 0, 0))
    renderer.ui_images[4] = _solid((0, 0, 255))
    renderer.draw(game)
    assert _rgb(surface, (400, 300)) == (0, 0, 255)


def test_paused_state_draws_menu(surface):
    game = Game(random.Random(0))
    game.state = GameState.PAUSED
    renderer = Renderer(surface)
    renderer.ui_images[0] = _solid((255, 0, 0))
    renderer.draw(game)
    assert _rgb(surface, (400, 300)) == (255, 0, 0)


def test_load_images_reads_present_files(tmp_path):
    (tmp_path / "numbers").mkdir()
    (tmp_path / "inteface").mkdir()
    pygame.image.save(_solid((0, 255, 0)), str(tmp_path / "numbers" / "N1.bmp"))
    pygame.image.save(_solid((0, 0, 255)), str(tmp_path / "inteface" / "5.bmp"))
    numbers, interface = _load_images(tmp_path)
    assert sorted(numbers) == [1]
    assert sorted(interface) == [4]
    assert _rgb(numbers[1], (0, 0)) == (0, 255, 0)


def test_load_images_missing_directory(tmp_path):
    numbers, interface = _load_images(tmp_path / "absent")
    assert numbers == {}
    assert interface == {}


def test_main_quits_on_quit_event(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main([])
    assert result == 0
    out = capsys.readouterr().out
    assert "Thanks for playing Taquin!" in out
    assert "=== Taquin - Sliding Puzzle Game ===" in out