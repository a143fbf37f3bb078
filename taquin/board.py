"""Sliding puzzle board and the mapping between board and screen coordinates."""

from __future__ import annotations

import random

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 5
SHUFFLE_MOVES = 1000

# Offsets of the empty cell for each random shuffle direction: left, right, up, down.
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class InvalidMoveError(ValueError):
    """Raised when a tile that cannot slide is asked to move."""


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class Board:
    """A square sliding puzzle; the empty cell holds 0."""

    def __init__(self, size: int = MIN_BOARD_SIZE) -> None:
        if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            raise ValueError(
                f"board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}"
            )
        self.size = size
        self._cells: list[list[int]] = []
        self.empty: tuple[int, int] = (size - 1, size - 1)
        self.reset()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def tile(self, x: int, y: int) -> int:
        """Return the value at column x, row y."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.size}x{self.size} board")
        return self._cells[y][x]

    def reset(self) -> None:
        """Put every tile back in solved order with the empty cell last."""
        n = self.size
        values = list(range(1, n * n)) + [0]
        self._cells = [values[row * n:(row + 1) * n] for row in range(n)]
        self.empty = (n - 1, n - 1)

    def shuffle(self, moves: int = SHUFFLE_MOVES, rng: random.Random | None = None) -> None:
        """Scramble by walking the empty cell in random directions."""
        rng = rng if rng is not None else random.Random()
        ex, ey = self.empty
        for _ in range(moves):
            dx, dy = _DIRECTIONS[rng.randrange(4)]
            nx, ny = ex + dx, ey + dy
            if self._in_bounds(nx, ny):
                self._cells[ey][ex] = self._cells[ny][nx]
                self._cells[ny][nx] = 0
                ex, ey = nx, ny
        self.empty = (ex, ey)

    def is_valid_move(self, x: int, y: int) -> bool:
        """Whether the tile at (x, y) is next to the empty cell."""
        if not self._in_bounds(x, y) or self._cells[y][x] == 0:
            return False
        ex, ey = self.empty
        return abs(x - ex) + abs(y - ey) == 1

    def move(self, x: int, y: int) -> int:
        """Slide the tile at (x, y) into the empty cell and return its value."""
        if not self.is_valid_move(x, y):
            raise InvalidMoveError(f"tile at ({x}, {y}) cannot move")
        ex, ey = self.empty
        value = self._cells[y][x]
        self._cells[ey][ex] = value
        self._cells[y][x] = 0
        self.empty = (x, y)
        return value

    def is_solved(self) -> bool:
        """Whether tiles read 1..n*n-1 row by row with the empty cell last."""
        n = self.size
        flat = [value for row in self._cells for value in row]
        return flat == list(range(1, n * n)) + [0]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Return the board as a tuple of rows, top to bottom."""
        return tuple(tuple(row) for row in self._cells)


def tile_size(board_size: int) -> int:
    """Pixel size of one tile for a board of the given size."""
    game_area = min(WINDOW_WIDTH, WINDOW_HEIGHT) - 100
    return game_area // board_size


def _offsets(board_size: int) -> tuple[int, int]:
    span = tile_size(board_size) * board_size
    return (WINDOW_WIDTH - span) // 2, (WINDOW_HEIGHT - span) // 2


def screen_to_board(screen_x: int, screen_y: int, board_size: int) -> tuple[int, int]:
    """Map a window pixel to a board cell (which may lie outside the board)."""
    size = tile_size(board_size)
    off_x, off_y = _offsets(board_size)
    return _trunc_div(screen_x - off_x, size), _trunc_div(screen_y - off_y, size)


def board_to_screen(board_x: int, board_y: int, board_size: int) -> tuple[int, int]:
    """Top-left window pixel of a board cell."""
    size = tile_size(board_size)
    off_x, off_y = _offsets(board_size)
    return off_x + board_x * size, off_y + board_y * size