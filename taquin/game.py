"""Game state: menus, moves, timer, animation and best scores."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from .board import MIN_BOARD_SIZE, Board, screen_to_board

ANIMATION_SPEED = 8


class GameState(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    WIN = enum.auto()
    SETTINGS = enum.auto()


@dataclass
class Stats:
    """Counters for the current game and best results per board size."""

    moves: int = 0
    time_seconds: int = 0
    best_moves: dict[int, int] = field(default_factory=dict)
    best_time: dict[int, int] = field(default_factory=dict)

    def record_best(self, board_size: int) -> None:
        """Keep the current moves and time if they beat the best for this size."""
        best = self.best_moves.get(board_size)
        if best is None or self.moves < best:
            self.best_moves[board_size] = self.moves
        best = self.best_time.get(board_size)
        if best is None or self.time_seconds < best:
            self.best_time[board_size] = self.time_seconds


@dataclass
class Animation:
    """A tile sliding from one cell to another; progress runs 0 to 100."""

    active: bool = False
    progress: int = 0
    start: tuple[int, int] = (0, 0)
    end: tuple[int, int] = (0, 0)
    tile: int = 0

    def update(self) -> None:
        """Advance one frame, finishing once progress reaches 100."""
        if not self.active:
            return
        self.progress += ANIMATION_SPEED
        if self.progress >= 100:
            self.active = False
            self.progress = 0


class Game:
    """The whole game: current board, state, statistics and animation."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.board = Board(MIN_BOARD_SIZE)
        self.stats = Stats()
        self.animation = Animation()
        self.running = True
        self._timer_ms = 0

    def reset(self, size: int) -> None:
        """Start a freshly shuffled game on a board of the given size."""
        self.board = Board(size)
        self.stats.moves = 0
        self.stats.time_seconds = 0
        self.board.shuffle(rng=self._rng)
        self.state = GameState.PLAYING

    def new_shuffle(self) -> None:
        """Shuffle the current board again and clear the move counter."""
        self.board.shuffle(rng=self._rng)
        self.stats.moves = 0

    def click(self, screen_x: int, screen_y: int) -> bool:
        """Handle a left click; return whether a tile moved."""
        if self.state is not GameState.PLAYING or self.animation.active:
            return False
        x, y = screen_to_board(screen_x, screen_y, self.board.size)
        if not self.board.is_valid_move(x, y):
            return False
        self.animation = Animation(
            active=True, start=(x, y), end=self.board.empty, tile=self.board.tile(x, y)
        )
        self.board.move(x, y)
        self.stats.moves += 1
        if self.board.is_solved():
            self.state = GameState.WIN
            self.stats.record_best(self.board.size)
        return True

    def menu_key(self, key: str) -> None:
        """Menu keys: 3, 4 or 5 start a game; escape or q quits."""
        key = key.lower()
        if key in ("3", "4", "5"):
            self.reset(int(key))
        elif key in ("escape", "q"):
            self.running = False

    def play_key(self, key: str) -> None:
        """In-game keys: escape to menu, r to restart, n to reshuffle."""
        key = key.lower()
        if key == "escape":
            self.state = GameState.MENU
        elif key == "r":
            self.reset(self.board.size)
        elif key == "n":
            self.new_shuffle()

    def win_key(self, key: str) -> None:
        """Win screen keys: space or return to menu, r to play again."""
        key = key.lower()
        if key in ("space", "return"):
            self.state = GameState.MENU
        elif key == "r":
            self.reset(self.board.size)

    def tick(self, delta_ms: int) -> None:
        """Advance animation and the game clock while playing."""
        if self.state is not GameState.PLAYING:
            return
        self.animation.update()
        self._timer_ms += delta_ms
        if self._timer_ms >= 1000:
            self.stats.time_seconds += 1
            self._timer_ms = 0