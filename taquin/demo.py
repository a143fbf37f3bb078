"""Console version of the sliding puzzle, played by typing coordinates."""

from __future__ import annotations

import argparse
import enum
import random
import re
import sys
from typing import TextIO

from .board import Board, InvalidMoveError

DEMO_SHUFFLE_MOVES = 100

_INT_PREFIX = re.compile(r"[+-]?\d+")

_INTRO = (
    "=== TAQUIN ENHANCED - DEMO VERSION ===\n"
    "This demonstrates the improved game logic and structure.\n"
    "The full version with SDL2 graphics includes:\n"
    "- Smooth animations\n"
    "- Professional graphics\n"
    "- Mouse controls\n"
    "- Sound effects (planned)\n"
    "- Best score tracking\n"
    "- Cross-platform support\n\n"
)

_MENU = (
    "\n=== TAQUIN - Enhanced Sliding Puzzle Demo ===\n"
    "This demo shows the enhanced game structure.\n"
    "For the full graphical version, set up SDL2 and compile main.c\n\n"
    "Select difficulty:\n"
    "  3 - Easy (3x3 grid)\n"
    "  4 - Medium (4x4 grid)\n"
    "  5 - Hard (5x5 grid)\n"
    "  q - Quit\n"
    "\nChoice: "
)


class _State(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    WIN = enum.auto()


class _Scanner:
    """Reads characters, words and integers from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def char(self) -> str:
        """Next non-blank character."""
        self._skip_space()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def word(self) -> str:
        """Next run of non-blank characters."""
        self._skip_space()
        parts = self._buffer.split(maxsplit=1)
        token = parts[0]
        self._buffer = self._buffer[len(token):]
        return token

    def integer(self) -> int | None:
        """Next integer, or None (consuming nothing further) if none follows."""
        self._skip_space()
        match = _INT_PREFIX.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())


def format_board(board: Board) -> str:
    """Render the board as text, one row per line, blank for the empty cell."""
    lines = [
        "  " + "".join("   " if value == 0 else f"{value:2d} " for value in row)
        for row in board.rows()
    ]
    return "\n" + "".join(line + "\n" for line in lines) + "\n"


def run(
    input_stream: TextIO,
    output: TextIO,
    rng: random.Random | None = None,
) -> int:
    """Play the console game until the player quits or input runs out."""
    rng = rng if rng is not None else random.Random()
    scanner = _Scanner(input_stream)
    state = _State.MENU
    board = Board()
    moves = 0

    def write(text: str) -> None:
        output.write(text)
        output.flush()

    def start(size: int) -> Board:
        new_board = Board(size)
        new_board.shuffle(DEMO_SHUFFLE_MOVES, rng)
        return new_board

    write(_INTRO)
    try:
        while True:
            if state is _State.MENU:
                write(_MENU)
                choice = scanner.char()
                if choice in "345":
                    board = start(int(choice))
                    moves = 0
                    state = _State.PLAYING
                elif choice in "qQ":
                    write("Thanks for trying the Taquin demo!\n")
                    return 0
                else:
                    write("Invalid choice. Please try again.\n")

            elif state is _State.PLAYING:
                write(format_board(board))
                write(f"Moves: {moves}\n")
                if board.is_solved():
                    state = _State.WIN
                    continue
                write("Enter move (x y) or 'm' for menu, 'r' to reset: ")
                token = scanner.word()
                if token.startswith("m"):
                    state = _State.MENU
                elif token.startswith("r"):
                    board.shuffle(DEMO_SHUFFLE_MOVES, rng)
                    moves = 0
                else:
                    match = _INT_PREFIX.match(token)
                    if match is None:
                        continue
                    x = int(match.group())
                    write("Enter y coordinate: ")
                    y = scanner.integer()
                    try:
                        if y is None:
                            raise InvalidMoveError("missing y coordinate")
                        board.move(x, y)
                    except InvalidMoveError:
                        write("Invalid move. Try again.\n")
                    else:
                        moves += 1
                        write("Move successful!\n")

            else:
                write("\n🎉 CONGRATULATIONS! 🎉\n")
                write(f"You solved the puzzle in {moves} moves!\n")
                write(format_board(board))
                write("Press 'm' for menu or 'q' to quit: ")
                choice = scanner.char()
                if choice == "m":
                    state = _State.MENU
                else:
                    write("Thanks for playing!\n")
                    return 0
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point for the console game."""
    parser = argparse.ArgumentParser(
        prog="taquin-demo", description="Play the sliding puzzle in the console."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)