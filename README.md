# taquin

Taquin is the classic sliding puzzle. Numbered tiles sit on a square grid with
one empty cell. You slide tiles into that cell until the numbers are in order,
left to right and top to bottom, with the empty cell in the bottom-right corner.
You can play on a 3x3, 4x4 or 5x5 grid.

## Installation

```
pip install .
```

This also installs `pygame`, which the graphical game needs.

## Playing

### Graphical game

```
taquin
taquin --images path/to/images
```

The window is 800x600. `--images` names the folder of pictures to use. The
default is `images` in the current directory. Tile pictures are read from
`numbers/N1.bmp` to `numbers/N24.bmp`. Screen pictures are read from
`inteface/1.bmp` to `inteface/5.bmp`: picture 1 fills the menu screen and
picture 5 fills the win screen.

If a tile picture cannot be loaded, a message goes to standard error and that
tile is drawn as a plain blue square. If a screen picture is missing, that
screen is left blank.

On the menu:

- `3`, `4` or `5` starts a shuffled game of that size.
- `Esc` or `Q` quits.

During a game:

- Left-click a tile next to the empty cell to slide it. Clicks are ignored
  while the last slide is still animating.
- `R` deals a new game of the same size.
- `N` reshuffles the current board and sets the move count back to zero.
- `Esc` goes back to the menu.

After you solve the puzzle, `Space` or `Enter` returns to the menu and `R`
starts another game of the same size.

### Console version

```
taquin-demo
```

At the menu, type `3`, `4` or `5` to pick a size, or `q` to quit. The board is
shuffled with 100 random slides of the empty cell.

To make a move, type the tile's column (x). The game then asks for its row (y).
Columns and rows are counted from 0. Type `r` to reshuffle the board and set
the move count to zero, or `m` to go back to the menu. Once the puzzle is
solved, `m` returns to the menu and any other key quits. The game also stops
when input runs out.

## Using the library

The game logic works without a display:

```python
import random

from taquin.board import Board, InvalidMoveError

board = Board(4)                      # sizes 3 to 5; anything else raises ValueError
board.shuffle(1000, random.Random(42))
print(board.is_solved())
for row in board.rows():
    print(row)

x, y = board.empty
try:
    board.move(x - 1, y)              # slide the tile to the left of the empty cell
except InvalidMoveError:
    pass                              # raised if no tile is there
```

`taquin.board` also converts between window pixels and board cells:
`tile_size`, `screen_to_board` and `board_to_screen`.

`taquin.game.Game` holds the state (`GameState.MENU`, `PLAYING` or `WIN`), the
current `Board`, the statistics in `Stats` and the slide in `Animation`. You
drive it with `click(screen_x, screen_y)`, `menu_key`, `play_key`, `win_key`
(key names such as `"3"`, `"r"`, `"escape"`, `"space"`, `"return"`) and
`tick(delta_ms)`. `tick` advances the animation and counts seconds of play.
When a game is won, `Stats.best_moves` and `Stats.best_time` keep the lowest
move count and time for each board size.

`taquin.app.Renderer` draws a `Game` onto any pygame surface.

## What it does not do

- Best moves and best times are kept only while the program runs. They are
  never saved to disk.
- The graphical game counts moves and time, but it does not show them on
  screen.
- The menu and win screens show only their pictures. There are no text or
  buttons on them.
- `GameState.PAUSED` and `GameState.SETTINGS` exist, but nothing enters them.
  There is no pause and no settings screen.

## Running the tests

```
pip install .[test]
pytest
```