# binairo

A Binairo puzzle game. Binairo is played on a square grid that is filled with
the symbols `0` and `1`:

* no row or column may hold three equal symbols next to each other;
* no row or column may hold more than three of either symbol.

The game is won when every cell of the board is filled.

## Installing

```
pip install .
```

The desktop window uses `tkinter`, which ships with most Python installations.
The package has no other dependencies.

## Playing

```
binairo
```

A dialog asks for the board size and the way the board is started:

* **Random** – enter a seed value; the board is filled pseudo-randomly from it,
  so the same seed and size always give the same board. Some seeds are known
  to give unsolvable boards and are refused.
* **Input** – enter the board contents as one line enclosed in double quotes,
  row after row, using `0`, `1` and a space for an empty cell. For a 6 × 6
  board the line holds 36 characters between the quotes.
* **File** – type any name in the input field (it must not be empty); a line
  is then picked at random from `Default_inputs.txt` in the current directory.
  The size field is not used: the board size follows from the length of the
  chosen line.

The size must be at least 2 for the Random and Input methods. If the start
fails, an error is shown and the dialog is asked again; cancelling it ends the
program.

Cells given at the start are fixed. Choose the symbol to place with the `0` /
`1` buttons at the top, then click an empty cell. A move that breaks a rule is
refused with a warning. The top bar shows a score and the seconds played.
**Pause** stops the clock and locks the board, the symbol buttons and
**Reset** until it is pressed again; **Reset** starts a new game. The window
turns green and a message is shown when you win.

## Using the engine from Python

The rules live in `binairo.board` and do not need a window:

```python
from binairo.board import GameBoard, BoardError

board = GameBoard(4)
board.fill_from_input('"0  1  1 1    0  "')
board.add_symbol(1, 0, "1")      # x (column), y (row), zero-based
print(board.render())
print(board.is_game_over())
```

`GameBoard(size)` starts empty (the default size is 6); `board[row, col]`
returns an `Element` (`ZERO`, `ONE` or `EMPTY`), and `reset(size)` empties the
board. `fill_randomly(seed)`, `fill_from_input(text)` and
`add_symbol(x, y, symbol)` raise `BoardError` when the request cannot be
carried out; a refused fill or move leaves the board as it was.

`binairo.play` works with text as a player would type it:

* `play_move(board, x_text, y_text, symbol)` places a symbol at one-based
  column and row and returns `True` when the board is full. It raises
  `QuitGame` (x starts with `q` or `Q`), `OutOfBoard`, `InvalidInput` or
  `CantAdd`, all subclasses of `MoveError`.
* `start_board(method, size, value, chooser=None)` sets up a filled board by a
  `StartMethod` (`RANDOM`, `INPUT` or `FILE`) and raises `StartError` with a
  message for the player when it cannot.
* `load_inputs(path)` reads board lines from a file.

`binairo.rng` holds the deterministic generator used for random boards, and
`binairo.app.Stopwatch` the pausable clock of the window.

## What it does not do

There is no terminal mode: the `binairo` command always opens a window.
Playing without a window is done from Python through `binairo.board` and
`binairo.play`. Scores and times are not stored anywhere.

## Running the tests

```
pip install .[test]
pytest
```