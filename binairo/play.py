"""Moves and game set-up on a Binairo board."""

from __future__ import annotations

import math
import random
import re
from enum import Enum
from pathlib import Path
from typing import Callable, Sequence

from .board import BoardError, GameBoard

QUIT = "Quitting ..."
OUT_OF_BOARD = "Out of board"
INVALID_INPUT = "Invalid input"
CANT_ADD = "Can't add"
WIN = "You won!"

DEFAULT_INPUTS_FILE = "Default_inputs.txt"

_DIGITS = frozenset("0123456789")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class MoveError(Exception):
    """Raised when a move cannot be made."""


class QuitGame(MoveError):
    """Raised when the player asks to quit."""

    def __init__(self) -> None:
        super().__init__(QUIT)


class OutOfBoard(MoveError):
    """Raised when the coordinates fall outside the board."""

    def __init__(self) -> None:
        super().__init__(OUT_OF_BOARD)


class InvalidInput(MoveError):
    """Raised when the fill symbol is not a single '0' or '1'."""

    def __init__(self) -> None:
        super().__init__(INVALID_INPUT)


class CantAdd(MoveError):
    """Raised when the rules forbid the symbol at the position."""

    def __init__(self) -> None:
        super().__init__(CANT_ADD)


class StartMethod(Enum):
    """Ways of filling a new board."""

    RANDOM = "random"
    INPUT = "input"
    FILE = "file"


class StartError(Exception):
    """Raised when a new board cannot be set up."""


def parse_number(text: str) -> int:
    """Return the number in a string of digits, or 0 if it holds anything else.

    An empty string holds no number at all and raises ValueError.
    """
    if not text:
        raise ValueError("no digits to convert")
    if all(char in _DIGITS for char in text):
        return int(text)
    return 0


def find_fill_symbol(text: str) -> str | None:
    """Return the symbol if text is exactly one '0' or '1' apart from whitespace."""
    symbol = "".join(text.split())
    return symbol if symbol in ("0", "1") else None


def _coordinate(text: str) -> int:
    try:
        return parse_number(text)
    except ValueError:
        return 0


def play_move(board: GameBoard, x_text: str, y_text: str, symbol: int | str) -> bool:
    """Place the symbol at one-based column x_text, row y_text.

    Returns True when the move fills the board.
    """
    if x_text[:1] in ("q", "Q"):
        raise QuitGame()

    x = _coordinate(x_text)
    y = _coordinate(y_text)
    if not (1 <= x <= board.size and 1 <= y <= board.size):
        raise OutOfBoard()

    fill = find_fill_symbol(str(symbol))
    if fill is None:
        raise InvalidInput()

    try:
        board.add_symbol(x - 1, y - 1, fill)
    except BoardError:
        raise CantAdd() from None
    return board.is_game_over()


def load_inputs(path: str | Path) -> list[str]:
    """Read the board descriptions in a file, one per line."""
    try:
        with open(path, encoding="utf-8") as stream:
            return [line.rstrip("\r\n") for line in stream]
    except OSError as error:
        raise StartError("File not found/Missing file. Please try again.") from error


def _to_int(text: str) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if _INT32_MIN <= value <= _INT32_MAX else 0


def _from_file(chooser: Callable[[Sequence[str]], str]) -> GameBoard:
    inputs = load_inputs(DEFAULT_INPUTS_FILE)
    if not inputs:
        raise StartError("File has no board. Please try again.")
    line = chooser(inputs)
    if len(line) < 3:
        raise StartError('Invalid file. Please try again.\n Ensure input is enclosed with "')
    board = GameBoard(math.isqrt(len(line) - 2))
    try:
        board.fill_from_input(line)
    except BoardError:
        raise StartError(
            'Invalid file. Please try again.\n Ensure input is enclosed with "'
        ) from None
    return board


def start_board(
    method: StartMethod,
    size: int,
    value: str,
    chooser: Callable[[Sequence[str]], str] | None = None,
) -> GameBoard:
    """Set up a filled board of the given size by the chosen method.

    For RANDOM the value is the seed, for INPUT the quoted board and for FILE
    any non-empty name; the board is then picked from the default inputs file
    with chooser, which defaults to a random choice.
    """
    method = StartMethod(method)
    if size < 2 and method is not StartMethod.FILE:
        raise StartError("Size too small. Please try again.")

    if method is StartMethod.RANDOM:
        if value == "":
            raise StartError("Missing seed value. Please try again.")
        board = GameBoard(size)
        try:
            board.fill_randomly(_to_int(value))
        except BoardError:
            raise StartError("Invalid seed value. Please try again.") from None
        return board

    if method is StartMethod.INPUT:
        board = GameBoard(size)
        try:
            board.fill_from_input(value)
        except BoardError:
            raise StartError(
                'Invalid Input. Please try again.\n Ensure input is enclosed with "'
            ) from None
        return board

    if value == "":
        raise StartError(
            "Missing file name. Ensure file is placed in build dir then try again."
        )
    return _from_file(chooser or random.choice)