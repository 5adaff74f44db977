"""The Binairo game board and its rules."""

from __future__ import annotations

from enum import Enum

from .rng import MinStdRand0, uniform_int

NUMBER_OF_SYMBOLS = 3
DISTR_UPPER_BOUND = 7
LEFT_COLUMN_WIDTH = 5
BAD_SEEDS = frozenset(
    {2, 8, 12, 13, 16, 20, 21, 23, 26, 29, 31, 32, 34, 41, 42, 43, 44, 46}
)


class Element(Enum):
    """Content of one cell of the board."""

    ZERO = "0"
    ONE = "1"
    EMPTY = " "


class BoardError(Exception):
    """Raised when a board cannot be filled or a symbol cannot be placed."""


class GameBoard:
    """A square Binairo board."""

    def __init__(self, size: int = 2 * NUMBER_OF_SYMBOLS) -> None:
        self.reset(size)

    def reset(self, size: int | None = None) -> None:
        """Empty the board, optionally changing its size."""
        if size is not None:
            if size < 1:
                raise ValueError(f"board size must be positive, got {size}")
            self.size = size
        self._grid = [[Element.EMPTY] * self.size for _ in range(self.size)]

    def __getitem__(self, position: tuple[int, int]) -> Element:
        row, col = position
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"position {position} is outside the board")
        return self._grid[row][col]

    @property
    def rows(self) -> tuple[tuple[Element, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def fill_randomly(self, seed: int) -> None:
        """Fill the board with random symbols generated from the seed."""
        seed %= 2**32
        if seed in BAD_SEEDS:
            raise BoardError("Bad seed")
        engine = MinStdRand0(seed)
        symbols = {0: "0", 1: "1"}
        text = "".join(
            symbols.get(uniform_int(engine, 0, DISTR_UPPER_BOUND), " ")
            for _ in range(self.size * self.size)
        )
        self.fill_from_input(f'"{text}"')

    def fill_from_input(self, text: str) -> None:
        """Fill the board from a quoted string of '0', '1' and ' ' characters."""
        cells = self.size * self.size
        if len(text) != cells + 2:
            raise BoardError("Wrong size of input")
        body = text[1 : cells + 1]
        try:
            elements = [Element(char) for char in body]
        except ValueError:
            raise BoardError("Wrong character") from None
        previous = self._grid
        self._grid = [
            elements[start : start + self.size] for start in range(0, cells, self.size)
        ]
        if not (self.ok_adjacent_symbols() and self.ok_amount_of_symbols()):
            self._grid = previous
            raise BoardError("Bad input")

    def _columns(self) -> list[tuple[Element, ...]]:
        return list(zip(*self._grid))

    def _lines(self):
        yield from self._grid
        yield from self._columns()

    def ok_adjacent_symbols(self) -> bool:
        """True if no row or column has three equal symbols in a row."""
        for line in self._lines():
            for a, b, c in zip(line, line[1:], line[2:]):
                if a is b is c and a is not Element.EMPTY:
                    return False
        return True

    def ok_amount_of_symbols(self) -> bool:
        """True if no row or column holds too many of either symbol."""
        return all(
            line.count(symbol) <= NUMBER_OF_SYMBOLS
            for line in self._lines()
            for symbol in (Element.ZERO, Element.ONE)
        )

    def add_symbol(self, x: int, y: int, symbol: str | Element) -> None:
        """Place a symbol at column x, row y (zero-based) if the rules allow it."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"position ({x}, {y}) is outside the board")
        if self._grid[y][x] is not Element.EMPTY:
            raise BoardError("Cell is not empty")
        try:
            element = Element(symbol)
        except ValueError:
            raise BoardError(f"Invalid symbol {symbol!r}") from None
        if element is Element.EMPTY:
            raise BoardError(f"Invalid symbol {symbol!r}")
        self._grid[y][x] = element
        if not (self.ok_adjacent_symbols() and self.ok_amount_of_symbols()):
            self._grid[y][x] = Element.EMPTY
            raise BoardError("Can't add")

    def is_game_over(self) -> bool:
        """True when no empty cells remain."""
        return all(cell is not Element.EMPTY for row in self._grid for cell in row)

    def render(self) -> str:
        """Return a text picture of the board."""
        width = LEFT_COLUMN_WIDTH + 1 + 2 * self.size + 1
        lines = ["=" * width]
        lines.append("|   | " + "".join(f"{i} " for i in range(1, self.size + 1)) + "|")
        lines.append("-" * width)
        for number, row in enumerate(self._grid, start=1):
            lines.append(
                f"| {number} | " + "".join(f"{cell.value} " for cell in row) + "|"
            )
        lines.append("=" * width)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()