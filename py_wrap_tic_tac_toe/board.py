from collections.abc import Iterator
from enum import Enum
from typing import Final, TypeAlias

BOARD_SIZE: Final = 3


class Piece(Enum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> "Piece":
        return Piece.O if self is Piece.X else Piece.X


Cell: TypeAlias = tuple[int, int]


class Board:
    """Fixed 3x3 grid, stored column-major: ``cells[i][j]`` is column ``i``, row ``j``.

    ``place`` does not check that the cell is empty.
    """

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def cells(self) -> tuple[tuple[Piece | None, ...], ...]:
        return tuple(tuple(column) for column in self._cells)

    def get(self, i: int, j: int) -> Piece | None:
        self._check_bounds(i, j)
        return self._cells[i][j]

    def place(self, i: int, j: int, piece: Piece) -> None:
        self._check_bounds(i, j)
        self._cells[i][j] = piece

    def is_empty(self, i: int, j: int) -> bool:
        return self.get(i, j) is None

    def occupied(self) -> Iterator[tuple[int, int, Piece]]:
        for i, column in enumerate(self._cells):
            for j, piece in enumerate(column):
                if piece is not None:
                    yield i, j, piece

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in column) for column in self._cells)

    @staticmethod
    def _check_bounds(i: int, j: int) -> None:
        if not (0 <= i < BOARD_SIZE) or not (0 <= j < BOARD_SIZE):
            raise IndexError("Cell out of bounds.")
