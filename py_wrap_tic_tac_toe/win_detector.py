from dataclasses import dataclass

from py_wrap_tic_tac_toe.board import BOARD_SIZE, Board, Cell, Piece
from py_wrap_tic_tac_toe.exception import LogicError


@dataclass(frozen=True, slots=True)
class Winner:
    piece: Piece
    start: Cell
    end: Cell


def find_winner(board: Board, i: int, j: int) -> Winner | None:
    """Check the lines through the piece just played at ``(i, j)``.

    Rows and columns wrap around, so the neighbours of index 0 are 2 and 1.
    The line endpoints are the smallest and largest index involved, not the
    geometric ends of the wrapped line. Both diagonals are always checked on
    their fixed cells, whether or not ``(i, j)`` lies on them.
    Lines are tried in order row, column, left diagonal, right diagonal and
    the first match is returned.
    """
    piece = board.get(i, j)
    if piece is None:
        msg = f"No piece at ({i}, {j}) to check for a win."
        raise LogicError(msg)

    left, right = (i - 1) % BOARD_SIZE, (i + 1) % BOARD_SIZE
    if board.get(left, j) == piece and board.get(right, j) == piece:
        involved = (left, i, right)
        return Winner(piece, (min(involved), j), (max(involved), j))

    up, down = (j - 1) % BOARD_SIZE, (j + 1) % BOARD_SIZE
    if board.get(i, up) == piece and board.get(i, down) == piece:
        involved = (up, j, down)
        return Winner(piece, (i, min(involved)), (i, max(involved)))

    center = board.get(1, 1)
    if center == piece and board.get(0, 0) == piece and board.get(2, 2) == piece:
        return Winner(piece, (0, 0), (2, 2))

    if center == piece and board.get(2, 0) == piece and board.get(0, 2) == piece:
        return Winner(piece, (0, 2), (2, 0))

    return None
