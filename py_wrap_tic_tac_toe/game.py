import logging
from enum import Enum
from typing import Final

from py_wrap_tic_tac_toe.board import Board, Piece
from py_wrap_tic_tac_toe.layout import ScreenLayout
from py_wrap_tic_tac_toe.win_detector import Winner, find_winner

_LOG = logging.getLogger(__name__)

WIN_MESSAGES: Final = {
    Piece.X: "X rides high above the clouds",
    Piece.O: "O expands its kingdom beyond the horizon",
}


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"


class Game:
    def __init__(self, layout: ScreenLayout | None = None) -> None:
        self._layout = layout or ScreenLayout()
        self._board = Board()
        self._current_turn = Piece.X
        self._winner: Winner | None = None
        self._message: str | None = None
        self._move_count = 0

    @property
    def layout(self) -> ScreenLayout:
        return self._layout

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_turn(self) -> Piece:
        return self._current_turn

    @property
    def winner(self) -> Winner | None:
        return self._winner

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def state(self) -> GameState:
        return GameState.WON if self._winner is not None else GameState.IN_PROGRESS

    def is_draw(self) -> bool:
        return self._winner is None and self._board.is_full()

    def handle_click(self, x: float, y: float) -> bool:
        """Place the current piece under pixel ``(x, y)``.

        Clicks after a win, outside the board or on an occupied cell are ignored.
        Returns whether a piece was placed.
        """
        if self.state is GameState.WON:
            _LOG.debug("Click at (%s, %s) ignored, game is over", x, y)
            return False

        cell = self._layout.screen_to_board(x, y)
        if cell is None:
            _LOG.debug("Click at (%s, %s) is outside the board", x, y)
            return False

        return self.place(*cell)

    def place(self, i: int, j: int) -> bool:
        if self.state is GameState.WON:
            return False

        if not self._board.is_empty(i, j):
            _LOG.debug("Cell (%d, %d) already holds %s", i, j, self._board.get(i, j))
            return False

        piece = self._current_turn
        self._board.place(i, j, piece)
        self._move_count += 1
        _LOG.debug("%s placed at (%d, %d)", piece.value, i, j)

        winner = find_winner(self._board, i, j)
        if winner is not None:
            self._winner = winner
            self._message = WIN_MESSAGES[winner.piece]
            _LOG.info("%s wins from %s to %s", winner.piece.value, winner.start, winner.end)
            return True

        self._current_turn = piece.other
        return True
