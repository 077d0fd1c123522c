from dataclasses import dataclass, field
from typing import Final, TypeAlias

from py_wrap_tic_tac_toe.board import Piece
from py_wrap_tic_tac_toe.game import Game
from py_wrap_tic_tac_toe.layout import Point

LINE_WIDTH: Final = 4.0
O_PIECE_RADIUS: Final = 60.0
HIGHLIGHT_WIDTH: Final = 12.0


@dataclass(frozen=True, slots=True)
class LineSegment:
    start: Point
    end: Point
    width: float = LINE_WIDTH


@dataclass(frozen=True, slots=True)
class CircleOutline:
    center: Point
    radius: float = O_PIECE_RADIUS
    width: float = LINE_WIDTH


Primitive: TypeAlias = LineSegment | CircleOutline


@dataclass(frozen=True, slots=True)
class Scene:
    board_lines: list[Primitive] = field(default_factory=list)
    highlight: LineSegment | None = None
    message: str | None = None

    @property
    def primitives(self) -> list[Primitive]:
        """Everything to draw, in draw order."""
        if self.highlight is None:
            return list(self.board_lines)
        return [*self.board_lines, self.highlight]


def build_scene(game: Game) -> Scene:
    """Describe what the current game looks like. Does not touch the game."""
    layout = game.layout
    primitives: list[Primitive] = [LineSegment(start, end) for start, end in layout.gridlines]

    for i, j, piece in game.board.occupied():
        if piece is Piece.X:
            primitives.append(LineSegment(*layout.x_stroke(i, j, left=True)))
            primitives.append(LineSegment(*layout.x_stroke(i, j, left=False)))
        else:
            primitives.append(CircleOutline(layout.board_to_pixel_center(i, j)))

    highlight = None
    if game.winner is not None:
        highlight = LineSegment(
            layout.board_to_pixel_center(*game.winner.start),
            layout.board_to_pixel_center(*game.winner.end),
            HIGHLIGHT_WIDTH,
        )

    return Scene(primitives, highlight, game.message)
