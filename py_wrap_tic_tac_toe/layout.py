"""Pixel <-> board coordinate mapping.

The board is drawn inside a square ("drawable square") whose side is 5/8 of
the canvas width, centered on the canvas. Cell indices are ``(i, j)`` =
``(column, row)``, both 0-based.
"""

from dataclasses import dataclass
from typing import Final, TypeAlias

from py_wrap_tic_tac_toe.board import BOARD_SIZE, Cell

SCREEN_SIZE: Final = (800.0, 600.0)
X_PIECE_INSET: Final = 0.70

Point: TypeAlias = tuple[float, float]


@dataclass(frozen=True, slots=True)
class ScreenLayout:
    width: float = SCREEN_SIZE[0]
    height: float = SCREEN_SIZE[1]

    @property
    def size(self) -> tuple[int, int]:
        return int(self.width), int(self.height)

    @property
    def drawable_size(self) -> float:
        return self.width / 8.0 * 5.0

    @property
    def margin(self) -> Point:
        return (self.width - self.drawable_size) / 2.0, (self.height - self.drawable_size) / 2.0

    @property
    def cell_size(self) -> Point:
        margin_x, margin_y = self.margin
        return (self.width - margin_x * 2.0) / BOARD_SIZE, (self.height - margin_y * 2.0) / BOARD_SIZE

    @property
    def columns(self) -> tuple[float, float]:
        """X positions of the two vertical gridlines."""
        margin_x, _ = self.margin
        cell_w, _ = self.cell_size
        return margin_x + cell_w, margin_x + cell_w * 2.0

    @property
    def rows(self) -> tuple[float, float]:
        """Y positions of the two horizontal gridlines."""
        _, margin_y = self.margin
        _, cell_h = self.cell_size
        return margin_y + cell_h, margin_y + cell_h * 2.0

    @property
    def x_piece_offset(self) -> Point:
        cell_w, cell_h = self.cell_size
        return cell_w / 2.0 * X_PIECE_INSET, cell_h / 2.0 * X_PIECE_INSET

    def screen_to_board(self, x: float, y: float) -> Cell | None:
        margin_x, margin_y = self.margin
        if x < margin_x or x > self.width - margin_x:
            return None
        if y < margin_y or y > self.height - margin_y:
            return None

        cell_w, cell_h = self.cell_size
        # The far edge itself belongs to the last cell.
        i = min(int((x - margin_x) / cell_w), BOARD_SIZE - 1)
        j = min(int((y - margin_y) / cell_h), BOARD_SIZE - 1)
        return i, j

    def board_to_pixel_center(self, i: int, j: int) -> Point:
        margin_x, margin_y = self.margin
        cell_w, cell_h = self.cell_size
        return margin_x + cell_w * (i + 0.5), margin_y + cell_h * (j + 0.5)

    def x_stroke(self, i: int, j: int, *, left: bool) -> tuple[Point, Point]:
        """One of the two diagonal strokes of an X glyph in cell ``(i, j)``.

        The left stroke runs from the top-left to the bottom-right of the glyph,
        the right one from the top-right to the bottom-left.
        """
        center_x, center_y = self.board_to_pixel_center(i, j)
        offset_x, offset_y = self.x_piece_offset
        sign = -1.0 if left else 1.0
        return (
            (center_x + sign * offset_x, center_y - offset_y),
            (center_x - sign * offset_x, center_y + offset_y),
        )

    @property
    def gridlines(self) -> list[tuple[Point, Point]]:
        """The two horizontal then the two vertical background lines."""
        margin_x, margin_y = self.margin
        lines = [((margin_x, row), (self.width - margin_x, row)) for row in self.rows]
        lines.extend(((col, margin_y), (col, self.height - margin_y)) for col in self.columns)
        return lines
