"""The 8x8 board and which piece stands on each cell."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pixelchess.definitions import ColRow
from pixelchess.piece import Piece

BOARD_SIZE = 8
TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE


class Board:
    """Cells indexed row by row; each holds a piece or None."""

    def __init__(self) -> None:
        self._cells: List[Optional[Piece]] = [None] * TOTAL_CELLS

    def clear(self) -> None:
        """Empty every cell."""
        self._cells = [None] * TOTAL_CELLS

    def from_col_row_to_index(self, col_row: ColRow) -> int:
        return col_row.y * BOARD_SIZE + col_row.x

    def from_index_to_col_row(self, index: int) -> ColRow:
        return ColRow(index % BOARD_SIZE, index // BOARD_SIZE)

    def is_inside_bounds(self, col_row: ColRow) -> bool:
        return 0 <= col_row.x < BOARD_SIZE and 0 <= col_row.y < BOARD_SIZE

    def _index(self, col_row: ColRow) -> int:
        if not self.is_inside_bounds(col_row):
            raise IndexError(f"cell [{col_row.x}, {col_row.y}] is outside the board")
        return self.from_col_row_to_index(col_row)

    def move_to(self, piece: Piece, destination: ColRow) -> None:
        """Place a piece on a cell, taking whatever stood there off the board."""
        destination_index = self._index(destination)
        if piece.position is not None:
            self._cells[self._index(piece.position)] = None

        occupant = self._cells[destination_index]
        if occupant is not None:
            occupant.position = None

        self._cells[destination_index] = piece
        piece.position = ColRow(destination.x, destination.y)

    def remove_piece(self, piece: Piece) -> None:
        """Take a placed piece off the board."""
        if piece.position is None:
            raise ValueError("piece is not placed on the board")
        self._cells[self._index(piece.position)] = None
        piece.position = None

    def get_piece(self, col_row: ColRow) -> Optional[Piece]:
        return self._cells[self._index(col_row)]

    @property
    def cells(self) -> Tuple[Optional[Piece], ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return TOTAL_CELLS