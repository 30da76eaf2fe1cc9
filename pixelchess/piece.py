"""Chess pieces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pixelchess.definitions import ColRow
from pixelchess.player import Player


class PieceType(Enum):
    """Kind of piece; the value is its display name."""

    INVALID = "Invalid"
    PAWN = "Pawn"
    ROOK = "Rook"
    KNIGHT = "Knight"
    BISHOP = "Bishop"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Piece:
    """A piece, its owner, its board position and how often it has moved."""

    type: PieceType = PieceType.INVALID
    position: Optional[ColRow] = None
    player: Optional[Player] = None
    movements_count: int = 0

    def reset(self) -> None:
        """Return the piece to its unassigned state."""
        self.movements_count = 0
        self.position = None
        self.player = None
        self.type = PieceType.INVALID

    def increase_movements_count(self) -> None:
        self.movements_count += 1

    @property
    def did_already_move(self) -> bool:
        return self.movements_count > 0

    def does_player_own_this_piece(self, player: Player) -> bool:
        return self.player == player

    @property
    def is_king(self) -> bool:
        return self.type is PieceType.KING

    def __str__(self) -> str:
        text = f"{{{self.player} {self.type} - "
        if self.position is not None:
            text += f"[{self.position.x},{self.position.y}]\n}}"
        return text