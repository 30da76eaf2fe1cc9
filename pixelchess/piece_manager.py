"""Owns every piece and sets up the starting position."""

from __future__ import annotations

from typing import List, Tuple

from pixelchess.board import Board
from pixelchess.piece import Piece, PieceType
from pixelchess.player import Player
from pixelchess.turn_manager import TurnManager

PIECES_PER_PLAYER = 16
NUMBER_OF_PLAYERS = 2

# Index 0-7 are pawns, 8-15 the back rank in traditional order.
_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def piece_type_by_index(index: int) -> PieceType:
    """Piece type at a player's piece index in the traditional layout."""
    if 0 <= index < 8:
        return PieceType.PAWN
    if 8 <= index < PIECES_PER_PLAYER:
        return _BACK_RANK[index - 8]
    raise ValueError(f"invalid piece index: {index}")


class PieceManager:
    """The fixed set of pieces of both players."""

    def __init__(self) -> None:
        self._pieces: List[Piece] = [
            Piece() for _ in range(PIECES_PER_PLAYER * NUMBER_OF_PLAYERS)
        ]

    def initialize(self, board: Board, turn_manager: TurnManager) -> None:
        """Assign owners and types and place every piece in its starting cell."""
        first = self._pieces[:PIECES_PER_PLAYER]
        for index, piece in enumerate(first):
            piece.player = turn_manager.active_player
            piece.type = piece_type_by_index(PIECES_PER_PLAYER - index - 1)
            board.move_to(piece, board.from_index_to_col_row(index))

        start = len(board) - PIECES_PER_PLAYER
        second = self._pieces[PIECES_PER_PLAYER:]
        for offset, piece in enumerate(second):
            piece.player = turn_manager.opponent_player
            piece.type = piece_type_by_index(offset)
            board.move_to(piece, board.from_index_to_col_row(start + offset))

    def reset_all_pieces(self) -> None:
        for piece in self._pieces:
            piece.reset()

    def get_king(self, player: Player) -> Piece:
        """Return the given player's king."""
        for piece in self._pieces:
            if piece.player is None:
                raise ValueError("piece has no player assigned yet")
            if piece.player == player and piece.is_king:
                return piece
        raise LookupError(f"king not found for {player}")

    @property
    def pieces(self) -> Tuple[Piece, ...]:
        return tuple(self._pieces)