"""Legal moves, check, checkmate and stalemate."""

from __future__ import annotations

from pixelchess.board import Board
from pixelchess.definitions import ColRow, Movements
from pixelchess.movement_factory import MovementFactory
from pixelchess.piece import Piece
from pixelchess.piece_manager import PieceManager
from pixelchess.player import Player


class ChessRules:
    """Applies chess rules to the current board."""

    def __init__(
        self,
        board: Board,
        movement_factory: MovementFactory,
        piece_manager: PieceManager,
    ) -> None:
        self._board = board
        self._movement_factory = movement_factory
        self._piece_manager = piece_manager

    def get_legal_moves(self, piece: Piece) -> Movements:
        """Moves of the piece that do not leave its own king in check."""
        return [
            move
            for move in self._movement_factory.get_movements(piece)
            if not self._would_be_in_check_after_move(piece, move)
        ]

    def is_move_legal(self, piece: Piece, destination: ColRow) -> bool:
        return destination in self.get_legal_moves(piece)

    def is_check(self, player: Player) -> bool:
        """Whether any opposing piece attacks the player's king."""
        king_position = self._piece_manager.get_king(player).position
        if king_position is None:
            return False
        return any(
            king_position in self._movement_factory.get_movements(piece)
            for piece in self._board.cells
            if piece is not None and piece.player != player
        )

    def is_checkmate(self, player: Player) -> bool:
        return self.is_check(player) and not self.has_any_legal_move(player)

    def is_stalemate(self, player: Player) -> bool:
        return not self.is_check(player) and not self.has_any_legal_move(player)

    def has_any_legal_move(self, player: Player) -> bool:
        return any(
            piece is not None and piece.player == player and self.get_legal_moves(piece)
            for piece in self._board.cells
        )

    def _would_be_in_check_after_move(self, piece: Piece, destination: ColRow) -> bool:
        origin = piece.position
        captured = self._board.get_piece(destination)
        self._board.move_to(piece, destination)
        try:
            return self.is_check(piece.player)
        finally:
            self._board.move_to(piece, origin)
            if captured is not None:
                self._board.move_to(captured, destination)