"""Selection, movement and turn flow driven by cell clicks."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pixelchess.board import Board
from pixelchess.chess_rules import ChessRules
from pixelchess.definitions import (
    CHECK_WARNING,
    CHECKMATE_WARNING,
    PIECE_SELECTED,
    PLAYER_TURN,
    STALEMATE_WARNING,
    ColRow,
)
from pixelchess.piece import Piece
from pixelchess.piece_manager import PieceManager
from pixelchess.turn_manager import TurnManager

logger = logging.getLogger(__name__)


class GameController:
    """Turns clicks on cells into piece selections and moves."""

    def __init__(
        self,
        board: Board,
        piece_manager: PieceManager,
        turn_manager: TurnManager,
        chess_rules: ChessRules,
    ) -> None:
        self._board = board
        self._piece_manager = piece_manager
        self._turn_manager = turn_manager
        self._chess_rules = chess_rules
        self._did_game_end = False
        self._selected_piece: Optional[Piece] = None
        self._highlighted_moves: List[ColRow] = []
        self._message = self._turn_message()

    def _turn_message(self) -> str:
        return PLAYER_TURN.format(self._turn_manager.active_player.name)

    def select_or_move_piece(self, clicked_cell: ColRow) -> None:
        """Move the selected piece to the cell, or select the piece on it."""
        if self._selected_piece is not None:
            self._try_to_move_selected_piece(clicked_cell)
        else:
            self._try_to_select_piece(clicked_cell)

    def _try_to_move_selected_piece(self, destination: ColRow) -> None:
        if destination in self._highlighted_moves:
            self._board.move_to(self._selected_piece, destination)
            self._selected_piece.increase_movements_count()
            self._turn_manager.next_turn()

            active = self._turn_manager.active_player
            if self._chess_rules.is_checkmate(active):
                self._message = CHECKMATE_WARNING
                self._did_game_end = True
            elif self._chess_rules.is_stalemate(active):
                self._message = STALEMATE_WARNING
                self._did_game_end = True
            elif self._chess_rules.is_check(active):
                self._message = CHECK_WARNING
            else:
                self._message = self._turn_message()

        self._unselect_piece()

    def _try_to_select_piece(self, position: ColRow) -> None:
        piece = self._board.get_piece(position)
        if piece is None or not piece.does_player_own_this_piece(
            self._turn_manager.active_player
        ):
            return
        logger.info(PIECE_SELECTED, piece)
        self._selected_piece = piece
        self._highlighted_moves = self._chess_rules.get_legal_moves(piece)

    def _unselect_piece(self) -> None:
        self._selected_piece = None
        self._highlighted_moves = []

    def reset_game(self) -> None:
        """Put every piece back and give the turn to player one."""
        self._did_game_end = False
        self._unselect_piece()
        self._turn_manager.set_current_turn_to_player_one()
        self._message = self._turn_message()
        self._board.clear()
        self._piece_manager.reset_all_pieces()
        self._piece_manager.initialize(self._board, self._turn_manager)

    @property
    def did_game_end(self) -> bool:
        return self._did_game_end

    @property
    def highlighted_moves(self) -> Tuple[ColRow, ...]:
        return tuple(self._highlighted_moves)

    @property
    def selected_piece(self) -> Optional[Piece]:
        return self._selected_piece

    @property
    def message(self) -> str:
        return self._message