"""Candidate moves for each kind of piece, before check is considered."""

from __future__ import annotations

from typing import Dict, Iterator, Tuple

from pixelchess.board import Board
from pixelchess.definitions import ColRow, Movements
from pixelchess.piece import Piece, PieceType
from pixelchess.vec2 import Vec2

_DIRS_KNIGHT = (
    Vec2(-2, -1), Vec2(-1, -2), Vec2(1, -2), Vec2(2, -1),
    Vec2(-2, 1), Vec2(-1, 2), Vec2(1, 2), Vec2(2, 1),
)
_DIRS_ROOK = (Vec2(0, -1), Vec2(-1, 0), Vec2(1, 0), Vec2(0, 1))
_DIRS_BISHOP = (Vec2(-1, -1), Vec2(1, -1), Vec2(-1, 1), Vec2(1, 1))
_DIRS_QUEEN = _DIRS_ROOK + _DIRS_BISHOP

# Directions explored by each piece type, and whether it stops after one step.
_PATTERNS: Dict[PieceType, Tuple[Tuple[Vec2, ...], bool]] = {
    PieceType.ROOK: (_DIRS_ROOK, False),
    PieceType.KNIGHT: (_DIRS_KNIGHT, True),
    PieceType.BISHOP: (_DIRS_BISHOP, False),
    PieceType.QUEEN: (_DIRS_QUEEN, False),
    PieceType.KING: (_DIRS_QUEEN, True),
}


class MovementFactory:
    """Generates the cells a piece could move to on a given board."""

    def __init__(self, board: Board) -> None:
        self._board = board

    def get_movements(self, piece: Piece) -> Movements:
        """Return the cells the piece can reach, ignoring whether its king is exposed."""
        if piece.position is None:
            raise ValueError("piece is not placed on the board")
        if piece.player is None:
            raise ValueError("piece has no player assigned")

        if piece.type is PieceType.PAWN:
            return self._pawn(piece)
        try:
            directions, single_step = _PATTERNS[piece.type]
        except KeyError:
            raise ValueError(f"cannot generate moves for piece type {piece.type}") from None
        return [
            move
            for direction in directions
            for move in self._explore_direction(piece, direction, single_step)
        ]

    def _pawn(self, piece: Piece) -> Movements:
        movements: Movements = []
        direction = piece.player.direction
        max_steps = 1 if piece.did_already_move else 2
        position = piece.position

        for step in range(1, max_steps + 1):
            forward = ColRow(position.x, position.y + step * direction)
            if not self._board.is_inside_bounds(forward) or self._board.get_piece(forward):
                break
            movements.append(forward)

        for dx in (-1, 1):
            diagonal = ColRow(position.x + dx, position.y + direction)
            if not self._board.is_inside_bounds(diagonal):
                continue
            target = self._board.get_piece(diagonal)
            if target is not None and target.player != piece.player:
                movements.append(diagonal)

        return movements

    def _explore_direction(
        self, piece: Piece, direction: Vec2, single_step: bool
    ) -> Iterator[ColRow]:
        target = piece.position + direction
        while self._board.is_inside_bounds(target):
            occupant = self._board.get_piece(target)
            if occupant is None or occupant.player != piece.player:
                yield target
            if occupant is not None or single_step:
                break
            target = target + direction