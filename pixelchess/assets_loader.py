"""Chess textures and sprite geometry."""

from __future__ import annotations

from typing import Any, Dict, Optional

import pygame

from pixelchess.definitions import (
    BLACK_PIECES_PATH,
    BOARD_ID,
    BOARD_OFFSET,
    BOARD_PATH,
    BOARD_TILE_SIZE,
    PLAYER_ONE_PIECES_ID,
    PLAYER_TWO_PIECES_ID,
    WHITE_PIECES_PATH,
    ColRow,
)
from pixelchess.piece import PieceType
from pixelchess.player import Player
from pixelchess.renderer import FRect
from pixelchess.texture_manager import TextureManager

_SHEET_HEIGHT = 32
_SPRITE_WIDTH = 14
_SPRITE_GAP = 2


def _sprite(slot: int, height: int) -> pygame.Rect:
    left = 1 + slot * _SPRITE_GAP + slot * _SPRITE_WIDTH
    return pygame.Rect(left, _SHEET_HEIGHT - height, _SPRITE_WIDTH, height)


_PIECE_RECTS: Dict[PieceType, pygame.Rect] = {
    PieceType.PAWN: _sprite(0, 16),
    PieceType.KNIGHT: _sprite(1, 20),
    PieceType.ROOK: _sprite(2, 19),
    PieceType.BISHOP: _sprite(3, 21),
    PieceType.QUEEN: _sprite(4, 24),
    PieceType.KING: _sprite(5, 26),
}


class AssetsLoader:
    """Loads the chess textures and knows where each sprite sits on its sheet."""

    def __init__(self, texture_manager: TextureManager) -> None:
        self._texture_manager = texture_manager
        self.load_assets()

    def load_assets(self) -> None:
        self._texture_manager.load_texture(BLACK_PIECES_PATH, PLAYER_ONE_PIECES_ID)
        self._texture_manager.load_texture(WHITE_PIECES_PATH, PLAYER_TWO_PIECES_ID)
        self._texture_manager.load_texture(BOARD_PATH, BOARD_ID)

    def get_player_texture(self, player: Player) -> Optional[Any]:
        """The piece sheet of the given player's side."""
        return self.get_texture(
            PLAYER_ONE_PIECES_ID if player.is_player_one else PLAYER_TWO_PIECES_ID
        )

    def get_texture(self, texture_id: str) -> Optional[Any]:
        return self._texture_manager.get_texture(texture_id)

    def get_piece_rect(self, piece_type: PieceType) -> pygame.Rect:
        """Sprite rectangle of a piece type on its sheet."""
        try:
            return pygame.Rect(_PIECE_RECTS[piece_type])
        except KeyError:
            raise ValueError(f"no sprite rectangle for piece type {piece_type}") from None

    @staticmethod
    def get_cell_rect(col_row: ColRow) -> FRect:
        """Unscaled rectangle of a board cell relative to the board image."""
        return FRect(
            BOARD_OFFSET.x + col_row.x * BOARD_TILE_SIZE.x,
            BOARD_OFFSET.y + col_row.y * BOARD_TILE_SIZE.y,
            BOARD_TILE_SIZE.x,
            BOARD_TILE_SIZE.y,
        )