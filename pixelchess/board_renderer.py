"""Draws the board, the selection and move highlights, and the pieces."""

from __future__ import annotations

from typing import Iterable, Optional

import pygame

from pixelchess.assets_loader import AssetsLoader
from pixelchess.board import Board
from pixelchess.definitions import (
    BOARD_ASSET_SIZE,
    BOARD_ASSET_SIZE_INT,
    BOARD_ID,
    BOARD_POSITION,
    SCALING_FACTOR,
    ColRow,
)
from pixelchess.piece import Piece
from pixelchess.renderer import FRect, Renderer
from pixelchess.text_manager import TextManager
from pixelchess.texture_manager import TextureManager

SELECTION_COLOR = (255, 255, 0, 150)
HIGHLIGHT_COLOR = (0, 255, 0, 75)


def _board_cell_rect(col_row: ColRow) -> FRect:
    """Unscaled rectangle of a cell in screen space."""
    rect = AssetsLoader.get_cell_rect(col_row)
    rect.x += BOARD_POSITION.x
    rect.y += BOARD_POSITION.y
    return rect


class BoardRenderer:
    """Renders a board and its pieces with the loaded chess assets."""

    def __init__(
        self,
        texture_manager: TextureManager,
        text_manager: TextManager,
        assets_loader: AssetsLoader,
    ) -> None:
        self._texture_manager = texture_manager
        self._text_manager = text_manager
        self._assets_loader = assets_loader

    def render(
        self,
        renderer: Renderer,
        board: Board,
        highlights: Iterable[ColRow],
        selected_piece: Optional[Piece],
    ) -> None:
        """Draw the board background, highlights and every placed piece."""
        renderer.render_texture(
            self._assets_loader.get_texture(BOARD_ID),
            pygame.Rect(0, 0, BOARD_ASSET_SIZE_INT, BOARD_ASSET_SIZE_INT),
            FRect(BOARD_POSITION.x, BOARD_POSITION.y, BOARD_ASSET_SIZE.x, BOARD_ASSET_SIZE.y)
            * SCALING_FACTOR,
        )

        if selected_piece is not None and selected_piece.position is not None:
            renderer.set_rendering_color(SELECTION_COLOR)
            renderer.render_rect_filled(
                _board_cell_rect(selected_piece.position) * SCALING_FACTOR
            )

        moves = list(highlights)
        if moves:
            renderer.set_rendering_color(HIGHLIGHT_COLOR)
            for move in moves:
                renderer.render_rect_filled(_board_cell_rect(move) * SCALING_FACTOR)

        for index, piece in enumerate(board.cells):
            if piece is None:
                continue
            cell = _board_cell_rect(board.from_index_to_col_row(index))
            source = self._assets_loader.get_piece_rect(piece.type)
            destination = FRect(
                cell.x + cell.w * 0.5 - source.w / 2.0,
                cell.y + cell.h * 0.75 - source.h,
                float(source.w),
                float(source.h),
            )
            renderer.render_texture(
                self._assets_loader.get_player_texture(piece.player),
                source,
                destination * SCALING_FACTOR,
            )