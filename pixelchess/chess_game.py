"""The chess scene: board state, input handling and drawing."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Union

import pygame

from pixelchess.assets_loader import AssetsLoader
from pixelchess.board import Board
from pixelchess.board_loader import load_from_json
from pixelchess.board_renderer import BoardRenderer
from pixelchess.chess_rules import ChessRules
from pixelchess.definitions import (
    CLICK_ON_CELL,
    CLICK_OUT_OF_BOARD,
    FONT_ATARI_PATH,
    FONT_ID_BIG,
    FONT_ID_SMALL,
    JSON_PATH,
    SCALING_FACTOR,
    SCREEN_SIZE,
    from_real_click_to_board_col_row,
)
from pixelchess.game_controller import GameController
from pixelchess.movement_factory import MovementFactory
from pixelchess.piece_manager import PieceManager
from pixelchess.renderer import Renderer
from pixelchess.text_manager import TextManager
from pixelchess.texture_manager import TextureManager
from pixelchess.turn_manager import TurnManager

logger = logging.getLogger(__name__)

TITLE = "Chess Game"
TEXT_COLOR = (255, 255, 255, 255)


class ChessGame:
    """Wires the chess model together and reacts to clicks and keys."""

    def __init__(
        self,
        text_manager: TextManager,
        texture_manager: TextureManager,
        json_path: Union[str, PathLike] = JSON_PATH,
    ) -> None:
        self._text_manager = text_manager
        self._texture_manager = texture_manager
        self._json_path = json_path
        self.assets_loader = AssetsLoader(texture_manager)
        self.board = Board()
        self.turn_manager = TurnManager()
        self.piece_manager = PieceManager()
        self.movement_factory = MovementFactory(self.board)
        self.chess_rules = ChessRules(self.board, self.movement_factory, self.piece_manager)
        self.controller = GameController(
            self.board, self.piece_manager, self.turn_manager, self.chess_rules
        )
        self.board_renderer = BoardRenderer(
            texture_manager, text_manager, self.assets_loader
        )
        self._font_big = None
        self._font_small = None
        self.init()

    def init(self) -> None:
        """Load fonts and place the pieces in their starting cells."""
        self._font_big = self._text_manager.load_font(
            FONT_ATARI_PATH, int(5 * SCALING_FACTOR), FONT_ID_BIG
        )
        self._font_small = self._text_manager.load_font(
            FONT_ATARI_PATH, int(3 * SCALING_FACTOR), FONT_ID_SMALL
        )
        self.piece_manager.initialize(self.board, self.turn_manager)

    def on_click(self, x: float, y: float) -> None:
        """Select or move a piece at the clicked window position."""
        col_row = from_real_click_to_board_col_row(x, y)
        if col_row is None:
            logger.info(CLICK_OUT_OF_BOARD, x, y)
            return
        logger.info(CLICK_ON_CELL, col_row.x, col_row.y, self.turn_manager.active_player)
        self.controller.select_or_move_piece(col_row)

    def on_key_up(self, key: int) -> None:
        """'L' loads the board from JSON, 'R' resets the game."""
        if key == pygame.K_l:
            load_from_json(self._json_path, self.board, self.piece_manager)
        elif key == pygame.K_r:
            self.controller.reset_game()

    def render(self, renderer: Renderer) -> None:
        """Draw the title, the status message and the board."""
        lines = (
            (self._font_big, TITLE, SCREEN_SIZE.y * 0.05),
            (self._font_small, self.controller.message, SCREEN_SIZE.y * 0.9),
        )
        for font, text, y in lines:
            if font is None:
                logger.warning("No font loaded to draw: %s", text)
                continue
            renderer.render_text(font, text, TEXT_COLOR, SCREEN_SIZE.x / 2, y)
        self.board_renderer.render(
            renderer,
            self.board,
            self.controller.highlighted_moves,
            self.controller.selected_piece,
        )