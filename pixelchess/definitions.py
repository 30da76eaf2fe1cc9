"""Asset paths, layout configuration, messages and click mapping."""

from __future__ import annotations

from typing import List, Optional

from pixelchess.vec2 import Vec2

ColRow = Vec2
Movements = List[Vec2]

# Assets
FONT_ATARI_PATH = "assets/fonts/atari-full.ttf"
FONT_ID_BIG = "default-font-big"
FONT_ID_SMALL = "default-font-small"
JSON_PATH = "assets/json/board_pieces.json"

BLACK_PIECES_PATH = "assets/images/chess/BlackPieces-Sheet.png"
WHITE_PIECES_PATH = "assets/images/chess/WhitePieces-Sheet.png"
BOARD_PATH = "assets/images/chess/Board-Perspective.png"

PLAYER_ONE_PIECES_ID = "Player-One-Pieces"
PLAYER_TWO_PIECES_ID = "Player-Two-Pieces"
BOARD_ID = "Board-Perspective"

BOARD_ASSET_SIZE = Vec2(142.0, 142.0)
BOARD_TILE_SIZE = Vec2(16.0, 12.0)
BOARD_OFFSET = Vec2(7.0, 20.0)
BOARD_DIMENSIONS = Vec2(128.0, 96.0)

# Config
SCALING_FACTOR = 5.0
SCREEN_OFFSET = Vec2(30.0, 20.0)
BOARD_POSITION = Vec2(
    SCREEN_OFFSET.x - SCREEN_OFFSET.x / 2.0,
    SCREEN_OFFSET.y - SCREEN_OFFSET.y / 2.0,
)
SCREEN_SIZE = Vec2(
    int(SCALING_FACTOR * (BOARD_ASSET_SIZE.x + SCREEN_OFFSET.x)),
    int(SCALING_FACTOR * (BOARD_ASSET_SIZE.y + SCREEN_OFFSET.y)),
)
BOARD_ASSET_SIZE_INT = int(BOARD_ASSET_SIZE.x)

# Log messages (printf style, for the logging module)
CLICK_ON_CELL = "Clicked cell [%d, %d] by %s"
CLICK_OUT_OF_BOARD = "Clicked out of the board -> coords {%.0f, %.0f}"
NEXT_TURN = "Next turn. Active player is now: %s"
PIECE_SELECTED = "Selected piece: %s"

# Screen messages
PLAYER_TURN = "{}'s Player Turn"
CHECK_WARNING = "You're in check! Move!"
CHECKMATE_WARNING = "You're in checkmate! GG. Press 'R' to reset"
STALEMATE_WARNING = "You're in stalemate! Press 'R' to reset"


def from_real_click_to_board_col_row(x: float, y: float) -> Optional[ColRow]:
    """Map a window click position to a board cell, or None if off the board."""
    real_x = x / SCALING_FACTOR
    real_y = y / SCALING_FACTOR
    origin_x = BOARD_OFFSET.x + BOARD_POSITION.x
    origin_y = BOARD_OFFSET.y + BOARD_POSITION.y
    if not (origin_x <= real_x <= origin_x + BOARD_DIMENSIONS.x):
        return None
    if not (origin_y <= real_y <= origin_y + BOARD_DIMENSIONS.y):
        return None

    rel_x = real_x - origin_x
    rel_y = real_y - origin_y
    return ColRow(int(rel_x / BOARD_TILE_SIZE.x), int(rel_y / BOARD_TILE_SIZE.y))