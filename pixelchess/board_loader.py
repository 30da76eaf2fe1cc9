"""Loads piece placements from a JSON file."""

from __future__ import annotations

import json
import logging
from os import PathLike
from typing import Union

from pixelchess.board import Board
from pixelchess.piece_manager import PieceManager

logger = logging.getLogger(__name__)


def load_from_json(
    path: Union[str, PathLike], board: Board, piece_manager: PieceManager
) -> None:
    """Place pieces on the board from a JSON file.

    The file holds {"pieces": [...]}, one entry per piece in the manager's
    order: a cell index, or null for a piece that stays off the board.
    A file that cannot be opened is logged and leaves the board untouched.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError:
        logger.error("Failed to open JSON file: %s", path)
        return

    if not isinstance(data, dict):
        raise ValueError("board JSON must be an object")
    entries = data.get("pieces") or []
    pieces = piece_manager.pieces
    if len(entries) > len(pieces):
        raise ValueError("JSON pieces number is incorrect")

    board.clear()
    for piece in pieces:
        piece.position = None
    for piece, index in zip(pieces, entries):
        if index is not None:
            board.move_to(piece, board.from_index_to_col_row(int(index)))