import pytest

from pixelchess.board import Board
from pixelchess.piece import PieceType
from pixelchess.piece_manager import (
    NUMBER_OF_PLAYERS,
    PIECES_PER_PLAYER,
    PieceManager,
    piece_type_by_index,
)
from pixelchess.turn_manager import TurnManager


def setup():
    board = Board()
    turns = TurnManager()
    manager = PieceManager()
    manager.initialize(board, turns)
    return board, turns, manager


def test_piece_type_by_index_traditional_layout():
    assert all(piece_type_by_index(i) is PieceType.PAWN for i in range(8))
    assert [piece_type_by_index(i) for i in range(8, 16)] == [
        PieceType.ROOK,
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.QUEEN,
        PieceType.KING,
        PieceType.BISHOP,
        PieceType.KNIGHT,
        PieceType.ROOK,
    ]


@pytest.mark.parametrize("index", [-1, 16, 100])
def test_piece_type_by_index_rejects_out_of_range(index):
    with pytest.raises(ValueError):
        piece_type_by_index(index)


def test_initialize_places_every_piece():
    board, _, manager = setup()
    assert len(manager.pieces) == PIECES_PER_PLAYER * NUMBER_OF_PLAYERS
    occupied = [p for p in board.cells if p is not None]
    assert len(occupied) == len(manager.pieces)
    for piece in manager.pieces:
        assert board.get_piece(piece.position) is piece


def test_initialize_assigns_sides_by_row():
    board, turns, _ = setup()
    for index, piece in enumerate(board.cells):
        row = board.from_index_to_col_row(index).y
        if row < 2:
            assert piece.player == turns.player_one
        elif row >= 6:
            assert piece.player == turns.player_two
        else:
            assert piece is None


def test_pawns_stand_in_front_of_back_rank():
    board, turns, manager = setup()
    for piece in manager.pieces:
        back_row = 0 if piece.player == turns.player_one else 7
        pawn_row = back_row + piece.player.direction
        expected_row = pawn_row if piece.type is PieceType.PAWN else back_row
        assert piece.position.y == expected_row


def test_each_side_has_one_king_in_back_rank():
    _, turns, manager = setup()
    for player in (turns.player_one, turns.player_two):
        king = manager.get_king(player)
        assert king.is_king
        assert king.player == player
        kings = [p for p in manager.pieces if p.is_king and p.player == player]
        assert kings == [king]


def test_reset_all_pieces_clears_state():
    _, _, manager = setup()
    manager.reset_all_pieces()
    assert all(
        p.type is PieceType.INVALID and p.player is None and p.position is None
        for p in manager.pieces
    )


def test_get_king_without_players_raises():
    _, turns, manager = setup()
    manager.reset_all_pieces()
    with pytest.raises(ValueError):
        manager.get_king(turns.player_one)


def test_get_king_missing_raises_lookup_error():
    _, turns, manager = setup()
    manager.get_king(turns.player_one).type = PieceType.QUEEN
    with pytest.raises(LookupError):
        manager.get_king(turns.player_one)