import pytest

from pixelchess.assets_loader import AssetsLoader
from pixelchess.definitions import (
    BLACK_PIECES_PATH,
    BOARD_ID,
    BOARD_OFFSET,
    BOARD_PATH,
    BOARD_TILE_SIZE,
    WHITE_PIECES_PATH,
    ColRow,
)
from pixelchess.piece import PieceType
from pixelchess.player import Player, PlayerType
from pixelchess.renderer import FRect
from pixelchess.texture_manager import TextureManager

SPRITE_TYPES = [
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
]


class RecordingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return ("texture", path)


@pytest.fixture
def loader():
    return RecordingLoader()


@pytest.fixture
def assets(loader):
    return AssetsLoader(TextureManager(loader))


def test_loads_all_sheets_on_creation(loader):
    created = AssetsLoader(TextureManager(loader))
    assert sorted(loader.calls) == sorted([BLACK_PIECES_PATH, WHITE_PIECES_PATH, BOARD_PATH])
    assert created.get_texture(BOARD_ID) == ("texture", BOARD_PATH)


def test_board_texture(assets):
    assert assets.get_texture(BOARD_ID) == ("texture", BOARD_PATH)


def test_player_textures(assets):
    one = Player("Black", PlayerType.ONE)
    two = Player("Gray", PlayerType.TWO)
    assert assets.get_player_texture(one) == ("texture", BLACK_PIECES_PATH)
    assert assets.get_player_texture(two) == ("texture", WHITE_PIECES_PATH)


def test_load_assets_again_does_not_reload(assets, loader):
    assets.load_assets()
    assert assets.get_texture(BOARD_ID) == ("texture", BOARD_PATH)
    assert len(loader.calls) == 3


def test_pawn_sprite_rect(assets):
    rect = assets.get_piece_rect(PieceType.PAWN)
    assert (rect.x, rect.y, rect.w, rect.h) == (1, 16, 14, 16)


def test_sprites_share_width_and_baseline(assets):
    rects = [assets.get_piece_rect(kind) for kind in SPRITE_TYPES]
    assert len({rect.w for rect in rects}) == 1
    assert len({rect.bottom for rect in rects}) == 1


def test_sprites_do_not_overlap(assets):
    rects = [assets.get_piece_rect(kind) for kind in SPRITE_TYPES]
    for left, right in zip(rects, rects[1:]):
        assert left.right < right.left


def test_piece_rect_is_a_copy(assets):
    rect = assets.get_piece_rect(PieceType.KING)
    rect.x += 100
    assert assets.get_piece_rect(PieceType.KING) != rect


def test_invalid_piece_type_has_no_rect(assets):
    with pytest.raises(ValueError):
        assets.get_piece_rect(PieceType.INVALID)


def test_first_cell_rect():
    assert AssetsLoader.get_cell_rect(ColRow(0, 0)) == FRect(
        BOARD_OFFSET.x, BOARD_OFFSET.y, BOARD_TILE_SIZE.x, BOARD_TILE_SIZE.y
    )


def test_cells_tile_the_board():
    origin = AssetsLoader.get_cell_rect(ColRow(0, 0))
    right = AssetsLoader.get_cell_rect(ColRow(1, 0))
    below = AssetsLoader.get_cell_rect(ColRow(0, 1))
    assert right.x == origin.x + origin.w
    assert right.y == origin.y
    assert below.y == origin.y + origin.h
    assert below.x == origin.x