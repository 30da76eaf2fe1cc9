import pytest

from pixelchess.definitions import (
    BOARD_DIMENSIONS,
    BOARD_OFFSET,
    BOARD_POSITION,
    BOARD_TILE_SIZE,
    SCALING_FACTOR,
    SCREEN_SIZE,
    ColRow,
    from_real_click_to_board_col_row,
)

ORIGIN_X = BOARD_OFFSET.x + BOARD_POSITION.x
ORIGIN_Y = BOARD_OFFSET.y + BOARD_POSITION.y


def _cell_center(col, row):
    return (
        (ORIGIN_X + (col + 0.5) * BOARD_TILE_SIZE.x) * SCALING_FACTOR,
        (ORIGIN_Y + (row + 0.5) * BOARD_TILE_SIZE.y) * SCALING_FACTOR,
    )


def test_board_origin_maps_to_first_cell():
    result = from_real_click_to_board_col_row(
        ORIGIN_X * SCALING_FACTOR, ORIGIN_Y * SCALING_FACTOR
    )
    assert result == ColRow(0, 0)


@pytest.mark.parametrize("col", range(8))
@pytest.mark.parametrize("row", range(8))
def test_cell_centers_round_trip(col, row):
    assert from_real_click_to_board_col_row(*_cell_center(col, row)) == ColRow(col, row)


@pytest.mark.parametrize(
    "x, y",
    [
        (0.0, 0.0),
        (float(SCREEN_SIZE.x), float(SCREEN_SIZE.y)),
        ((ORIGIN_X - 1) * SCALING_FACTOR, ORIGIN_Y * SCALING_FACTOR),
        (ORIGIN_X * SCALING_FACTOR, (ORIGIN_Y - 1) * SCALING_FACTOR),
        ((ORIGIN_X + BOARD_DIMENSIONS.x + 1) * SCALING_FACTOR, ORIGIN_Y * SCALING_FACTOR),
        (ORIGIN_X * SCALING_FACTOR, (ORIGIN_Y + BOARD_DIMENSIONS.y + 1) * SCALING_FACTOR),
    ],
)
def test_clicks_outside_board_return_none(x, y):
    assert from_real_click_to_board_col_row(x, y) is None


def test_cells_stay_in_board_for_interior_clicks():
    for row in range(8):
        for col in range(8):
            cell = from_real_click_to_board_col_row(*_cell_center(col, row))
            assert 0 <= cell.x < 8 and 0 <= cell.y < 8