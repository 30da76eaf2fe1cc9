import pytest

from pixelchess.bar_logic import BarLogic, DecreasingBarLogic, IncreasingBarLogic


def test_base_is_abstract():
    with pytest.raises(TypeError):
        BarLogic(10.0, 0.0)


def test_increasing_starts_empty():
    bar = IncreasingBarLogic(10.0)
    assert bar.value == 0
    assert bar.is_empty
    assert not bar.is_full
    assert not bar.did_finish


def test_increasing_clamps_and_finishes():
    bar = IncreasingBarLogic(10.0)
    bar.update(25.0)
    assert bar.value == bar.max_value
    assert bar.is_full
    assert bar.did_finish
    assert bar.progress == 1.0


def test_increasing_reset():
    bar = IncreasingBarLogic(10.0)
    bar.update(4.0)
    bar.reset()
    assert bar.value == 0


def test_decreasing_starts_full():
    bar = DecreasingBarLogic(10.0)
    assert bar.value == bar.max_value
    assert bar.is_full
    assert not bar.did_finish


def test_decreasing_drains_to_zero():
    bar = DecreasingBarLogic(10.0)
    bar.update(30.0)
    assert bar.value == 0
    assert bar.is_empty
    assert bar.did_finish


def test_decreasing_reset():
    bar = DecreasingBarLogic(10.0)
    bar.update(3.0)
    bar.reset()
    assert bar.value == bar.max_value


@pytest.mark.parametrize("bar_cls", [IncreasingBarLogic, DecreasingBarLogic])
def test_set_value_clamps(bar_cls):
    bar = bar_cls(10.0)
    bar.set_value(-5.0)
    assert bar.value == 0
    bar.set_value(50.0)
    assert bar.value == bar.max_value


def test_progress_at_half():
    bar = IncreasingBarLogic(10.0)
    bar.set_value(5.0)
    assert bar.progress == pytest.approx(0.5)


@pytest.mark.parametrize("bar_cls", [IncreasingBarLogic, DecreasingBarLogic])
def test_progress_stays_in_unit_range(bar_cls):
    bar = bar_cls(10.0)
    for delta in (3.0, 3.0, 3.0, 3.0):
        bar.update(delta)
        assert 0.0 <= bar.progress <= 1.0