import pytest

from termwin.geometry import Position, Size


def test_default_position_is_top_left():
    position = Position()
    assert (position.row, position.column) == (1, 1)


def test_default_size_is_empty():
    size = Size()
    assert (size.rows, size.columns) == (0, 0)
    assert size.area() == 0


def test_area():
    assert Size(rows=5, columns=10).area() == 50


def test_area_is_symmetric():
    assert Size(rows=3, columns=7).area() == Size(rows=7, columns=3).area()


def test_equality():
    assert Position(row=2, column=3) == Position(column=3, row=2)
    assert Size(rows=4, columns=2) == Size(columns=2, rows=4)


@pytest.mark.parametrize("bad", [-1, 0x10000])
def test_out_of_range(bad):
    with pytest.raises(ValueError):
        Size(rows=bad, columns=1)
    with pytest.raises(ValueError):
        Position(row=1, column=bad)


def test_rejects_non_int():
    with pytest.raises(TypeError):
        Position(row="1", column=1)