import numpy as np
import pytest

from gridtile.errors import InvalidRange
from gridtile.indexing.circular import Circular2dIndex
from gridtile.lattice.decompose import gather_rows, row_tiles, split_rows
from gridtile.lattice.neighbours import neighbour_table, neighbours


def test_neighbours_wrap():
    index = Circular2dIndex(0, 3, 0, 4)
    assert neighbours(index, 0, 0) == ((1, 0), (3, 0), (0, 1), (0, 4))


def test_neighbour_table_matches_roll():
    ni, nj = 5, 7
    f = np.arange(ni * nj).reshape(ni, nj)
    table = neighbour_table(ni, nj)
    assert table.shape == (ni * nj, 4)
    np.testing.assert_array_equal(table[:, 0], np.roll(f, -1, axis=0).ravel())
    np.testing.assert_array_equal(table[:, 1], np.roll(f, 1, axis=0).ravel())
    np.testing.assert_array_equal(table[:, 2], np.roll(f, -1, axis=1).ravel())
    np.testing.assert_array_equal(table[:, 3], np.roll(f, 1, axis=1).ravel())


def test_neighbour_table_column_major():
    ni, nj = 4, 3
    f = np.arange(ni * nj).reshape(nj, ni).T
    table = neighbour_table(ni, nj, order="cm")
    np.testing.assert_array_equal(table[:, 0], np.roll(f, -1, axis=0).ravel(order="F"))
    np.testing.assert_array_equal(table[:, 3], np.roll(f, 1, axis=1).ravel(order="F"))


def test_neighbour_table_rejects_bad_input():
    with pytest.raises(ValueError):
        neighbour_table(4, 4, order="zigzag")
    with pytest.raises(InvalidRange):
        neighbour_table(1, 4)


def test_row_tiles(capsys):
    spans = row_tiles(10, 3, 3, verbose=True)
    assert [(s.start, s.stop) for s in spans] == [(0, 4), (4, 8), (8, 10)]
    assert [(s.lin_start, s.lin_stop) for s in spans] == [(0, 12), (12, 24), (24, 30)]
    assert [s.nrows for s in spans] == [4, 4, 2]
    out = capsys.readouterr().out
    assert "tile 0: rows [0, 4)" in out
    assert out.count("\n") == 3


def test_split_and_gather_rows():
    field = np.arange(30).reshape(10, 3)
    blocks = split_rows(field, 3)
    assert [b.shape for b in blocks] == [(4, 3), (4, 3), (2, 3)]
    np.testing.assert_array_equal(gather_rows(blocks), field)
