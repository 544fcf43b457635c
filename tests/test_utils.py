import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from gridtile.indexing.tiled import TiledGridAccessor1d
from gridtile.lattice.decompose import row_tiles
from gridtile.lattice.neighbours import neighbour_table
from gridtile.utils.io import load_decomposition, save_decomposition
from gridtile.utils.logging import log
from gridtile.utils.plotting import plot_tiles


def test_decomposition_round_trip(tmp_path):
    spans = row_tiles(10, 3, 3)
    table = neighbour_table(10, 3)
    path = tmp_path / "lattice.npz"
    save_decomposition(str(path), spans, neighbours=table)
    loaded, neighbours = load_decomposition(str(path))
    assert loaded == spans
    np.testing.assert_array_equal(neighbours, table)


def test_decomposition_without_neighbours(tmp_path):
    path = tmp_path / "tiles.npz"
    save_decomposition(str(path), row_tiles(8, 2, 2))
    spans, neighbours = load_decomposition(str(path))
    assert [(s.start, s.stop) for s in spans] == [(0, 4), (4, 8)]
    assert neighbours is None


def test_log_format(capsys):
    log("hello")
    out = capsys.readouterr().out
    assert out.startswith("[") and out.rstrip().endswith("] hello")


def test_plot_tiles():
    fig = plot_tiles(TiledGridAccessor1d(2, 15, 4), ncols=1, title="tiles")
    ax = fig.axes[0]
    assert len(ax.patches) == 4
    assert ax.get_title() == "tiles"
    plt.close(fig)


def test_plot_tiles_over_columns():
    fig = plot_tiles(TiledGridAccessor1d(0, 9, 3), ncols=2)
    assert len(fig.axes) == 2
    assert [len(ax.patches) for ax in fig.axes] == [2, 1]
    assert fig.axes[1].get_xlim() == (7.5, 9.5)
    plt.close(fig)


def test_plot_tiles_rejects_bad_ncols():
    with pytest.raises(ValueError):
        plot_tiles(TiledGridAccessor1d(0, 9, 3), ncols=4)
