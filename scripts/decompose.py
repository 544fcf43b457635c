"""Decompose a periodic lattice into row tiles and export its neighbour table."""
from __future__ import annotations

import argparse
import os
import yaml
import matplotlib.pyplot as plt

from gridtile.indexing import TiledGridAccessor1d
from gridtile.lattice import neighbour_table, row_tiles
from gridtile.utils.io import save_decomposition
from gridtile.utils.logging import log
from gridtile.utils.plotting import plot_tiles


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", required=True)
    args = parser.parse_args()

    with open(args.config, "r") as f:
        cfg = yaml.safe_load(f)

    ni = cfg.get("ni", 64)
    nj = cfg.get("nj", 64)
    n_tiles = cfg.get("n_tiles", 4)
    order = cfg.get("order", "rm")

    log(f"Decomposing {ni}x{nj} lattice into {n_tiles} row tiles")
    spans = row_tiles(ni, nj, n_tiles, verbose=True)
    table = neighbour_table(ni, nj, order=order)

    out_path = cfg.get("output_path")
    if out_path:
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        save_decomposition(out_path, spans, neighbours=table)
        log(f"Saved neighbour table and tiles to {out_path}")

    plot_path = cfg.get("plot_path")
    if plot_path:
        os.makedirs(os.path.dirname(plot_path) or ".", exist_ok=True)
        fig = plot_tiles(TiledGridAccessor1d(0, ni - 1, n_tiles), title=f"{ni} rows / {n_tiles} tiles")
        fig.savefig(plot_path, dpi=150)
        plt.close(fig)
        log(f"Saved tile layout to {plot_path}")


if __name__ == "__main__":
    main()
