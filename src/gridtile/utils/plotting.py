"""Plotting helpers."""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np


def plot_tiles(accessor, ncols=1, title=None):
    """Draw each tile of a ``TiledGridAccessor1d`` as a coloured band.

    Tiles are spread over ``ncols`` side-by-side panels in tile order.
    """
    if not 1 <= ncols <= accessor.n_tiles:
        raise ValueError(f"ncols must be in [1, {accessor.n_tiles}], got {ncols}")
    fig, axes = plt.subplots(1, ncols, figsize=(6 * ncols, 1.5), squeeze=False)
    cmap = plt.get_cmap("tab10")
    starts = accessor.offsets()
    lengths = accessor.sublengths()
    for ax, group in zip(axes[0], np.array_split(np.arange(accessor.n_tiles), ncols)):
        for iint in group:
            start, length = starts[iint], lengths[iint]
            ax.barh(0, length, left=start - 0.5, color=cmap(iint % 10), edgecolor="k")
            ax.text(start - 0.5 + length / 2, 0, str(iint), ha="center", va="center")
        first, last = starts[group[0]], starts[group[-1]] + lengths[group[-1]] - 1
        ax.set_xlim(first - 0.5, last + 0.5)
        ax.set_xticks(np.arange(first, last + 1))
        ax.set_yticks([])
    if title:
        axes[0, 0].set_title(title)
    fig.tight_layout()
    return fig
