"""Row-wise domain decomposition of a 2D lattice."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..indexing.linear import LinearAccessor2d
from ..indexing.tiled import TiledGridAccessor1d
from ..utils.logging import log


@dataclass(frozen=True)
class TileSpan:
    tile: int
    start: int  # first row, inclusive
    stop: int  # last row, exclusive
    lin_start: int
    lin_stop: int

    @property
    def nrows(self) -> int:
        return self.stop - self.start


def row_tiles(ni: int, nj: int, n_tiles: int, verbose: bool = False):
    """Split the ``ni`` rows of an ``ni x nj`` grid into ``n_tiles`` tiles.

    Linear ranges follow the row-major convention, so every tile owns a
    contiguous block of the flattened grid.
    """
    la = LinearAccessor2d(ni, nj)
    tga = TiledGridAccessor1d(0, ni - 1, n_tiles)
    spans = []
    for iint in range(tga.n_tiles):
        first, last = tga.bounds(iint)
        span = TileSpan(
            tile=iint,
            start=first,
            stop=last + 1,
            lin_start=la.cart2lin_rm((first, 0)),
            lin_stop=la.cart2lin_rm((last, nj - 1)) + 1,
        )
        if verbose:
            log(f"tile {iint}: rows [{span.start}, {span.stop}) linear [{span.lin_start}, {span.lin_stop})")
        spans.append(span)
    return spans


def split_rows(field: np.ndarray, n_tiles: int):
    """Split ``field`` along axis 0 into views matching the tile lengths."""
    field = np.asarray(field)
    tga = TiledGridAccessor1d(0, field.shape[0] - 1, n_tiles)
    return np.split(field, tga.offsets()[1:], axis=0)


def gather_rows(blocks) -> np.ndarray:
    return np.concatenate(list(blocks), axis=0)
