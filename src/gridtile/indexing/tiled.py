"""Tiled 1D grid: a closed interval split into near-equal contiguous tiles.

Provides the mapping from a global index to a ``(local index, tile index)``
pair and back. Local and tile indices are counted from global index 0, so
they line up with the tile layout only when the interval starts at 0; use
``offsets`` and ``bounds`` for the global extent of each tile. Tiles all share the first tile's length except the last one,
which absorbs the remainder and is never longer than the others.
"""
from __future__ import annotations

import numpy as np

from ..errors import EmptyTile, InvalidTileCount, LocalIndexOutOfRange, OutOfBounds
from .circular import CircularIndex


def tile_lengths(delta: int, n: int) -> tuple[int, ...]:
    """Lengths of ``n`` tiles covering ``delta`` points."""
    base = delta // n
    if base == 0:
        raise EmptyTile(f"cannot split {delta} points into {n} non-empty tiles")
    if base * n == delta:
        return (base,) * n
    base += 1
    last = delta - base * (n - 1)
    if last <= 0:
        raise EmptyTile(f"splitting {delta} points into {n} tiles of {base} leaves the last tile empty")
    return (base,) * (n - 1) + (last,)


class TiledGridAccessor1d:
    """Partition of ``[lower, upper]`` into ``n`` tiles."""

    def __init__(self, lower: int, upper: int, n: int):
        if n <= 0:
            raise InvalidTileCount(f"the partition needs at least one tile, got n={n}")
        self._cindex = CircularIndex(lower, upper)
        self._lengths = tile_lengths(self._cindex.size, n)

    def __repr__(self):
        return (
            f"TiledGridAccessor1d(lower={self.lower}, upper={self.upper}, "
            f"lengths={list(self._lengths)})"
        )

    @property
    def cindex(self) -> CircularIndex:
        return self._cindex

    @property
    def lower(self) -> int:
        return self._cindex.lower_bound

    @property
    def upper(self) -> int:
        return self._cindex.upper_bound

    @property
    def n_tiles(self) -> int:
        return len(self._lengths)

    def sublengths(self) -> tuple[int, ...]:
        return self._lengths

    def offsets(self) -> np.ndarray:
        """Global index of the first point of every tile."""
        starts = np.cumsum((0,) + self._lengths[:-1], dtype=np.int64)
        return starts + self.lower

    def bounds(self, iint: int) -> tuple[int, int]:
        """Inclusive global ``(first, last)`` indices of tile ``iint``."""
        if not 0 <= iint < self.n_tiles:
            raise OutOfBounds(f"tile index {iint} outside [0, {self.n_tiles})")
        first = self.lower + iint * self._lengths[0]
        return first, first + self._lengths[iint] - 1

    def g2l(self, iglob: int) -> tuple[int, int]:
        """Global index to ``(local index, tile index)``.

        ``iglob`` must lie in ``[lower, upper]``; it is then split as
        ``iglob = iint * lengths[0] + iloc`` without subtracting ``lower``.
        """
        iglob = self._cindex.at(iglob)
        # iglob = iint * le + iloc
        iint, iloc = divmod(iglob, self._lengths[0])
        return iloc, iint

    def l2g(self, iloc: int, iint: int) -> int:
        """Local index within tile ``iint`` to global index ``iint * lengths[0] + iloc``."""
        if not 0 <= iint < self.n_tiles:
            raise OutOfBounds(f"tile index {iint} outside [0, {self.n_tiles})")
        if not 0 <= iloc < self._lengths[iint]:
            raise LocalIndexOutOfRange(
                f"local index {iloc} outside tile {iint} of length {self._lengths[iint]}"
            )
        return iint * self._lengths[0] + iloc
