"""Nearest-neighbour lookup on a periodic 2D lattice."""
from __future__ import annotations

import numpy as np

from ..indexing.circular import CircularIndex, Circular2dIndex
from ..indexing.linear import LinearAccessor2d

ORDERS = ("rm", "cm")


def neighbours(index: Circular2dIndex, i: int, j: int):
    """Four nearest neighbours of ``(i, j)``: next_i, previous_i, next_j, previous_j."""
    return (
        index.next_i(i, j),
        index.previous_i(i, j),
        index.next_j(i, j),
        index.previous_j(i, j),
    )


def _steps(cindex: CircularIndex):
    nxt = np.array([cindex.next(k) for k in cindex], dtype=np.int64)
    prv = np.array([cindex.previous(k) for k in cindex], dtype=np.int64)
    return nxt, prv


def neighbour_table(ni: int, nj: int, order: str = "rm") -> np.ndarray:
    """Return an ``[ni * nj, 4]`` table of neighbour linear indices.

    Row ``k`` holds the neighbours of the site whose linear index is ``k``,
    in the same order as :func:`neighbours`.
    """
    if order not in ORDERS:
        raise ValueError(f"Unknown order: {order}")
    la = LinearAccessor2d(ni, nj)
    index = Circular2dIndex(0, ni - 1, 0, nj - 1)
    next_i, prev_i = _steps(index.i_index)
    next_j, prev_j = _steps(index.j_index)

    lin = np.arange(la.size, dtype=np.int64)
    if order == "rm":
        i, j = la.lin2cart_rm(lin)
        to_lin = la.cart2lin_rm
    else:
        i, j = la.lin2cart_cm(lin)
        to_lin = la.cart2lin_cm
    return np.stack(
        [
            to_lin((next_i[i], j)),
            to_lin((prev_i[i], j)),
            to_lin((i, next_j[j])),
            to_lin((i, prev_j[j])),
        ],
        axis=1,
    )
