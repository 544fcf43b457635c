"""NPZ persistence for neighbour tables and tile layouts."""
from __future__ import annotations

import numpy as np

from ..lattice.decompose import TileSpan


def save_npz(path: str, **arrays):
    np.savez_compressed(path, **arrays)


def load_npz(path: str):
    with np.load(path) as data:
        return {k: data[k] for k in data.files}


def save_decomposition(path: str, spans, neighbours=None):
    """Store tile spans as ``[n_tiles, 4]`` rows of (start, stop, lin_start, lin_stop)."""
    arrays = {
        "tiles": np.array(
            [(s.start, s.stop, s.lin_start, s.lin_stop) for s in spans], dtype=np.int64
        ).reshape(-1, 4)
    }
    if neighbours is not None:
        arrays["neighbours"] = np.asarray(neighbours, dtype=np.int64)
    save_npz(path, **arrays)


def load_decomposition(path: str):
    data = load_npz(path)
    spans = [
        TileSpan(tile=k, start=int(a), stop=int(b), lin_start=int(c), lin_stop=int(d))
        for k, (a, b, c, d) in enumerate(data["tiles"])
    ]
    return spans, data.get("neighbours")
