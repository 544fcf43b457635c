from .circular import CircularIndex, Circular2dIndex
from .linear import LinearAccessor2d
from .tiled import TiledGridAccessor1d, tile_lengths

__all__ = [
    "CircularIndex",
    "Circular2dIndex",
    "LinearAccessor2d",
    "TiledGridAccessor1d",
    "tile_lengths",
]
