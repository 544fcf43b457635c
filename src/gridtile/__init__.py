"""Toroidal indexing, linear/cartesian mappings and 1D tiling for regular grids."""
from .errors import (
    GridIndexError,
    InvalidRange,
    OutOfBounds,
    InvalidTileCount,
    EmptyTile,
    LocalIndexOutOfRange,
    InvalidDimensions,
)
from .indexing import CircularIndex, Circular2dIndex, LinearAccessor2d, TiledGridAccessor1d

__all__ = [
    "GridIndexError",
    "InvalidRange",
    "OutOfBounds",
    "InvalidTileCount",
    "EmptyTile",
    "LocalIndexOutOfRange",
    "InvalidDimensions",
    "CircularIndex",
    "Circular2dIndex",
    "LinearAccessor2d",
    "TiledGridAccessor1d",
]
