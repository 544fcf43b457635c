"""Errors raised by the grid indexing primitives."""
from __future__ import annotations


class GridIndexError(ValueError):
    """Base class for every indexing/tiling failure."""


class InvalidRange(GridIndexError):
    pass


class OutOfBounds(GridIndexError, IndexError):
    pass


class InvalidTileCount(GridIndexError):
    pass


class EmptyTile(GridIndexError):
    pass


class LocalIndexOutOfRange(GridIndexError, IndexError):
    pass


class InvalidDimensions(GridIndexError):
    pass
