from .neighbours import neighbours, neighbour_table
from .decompose import TileSpan, row_tiles, split_rows, gather_rows

__all__ = [
    "neighbours",
    "neighbour_table",
    "TileSpan",
    "row_tiles",
    "split_rows",
    "gather_rows",
]
