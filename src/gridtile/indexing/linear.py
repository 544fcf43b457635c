"""Conversion between linear and cartesian indices on a 2D grid.

The mapping methods perform no bounds checking: coordinates outside
``[0, ni) x [0, nj)`` give well-defined but meaningless results. Callers on
the per-site hot path validate beforehand (e.g. with ``Circular2dIndex.at``)
when they need safety. Both Python ints and numpy integer arrays are accepted.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidDimensions


@dataclass(frozen=True)
class LinearAccessor2d:
    ni: int
    nj: int

    def __post_init__(self):
        if self.ni <= 0 or self.nj <= 0:
            raise InvalidDimensions(f"grid extents must be positive, got ({self.ni}, {self.nj})")

    @property
    def shape(self) -> tuple[int, int]:
        return self.ni, self.nj

    @property
    def size(self) -> int:
        return self.ni * self.nj

    def cart2lin_rm(self, co):
        """Cartesian coordinates to row-major linear index."""
        return co[1] + self.nj * co[0]

    def cart2lin_cm(self, co):
        """Cartesian coordinates to column-major linear index."""
        return co[0] + self.ni * co[1]

    def lin2cart_rm(self, lin):
        """Row-major linear index to cartesian coordinates ``(i, j)``."""
        j = lin % self.nj
        return (lin - j) // self.nj, j

    def lin2cart_cm(self, lin):
        """Column-major linear index to cartesian coordinates ``(i, j)``."""
        i = lin % self.ni
        return i, (lin - i) // self.ni
