"""Circular (toroidal) indices in one and two dimensions."""
from __future__ import annotations

import numbers
from dataclasses import dataclass

from ..errors import InvalidRange, OutOfBounds


@dataclass(frozen=True)
class CircularIndex:
    """Closed interval ``[lower_bound, upper_bound]`` that wraps onto itself.

    Stepping past ``upper_bound`` returns ``lower_bound`` and vice versa.
    """

    lower_bound: int
    upper_bound: int

    def __post_init__(self):
        if self.lower_bound >= self.upper_bound:
            raise InvalidRange(
                f"lower bound {self.lower_bound} must be below upper bound {self.upper_bound}"
            )

    @property
    def size(self) -> int:
        return self.upper_bound - self.lower_bound + 1

    def __len__(self) -> int:
        return self.size

    def __contains__(self, i) -> bool:
        return self.lower_bound <= i <= self.upper_bound

    def __iter__(self):
        return iter(range(self.lower_bound, self.upper_bound + 1))

    def at(self, i: int) -> int:
        """Return ``i`` if it is an integer in the interval, raise ``OutOfBounds`` otherwise."""
        if isinstance(i, numbers.Integral) and i in self:
            return i
        raise OutOfBounds(f"index {i} outside [{self.lower_bound}, {self.upper_bound}]")

    def next(self, i: int) -> int:
        i = self.at(i)
        if i < self.upper_bound:
            return i + 1
        return self.lower_bound

    def previous(self, i: int) -> int:
        i = self.at(i)
        if i > self.lower_bound:
            return i - 1
        return self.upper_bound


@dataclass(frozen=True, init=False)
class Circular2dIndex:
    """Pair of independent circular indices, one per axis.

    Each step moves along a single axis; the other coordinate is only
    validated and passed through unchanged.
    """

    i_index: CircularIndex
    j_index: CircularIndex

    def __init__(self, lb_i: int, ub_i: int, lb_j: int, ub_j: int):
        object.__setattr__(self, "i_index", CircularIndex(lb_i, ub_i))
        object.__setattr__(self, "j_index", CircularIndex(lb_j, ub_j))

    @property
    def shape(self) -> tuple[int, int]:
        return self.i_index.size, self.j_index.size

    def at(self, i: int, j: int) -> tuple[int, int]:
        return self.i_index.at(i), self.j_index.at(j)

    def next_i(self, i: int, j: int) -> tuple[int, int]:
        return self.i_index.next(i), self.j_index.at(j)

    def previous_i(self, i: int, j: int) -> tuple[int, int]:
        return self.i_index.previous(i), self.j_index.at(j)

    def next_j(self, i: int, j: int) -> tuple[int, int]:
        return self.i_index.at(i), self.j_index.next(j)

    def previous_j(self, i: int, j: int) -> tuple[int, int]:
        return self.i_index.at(i), self.j_index.previous(j)
