from __future__ import annotations

"""Linear maps on the (w, h) lattice.

Map1D is a 1x2 matrix projecting a lattice vector to a number (cents, MIDI
steps, ...). Map2D is a 2x2 matrix used for basis changes. Both accept
anything exposing numeric ``w`` and ``h`` attributes.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from .interval import Interval
    from .pitch import Pitch

Number = Union[int, float]


class LatticeVector(Protocol):
    @property
    def w(self) -> Number: ...

    @property
    def h(self) -> Number: ...


@dataclass(frozen=True)
class MapVec:
    """Untyped 2-vector produced by Map2D.map."""

    w: Number
    h: Number

    def to_pitch(self) -> "Pitch":
        from .pitch import Pitch

        return Pitch(int(self.w), int(self.h))

    def to_interval(self) -> "Interval":
        from .interval import Interval

        return Interval(int(self.w), int(self.h))


@dataclass(frozen=True)
class Map1D:
    m0: Number
    m1: Number

    def map(self, v: LatticeVector) -> Number:
        """Multiply the matrix with the vector, returning a number."""
        return self.m0 * v.w + self.m1 * v.h

    def compose(self, other: "Map2D") -> "Map1D":
        """Matrix product: ``self.compose(m).map(v) == self.map(m.map(v))``."""
        return Map1D(
            self.m0 * other.m00 + self.m1 * other.m10,
            self.m0 * other.m01 + self.m1 * other.m11,
        )


@dataclass(frozen=True)
class Map2D:
    m00: Number
    m01: Number
    m10: Number
    m11: Number

    def map(self, v: LatticeVector) -> MapVec:
        """Multiply the matrix with the vector, returning a MapVec."""
        return MapVec(
            self.m00 * v.w + self.m01 * v.h,
            self.m10 * v.w + self.m11 * v.h,
        )

    def compose(self, other: "Map2D") -> "Map2D":
        return Map2D(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
        )
