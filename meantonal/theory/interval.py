from __future__ import annotations

"""Interval vectors.

An Interval is the distance between two Pitch vectors in the same (w, h)
basis. It can be built directly from whole/half step counts, from a standard
interval name (``Interval.from_name("P5")``) or from two pitches
(``Interval.between(p, q)``).
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Type

from ..errors import NotationError
from .constants import LETTER_COORDS, OCTAVE
from .linear_map import LatticeVector

if TYPE_CHECKING:
    from .pitch import Pitch


_NAME_RE = re.compile(r"^-?([PpMmAaDd#b]+)?(\d+)$")

# simple stepspans whose natural form is perfect (unison, 4th, 5th)
PERFECT_CLASS = (0, 3, 4)


def _quality_band(chroma: int) -> int:
    if abs(chroma) <= 1:
        return 0
    if 0 < chroma <= 5:
        return (chroma + 5) // 7
    if -5 <= chroma < 0:
        return -((5 - chroma) // 7)
    if chroma > 5:
        return (chroma + 8) // 7
    return (chroma - 2) // 7


@dataclass(frozen=True)
class Interval:
    w: int
    h: int

    range: ClassVar[Type["IntervalRange"]]

    @staticmethod
    def from_name(name: str) -> "Interval":
        """Parse a standard interval name such as ``P5``, ``m3``, ``AA4`` or ``-M3``.

        Quality letters: ``A``/``a``/``#`` augment, ``m``/``b`` lower by one,
        ``d``/``D`` diminish: by one on unisons, fourths and fifths, by two
        on every other size. ``P``/``p``/``M`` leave the natural form alone.
        A bare number is the major/perfect interval. Sizes above 8 are
        compound.

        Raises:
            NotationError: if the name does not match the grammar.
        """
        match = _NAME_RE.match(name)
        if not match:
            raise NotationError(name, "interval name")
        qualities = match.group(1) or ""
        size = int(match.group(2))
        if size < 1:
            raise NotationError(name, "interval name", "generic size must be at least 1")

        simple = (size - 1) % 7
        octaves = (size - 1) // 7
        w, h = LETTER_COORDS[simple]
        w += OCTAVE[0] * octaves
        h += OCTAVE[1] * octaves

        adjustment = 0
        diminished = 0
        for c in qualities:
            if c in "Aa#":
                adjustment += 1
            elif c in "mb":
                adjustment -= 1
            elif c in "Dd":
                diminished += 1
        if diminished:
            # no minor perfect interval: each d on an imperfect size lowers by two
            if simple in PERFECT_CLASS:
                adjustment -= diminished
            else:
                adjustment -= 2 * diminished

        w += adjustment
        h -= adjustment
        sign = -1 if name.startswith("-") else 1
        return Interval(sign * w, sign * h)

    @staticmethod
    def from_spn(ps: str, qs: str) -> "Interval":
        """Interval between two SPN note names, e.g. ("C4", "E4") -> M3."""
        from .pitch import Pitch

        return Interval.between(Pitch.from_spn(ps), Pitch.from_spn(qs))

    @staticmethod
    def between(p: "LatticeVector", q: "LatticeVector") -> "Interval":
        return Interval(q.w - p.w, q.h - p.h)

    @property
    def chroma(self) -> int:
        """Signed distance from the unison in perfect 5ths."""
        return self.w * 2 - self.h * 5

    @property
    def quality(self) -> int:
        """Quality as a signed number.

        0 is perfect, +1 / -1 major / minor, +2 / -2 augmented / diminished,
        and so on. Descending intervals report the quality of their ascending
        mirror, so a descending major 3rd is still +1.
        """
        q = _quality_band(self.chroma)
        return -q if self.stepspan < 0 else q

    @property
    def stepspan(self) -> int:
        """Number of diatonic steps: 0 is the unison, 1 a generic second."""
        return self.w + self.h

    @property
    def pc7(self) -> int:
        return self.stepspan % 7

    @property
    def pc12(self) -> int:
        return (self.w * 2 + self.h) % 12

    @property
    def is_diatonic(self) -> bool:
        """True for intervals found between two notes of one diatonic scale."""
        return abs(self.chroma) < 7

    @property
    def name(self) -> str:
        """Conventional name: "P5", "dd6", "-M3".

        Reads back through ``from_name`` except on multiply diminished
        imperfect sizes, where each parsed ``d`` lowers by two.
        """
        sign = ""
        m = self
        if self.stepspan < 0:
            sign = "-"
            m = self.negative
        q = m.quality
        if m.pc7 in PERFECT_CLASS:
            if q == 0:
                quality = "P"
            elif q > 0:
                quality = "A" * (q - 1)
            else:
                quality = "d" * (-q - 1)
        elif q == 1:
            quality = "M"
        elif q == -1:
            quality = "m"
        elif q > 1:
            quality = "A" * (q - 1)
        else:
            quality = "d" * (-q - 1)
        return f"{sign}{quality}{m.stepspan + 1}"

    def is_equal(self, m: "Interval") -> bool:
        """True for identical vectors; enharmonic spellings are not equal."""
        return self.w == m.w and self.h == m.h

    def is_enharmonic(self, m: "Interval", edo: int = 12) -> bool:
        """True if both intervals have the same size in the given EDO."""
        return self.chroma % edo == m.chroma % edo

    @property
    def negative(self) -> "Interval":
        """The same interval in the opposite direction."""
        return Interval(-self.w, -self.h)

    def add(self, m: "Interval") -> "Interval":
        return Interval(self.w + m.w, self.h + m.h)

    def subtract(self, m: "Interval") -> "Interval":
        return Interval(self.w - m.w, self.h - m.h)

    @property
    def simple(self) -> "Interval":
        """The interval reduced to within an octave, keeping its direction."""
        octaves = abs(self.stepspan) // 7
        if self.stepspan < 0:
            octaves = -octaves
        return Interval(self.w - OCTAVE[0] * octaves, self.h - OCTAVE[1] * octaves)

    def __add__(self, m: "Interval") -> "Interval":
        return self.add(m)

    def __sub__(self, m: "Interval") -> "Interval":
        return self.subtract(m)

    def __neg__(self) -> "Interval":
        return self.negative

    def __str__(self) -> str:
        return self.name


class IntervalRange:
    """Generators over sets of interval vectors. Each call starts afresh."""

    @staticmethod
    def diatonic(start: Interval, end: Interval) -> Iterator[Interval]:
        """Ascending diatonic intervals from ``start`` to ``end`` inclusive.

        Walks stepspan by stepspan; within one stepspan the candidates are
        the (at most two) diatonic spellings, smallest first.
        """
        first, last = start.stepspan, end.stepspan
        for steps in range(first, last + 1):
            # chroma of (w, steps - w) is 7w - 5steps; diatonic needs |.| < 7
            low = -((5 * steps - 6) // -7)
            high = (5 * steps + 6) // 7
            for w in range(low, high + 1):
                m = Interval(w, steps - w)
                if not m.is_diatonic:
                    continue
                if steps == first and w < start.w:
                    continue
                if steps == last and w > end.w:
                    continue
                yield m

    @staticmethod
    def melodic() -> Iterator[Interval]:
        """Simple ascending intervals usable as melodic steps.

        Everything in the box w in [0, 5], h in [0, 2] closer than a tritone
        to the unison in fifths, leaving out sevenths.
        """
        for w in range(0, 6):
            for h in range(0, 3):
                m = Interval(w, h)
                if abs(m.chroma) < 6 and m.stepspan != 6:
                    yield m


Interval.range = IntervalRange
