from __future__ import annotations

"""Pitch vectors.

A Pitch is a point in the (w, h) lattice: some number of whole steps and
diatonic half steps above C-1, the lowest MIDI note. Enharmonic spellings are
different points, so C#4 and Db4 never compare equal.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional, Sequence, Type

from ..errors import MidiRangeError
from .constants import LETTERS, OCTAVE
from .interval import Interval
from .linear_map import LatticeVector

if TYPE_CHECKING:
    from .tonality import TonalContext
    from .tuning import TuningMap


def _default_tuning(tuning_map: Optional["TuningMap"]) -> "TuningMap":
    if tuning_map is not None:
        return tuning_map
    from .tuning import twelve_edo

    return twelve_edo()


@dataclass(frozen=True)
class Pitch:
    w: int  # whole steps from C-1
    h: int  # half steps from C-1

    range: ClassVar[Type["PitchRange"]]

    @staticmethod
    def from_spn(spn: str) -> "Pitch":
        """Create a Pitch from a Scientific Pitch Notation string, e.g. "Eb4"."""
        from ..notation.spn import SPN

        return SPN.to_pitch(spn)

    @staticmethod
    def from_chroma(chroma: int, octave: int) -> "Pitch":
        """Create a Pitch from a chroma value and an SPN octave number.

        Starts from the lattice point (3*chroma, chroma), which has the right
        chroma, and shifts it by whole octaves until it lands in the octave.
        """
        w, h = chroma * 3, chroma
        target = octave + 1
        while w + h > 7 * target:
            w -= OCTAVE[0]
            h -= OCTAVE[1]
        while w + h < 7 * target:
            w += OCTAVE[0]
            h += OCTAVE[1]
        return Pitch(w, h)

    @property
    def midi(self) -> int:
        """Standard MIDI number.

        Raises:
            MidiRangeError: if outside 0 <= midi < 128.
        """
        midi = 2 * self.w + self.h
        if 0 <= midi < 128:
            return midi
        raise MidiRangeError(midi)

    @property
    def chroma(self) -> int:
        """The signed distance of a Pitch from C in perfect 5ths."""
        return self.w * 2 - self.h * 5

    @property
    def pc7(self) -> int:
        """0-indexed 7-tone pitch class: the letter name as a number, C is 0."""
        return (self.w + self.h) % 7

    @property
    def pc12(self) -> int:
        """12-tone pitch class, C is 0."""
        return self.midi % 12

    @property
    def letter(self) -> str:
        return LETTERS[self.pc7]

    @property
    def accidental(self) -> int:
        """0 natural, +1 / -1 sharp / flat, +2 / -2 double sharp / flat, etc."""
        return (self.chroma + 1) // 7

    @property
    def octave(self) -> int:
        """Octave number in SPN numbering."""
        return (self.w + self.h) // 7 - 1

    @property
    def spn(self) -> str:
        from ..notation.spn import SPN

        return SPN.from_pitch(self)

    def steps_to(self, p: "Pitch") -> int:
        """Signed number of diatonic steps up to ``p``."""
        return (p.w + p.h) - (self.w + self.h)

    def is_equal(self, p: "Pitch") -> bool:
        """True for identical vectors only; see ``is_enharmonic``."""
        return self.w == p.w and self.h == p.h

    def is_enharmonic(self, p: "Pitch", edo: int = 12) -> bool:
        """True if the two pitch classes coincide in the given EDO tuning."""
        return self.chroma % edo == p.chroma % edo

    def interval_to(self, p: "Pitch") -> Interval:
        return Interval.between(self, p)

    def transpose_real(self, m: LatticeVector) -> "Pitch":
        """Transpose by an Interval vector, returning a new Pitch."""
        return Pitch(self.w + m.w, self.h + m.h)

    def invert(self, axis: LatticeVector) -> "Pitch":
        """Reflect about ``axis``, the vector sum of two pitches that swap."""
        return Pitch(axis.w - self.w, axis.h - self.h)

    def degree_in(self, context: "TonalContext") -> int:
        """0-indexed scale degree in the context, 0 being the tonic."""
        return context.degree_number(self)

    def alteration_in(self, context: "TonalContext") -> int:
        """Scale degree alteration in the context.

        0 is diatonic, +1 / -1 raised / lowered, +2 / -2 too remote to belong
        to the context.
        """
        return context.degree_alteration(self)

    def snap_to(self, context: "TonalContext") -> "Pitch":
        return context.snap_diatonic(self)

    def transpose_diatonic(self, steps: int, context: "TonalContext") -> "Pitch":
        """Move by a generic interval of ``steps`` (0 is a unison), snapped to the context."""
        return self.transpose_real(Interval(steps, 0)).snap_to(context)

    @staticmethod
    def highest(pitches: Sequence["Pitch"], tuning_map: Optional["TuningMap"] = None) -> "Pitch":
        """Highest sounding pitch under the tuning (12-EDO by default).

        Ties go to the pitch spelled with fewer diatonic steps.
        """
        tuning = _default_tuning(tuning_map)
        if not pitches:
            raise ValueError("highest() needs at least one pitch")
        best = pitches[0]
        best_hz = tuning.to_hz(best)
        for p in pitches[1:]:
            hz = tuning.to_hz(p)
            if math.isclose(hz, best_hz, rel_tol=1e-9):
                if best.steps_to(p) < 0:
                    best, best_hz = p, hz
            elif hz > best_hz:
                best, best_hz = p, hz
        return best

    @staticmethod
    def lowest(pitches: Sequence["Pitch"], tuning_map: Optional["TuningMap"] = None) -> "Pitch":
        """Lowest sounding pitch under the tuning (12-EDO by default).

        Ties go to the pitch spelled with fewer diatonic steps.
        """
        tuning = _default_tuning(tuning_map)
        if not pitches:
            raise ValueError("lowest() needs at least one pitch")
        best = pitches[0]
        best_hz = tuning.to_hz(best)
        for p in pitches[1:]:
            hz = tuning.to_hz(p)
            if math.isclose(hz, best_hz, rel_tol=1e-9):
                if best.steps_to(p) < 0:
                    best, best_hz = p, hz
            elif hz < best_hz:
                best, best_hz = p, hz
        return best

    def nearest(self, pitches: Sequence["Pitch"], tuning_map: Optional["TuningMap"] = None) -> "Pitch":
        """The candidate sounding closest to this pitch.

        Distance is the oriented ratio max(f/g, g/f), so the search does not
        favour either direction. Ties go to the fewest diatonic steps away.
        """
        tuning = _default_tuning(tuning_map)
        if not pitches:
            raise ValueError("nearest() needs at least one pitch")
        own = tuning.to_hz(self)

        def oriented(p: "Pitch") -> float:
            hz = tuning.to_hz(p)
            return max(hz / own, own / hz)

        best = pitches[0]
        best_ratio = oriented(best)
        for p in pitches[1:]:
            ratio = oriented(p)
            if math.isclose(ratio, best_ratio, rel_tol=1e-9):
                if abs(self.steps_to(p)) < abs(self.steps_to(best)):
                    best, best_ratio = p, ratio
            elif ratio < best_ratio:
                best, best_ratio = p, ratio
        return best

    def __str__(self) -> str:
        return self.spn


@dataclass(frozen=True)
class Axis:
    """Inversion axis, defined by two pitches that invert to each other."""

    w: int
    h: int

    @staticmethod
    def between(p: Pitch, q: Pitch) -> "Axis":
        return Axis(p.w + q.w, p.h + q.h)

    @staticmethod
    def from_spn(ps: str, qs: str) -> "Axis":
        """e.g. Axis.from_spn("C4", "G4")"""
        return Axis.between(Pitch.from_spn(ps), Pitch.from_spn(qs))


class PitchRange:
    """Generators over runs of pitches. Each call starts afresh."""

    @staticmethod
    def diatonic(start: Pitch, end: Pitch, context: "TonalContext") -> Iterator[Pitch]:
        """Diatonic pitches of the context from ``start`` (snapped) up to ``end``."""
        m = start
        yield m.snap_to(context)
        while m.steps_to(end) > 0:
            m = m.transpose_diatonic(1, context)
            yield m

    @staticmethod
    def chromatic(start: Pitch, end: Pitch, context: "TonalContext") -> Iterator[Pitch]:
        """Every diatonic or singly altered spelling from ``start`` up to ``end``.

        Pitches come grouped by the whole-step column of the lattice. Columns
        are bounded by the context's mi degrees: between two consecutive mi
        the half-step row floor stays fixed, so sharps and flats are produced
        once each and E#/Fb style spellings across a half step never appear.
        """
        w, h = start.w, start.h
        floor = context.nearest_mi_below(start).h
        middle = context.next_mi_above(context.nearest_mi_below(start))

        while middle.steps_to(end) > 0:
            while w <= middle.w - 1:
                while h <= middle.h + 1:
                    p = Pitch(w, h)
                    if p.steps_to(start) <= 0:
                        yield p
                    h += 1
                h = floor
                w += 1
            floor = middle.h
            middle = context.next_mi_above(middle)

        while w <= end.w:
            while h <= middle.h + 1:
                p = Pitch(w, h)
                if p.steps_to(end) < 0:
                    return
                yield p
                h += 1
            h = floor
            w += 1


Pitch.range = PitchRange
