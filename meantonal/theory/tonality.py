from __future__ import annotations

"""Tonal contexts (keys and modes).

A TonalContext is not a collection of pitches but a rule for reading any
Pitch against a key: which scale degree it is, how far it is altered from
the diatonic form, and where the diatonic form lies.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

from ..errors import NotationError, UnknownModeError
from .chroma import Chroma
from .constants import LETTER_COORDS, MODES, accidental_value, letter_index
from .pitch import Pitch


_TONIC_RE = re.compile(r"^([A-Ga-g])([#bxw]+)?$")


@dataclass(frozen=True)
class Tonic:
    letter: str
    accidental: int
    chroma: int


@dataclass(frozen=True)
class TonalContext:
    """A key or mode.

    Built from the chroma of the tonic (its signed distance from C in perfect
    5ths) and the mode number, counted in ascending 5ths from Lydian = 0:
    ``TonalContext(0, 1)`` is C major, ``TonalContext(-3, 5)`` Eb phrygian.
    """

    chroma: int
    mode: int
    tonic: Tonic = field(init=False, compare=False)
    chroma_offset: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        tonic = Tonic(
            letter=Chroma.to_letter(self.chroma),
            accidental=Chroma.to_accidental(self.chroma),
            chroma=self.chroma,
        )
        object.__setattr__(self, "tonic", tonic)
        object.__setattr__(self, "chroma_offset", self.mode - self.chroma)

    @staticmethod
    def from_strings(tonic: str, mode: str) -> "TonalContext":
        """Create a context from a tonic name and a mode name.

        e.g. ``TonalContext.from_strings("C#", "Dorian")``. Mode names are
        case-insensitive; "major" and "minor" are accepted as aliases.

        Raises:
            NotationError: malformed tonic string.
            UnknownModeError: mode name not in the table.
        """
        match = _TONIC_RE.match(tonic)
        if not match:
            raise NotationError(tonic, "tonic")
        mode_number = MODES.get(mode.upper())
        if mode_number is None:
            raise UnknownModeError(mode)

        w, h = LETTER_COORDS[letter_index(match.group(1))]
        accidental = accidental_value(match.group(2) or "")
        w += accidental
        h -= accidental
        return TonalContext(2 * w - 5 * h, mode_number)

    def degree_number(self, p: Pitch) -> int:
        """0-indexed scale degree of ``p``, ignoring accidentals."""
        return (p.w + p.h - letter_index(self.tonic.letter)) % 7

    def degree_alteration(self, p: Pitch) -> int:
        """0 diatonic, +1 / -1 raised / lowered, +2 / -2 too remote."""
        x = p.chroma + self.chroma_offset
        if 0 <= x < 7:
            return 0
        if 7 <= x < 12:
            return 1
        if -5 <= x < 0:
            return -1
        if x < -5:
            return -2
        return 2

    def degree_chroma(self, degree: int) -> int:
        """Chroma of the diatonic form of a 0-indexed scale degree."""
        return (degree * 2 + self.mode) % 7 - self.chroma_offset

    def snap_diatonic(self, p: Pitch) -> Pitch:
        """Move ``p`` to the diatonic spelling of its letter, e.g. F4 -> F#4 in D major."""
        w, h = p.w, p.h
        while self.degree_alteration(Pitch(w, h)) > 0:
            w -= 1
            h += 1
        while self.degree_alteration(Pitch(w, h)) < 0:
            w += 1
            h -= 1
        return Pitch(w, h)

    def _mi_chromas(self) -> Tuple[int, int]:
        # the two scale positions sitting below a diatonic half step
        return 6 - self.chroma_offset, 5 - self.chroma_offset

    def nearest_mi_below(self, p: Pitch) -> Pitch:
        """Closest mi degree at or below ``p``, as a diatonic pitch of the context."""
        chroma = p.chroma
        steps = max(-((3 * (mi - chroma)) % 7) for mi in self._mi_chromas())
        return p.transpose_diatonic(steps, self)

    def next_mi_above(self, p: Pitch) -> Pitch:
        """The mi degree reached by walking up from ``p`` past the other mi.

        Starting on a mi, this is the following mi; elsewhere the farther of
        the two candidates within the next octave.
        """
        chroma = p.chroma
        steps = max((3 * (chroma - mi)) % 7 for mi in self._mi_chromas())
        return p.transpose_diatonic(steps, self)
