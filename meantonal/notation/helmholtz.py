from __future__ import annotations

"""Helmholtz pitch notation: "C,", "C", "c", "c'", "f#''".

Uppercase letters cover octave 2 and below (one , per octave down),
lowercase letters octave 3 and above (one ' per octave up).
"""

import re

from ..errors import NotationError
from ..theory.constants import LETTER_COORDS, OCTAVE, accidental_value, letter_index
from ..theory.pitch import Pitch
from .spn import accidental_suffix


_HELMHOLTZ_RE = re.compile(r"^([A-Ga-g])([#bxw]+)?((?:'|,)*)$")


class Helmholtz:
    @staticmethod
    def to_pitch(text: str) -> Pitch:
        match = _HELMHOLTZ_RE.match(text)
        if not match:
            raise NotationError(text, "Helmholtz note name")
        letter, accidentals, marks = match.groups()

        if letter.isupper():
            octave = 3 - marks.count(",")
        else:
            octave = 4 + marks.count("'")
        accidental = accidental_value(accidentals or "")

        w, h = LETTER_COORDS[letter_index(letter)]
        w += accidental + OCTAVE[0] * octave
        h += -accidental + OCTAVE[1] * octave
        return Pitch(w, h)

    @staticmethod
    def from_pitch(p: Pitch) -> str:
        accidental = accidental_suffix(p.accidental)
        if p.octave > 2:
            return p.letter.lower() + accidental + "'" * (p.octave - 3)
        return p.letter + accidental + "," * (2 - p.octave)
