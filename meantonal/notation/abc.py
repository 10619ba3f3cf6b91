from __future__ import annotations

"""ABC notation note names: "C", "c", "c'", "_B,", "^^f".

Uppercase C is middle C (C4). Accidentals come first: ^ sharp, _ flat,
= natural.
"""

import re

from ..errors import NotationError
from ..theory.constants import LETTER_COORDS, OCTAVE, letter_index
from ..theory.pitch import Pitch


_ABC_RE = re.compile(r"^([_=^]+)?([A-Ga-g])((?:'|,)*)$")


class ABC:
    @staticmethod
    def to_pitch(text: str) -> Pitch:
        match = _ABC_RE.match(text)
        if not match:
            raise NotationError(text, "ABC note name")
        accidentals, letter, marks = match.groups()
        accidentals = accidentals or ""

        accidental = accidentals.count("^") - accidentals.count("_")
        if letter.isupper():
            octave = 5 - marks.count(",")
        else:
            octave = 6 + marks.count("'")

        w, h = LETTER_COORDS[letter_index(letter)]
        w += accidental + OCTAVE[0] * octave
        h += -accidental + OCTAVE[1] * octave
        return Pitch(w, h)

    @staticmethod
    def from_pitch(p: Pitch) -> str:
        accidental = ""
        if p.accidental > 0:
            accidental = "^" * p.accidental
        elif p.accidental < 0:
            accidental = "_" * -p.accidental

        if p.octave > 4:
            return accidental + p.letter.lower() + "'" * (p.octave - 5)
        return accidental + p.letter + "," * (4 - p.octave)
