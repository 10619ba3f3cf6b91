from __future__ import annotations

"""LilyPond absolute note names: "c'", "fis", "eeses,,".

An unmarked name lies in octave 3; each ' raises and each , lowers an octave.
"""

import re

from ..errors import NotationError
from ..theory.constants import LETTER_COORDS, OCTAVE, letter_index
from ..theory.pitch import Pitch


_LILY_RE = re.compile(r"^([a-g])((?:is|es)*)((?:'|,)*)$")


class LilyPond:
    @staticmethod
    def to_pitch(text: str) -> Pitch:
        match = _LILY_RE.match(text)
        if not match:
            raise NotationError(text, "LilyPond note name")
        letter, accidentals, marks = match.groups()

        accidental = accidentals.count("is") - accidentals.count("es")
        octave = 4 + marks.count("'") - marks.count(",")

        w, h = LETTER_COORDS[letter_index(letter)]
        w += accidental + OCTAVE[0] * octave
        h += -accidental + OCTAVE[1] * octave
        return Pitch(w, h)

    @staticmethod
    def from_pitch(p: Pitch) -> str:
        result = p.letter.lower()
        if p.accidental > 0:
            result += "is" * p.accidental
        elif p.accidental < 0:
            result += "es" * -p.accidental

        octave = p.octave - 3
        if octave > 0:
            result += "'" * octave
        elif octave < 0:
            result += "," * -octave
        return result
