from __future__ import annotations

"""Scientific Pitch Notation: "C4", "F#3", "Bbb-1", "Fx5".

``x`` is a double sharp and ``w`` a double flat.
"""

import re

from ..errors import NotationError
from ..theory.constants import LETTER_COORDS, OCTAVE, accidental_value, letter_index
from ..theory.pitch import Pitch


_SPN_RE = re.compile(r"^([A-Ga-g])([#bxw]+)?(-?\d+)$")


def accidental_suffix(accidental: int) -> str:
    """SPN-style accidental string: "x" for exactly +2, else repeated "#"/"b"."""
    if accidental == 2:
        return "x"
    if accidental > 0:
        return "#" * accidental
    return "b" * -accidental


class SPN:
    @staticmethod
    def to_pitch(spn: str) -> Pitch:
        match = _SPN_RE.match(spn)
        if not match:
            raise NotationError(spn, "SPN")
        letter, accidentals, octave_str = match.groups()
        octave = int(octave_str) + 1

        w, h = LETTER_COORDS[letter_index(letter)]
        accidental = accidental_value(accidentals or "")
        w += accidental + OCTAVE[0] * octave
        h += -accidental + OCTAVE[1] * octave
        return Pitch(w, h)

    @staticmethod
    def from_pitch(p: Pitch) -> str:
        return f"{p.letter}{accidental_suffix(p.accidental)}{p.octave}"
