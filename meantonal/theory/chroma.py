from __future__ import annotations

"""Chroma helpers.

Chroma is the signed distance of a pitch (or interval) from C (or the unison)
measured in perfect fifths: F=-1, C=0, G=1, D=2, ...
"""

from .constants import LETTERS


class Chroma:
    @staticmethod
    def to_letter(chroma: int) -> str:
        """Letter name of the pitch class with this chroma."""
        return LETTERS[(chroma * 4) % 7]

    @staticmethod
    def to_accidental(chroma: int) -> int:
        """Accidental of the pitch class with this chroma.

        0 is natural, +1 / -1 sharp / flat, +2 / -2 double sharp / double
        flat, and so on for arbitrarily remote accidentals.
        """
        return (chroma + 1) // 7
