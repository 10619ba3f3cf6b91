from __future__ import annotations

"""Lattice constants: letter coordinates, mode numbers and linear maps.

All pitches and intervals live in the (w, h) lattice: w counts whole steps,
h counts diatonic half steps.
"""

from typing import Dict, Tuple

from .linear_map import Map1D, Map2D


LETTERS = "CDEFGAB"

# (w, h) of each natural letter in octave -1, C..B
LETTER_COORDS: Tuple[Tuple[int, int], ...] = (
    (0, 0),  # C
    (1, 0),  # D
    (2, 0),  # E
    (2, 1),  # F
    (3, 1),  # G
    (4, 1),  # A
    (5, 1),  # B
)

# the octave as a lattice vector: 5 whole steps + 2 half steps
OCTAVE: Tuple[int, int] = (5, 2)

# Modes numbered in ascending fifths from Lydian.
MODES: Dict[str, int] = {
    "LYDIAN": 0,
    "IONIAN": 1,
    "MIXOLYDIAN": 2,
    "DORIAN": 3,
    "AEOLIAN": 4,
    "PHRYGIAN": 5,
    "LOCRIAN": 6,
    "MAJOR": 1,
    "MINOR": 4,
}

# accidental characters shared by SPN, Helmholtz and tonic strings
ACCIDENTALS: Dict[str, int] = {
    "#": 1,
    "x": 2,
    "b": -1,
    "w": -2,
}

# (whole step, half step) -> step count in the given equal division
EDO7 = Map1D(1, 1)
EDO12 = Map1D(2, 1)
EDO17 = Map1D(3, 1)
EDO19 = Map1D(3, 2)
EDO22 = Map1D(4, 1)
EDO31 = Map1D(5, 3)
EDO50 = Map1D(8, 5)
EDO53 = Map1D(9, 4)
EDO55 = Map1D(9, 5)
EDO81 = Map1D(13, 8)

EDO_MAPS: Dict[int, Map1D] = {
    7: EDO7,
    12: EDO12,
    17: EDO17,
    19: EDO19,
    22: EDO22,
    31: EDO31,
    50: EDO50,
    53: EDO53,
    55: EDO55,
    81: EDO81,
}

# Wicki-Hayden keyboard coordinates
WICKI_TO = Map2D(1, -3, 0, 1)
WICKI_FROM = Map2D(1, 3, 0, 1)

# (w, h) <-> (fifths, octaves)
GENERATORS_TO = Map2D(2, -5, -1, 3)
GENERATORS_FROM = Map2D(3, 5, 1, 2)


def letter_index(letter: str) -> int:
    """Return 0..6 for C..B (case-insensitive)."""
    return LETTERS.index(letter.upper())


def accidental_value(accidentals: str) -> int:
    """Sum the accidental characters of an SPN-style accidental string."""
    return sum(ACCIDENTALS[c] for c in accidentals)
