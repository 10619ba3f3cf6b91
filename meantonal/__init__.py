"""meantonal: pitch and interval arithmetic on the whole-step/half-step lattice.

Pitches, intervals and keys are integer vectors, so enharmonic spellings stay
distinct; tuning maps render them as cents, Hz or EDO steps, and notation
adapters convert to and from SPN, LilyPond, Helmholtz and ABC names.
"""

from __future__ import annotations

from .errors import (
    MeantonalError,
    MidiRangeError,
    NotationError,
    TuningError,
    UnknownModeError,
)
from .notation import ABC, SPN, Helmholtz, LilyPond, parse_pitch, render_pitch
from .theory import (
    EDO7,
    EDO12,
    EDO17,
    EDO19,
    EDO22,
    EDO31,
    EDO50,
    EDO53,
    EDO55,
    EDO81,
    GENERATORS_FROM,
    GENERATORS_TO,
    LETTER_COORDS,
    MODES,
    WICKI_FROM,
    WICKI_TO,
    Axis,
    Chroma,
    Interval,
    Map1D,
    Map2D,
    MapVec,
    Pitch,
    TonalContext,
    TuningMap,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ABC",
    "Axis",
    "Chroma",
    "EDO7",
    "EDO12",
    "EDO17",
    "EDO19",
    "EDO22",
    "EDO31",
    "EDO50",
    "EDO53",
    "EDO55",
    "EDO81",
    "GENERATORS_FROM",
    "GENERATORS_TO",
    "Helmholtz",
    "Interval",
    "LETTER_COORDS",
    "LilyPond",
    "MODES",
    "Map1D",
    "Map2D",
    "MapVec",
    "MeantonalError",
    "MidiRangeError",
    "NotationError",
    "Pitch",
    "SPN",
    "TonalContext",
    "TuningError",
    "TuningMap",
    "UnknownModeError",
    "WICKI_FROM",
    "WICKI_TO",
    "parse_pitch",
    "render_pitch",
]
