"""Lattice arithmetic: pitches, intervals, keys and tunings."""

from .chroma import Chroma  # noqa: F401
from .constants import (  # noqa: F401
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
    EDO_MAPS,
    GENERATORS_FROM,
    GENERATORS_TO,
    LETTER_COORDS,
    MODES,
    WICKI_FROM,
    WICKI_TO,
)
from .interval import Interval, IntervalRange  # noqa: F401
from .linear_map import LatticeVector, Map1D, Map2D, MapVec  # noqa: F401
from .pitch import Axis, Pitch, PitchRange  # noqa: F401
from .tonality import TonalContext, Tonic  # noqa: F401
from .tuning import TuningMap, twelve_edo  # noqa: F401
