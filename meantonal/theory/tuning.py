from __future__ import annotations

"""Tuning maps: render lattice vectors as cents, ratios, Hz and EDO steps.

A tuning is specified by the width of its perfect fifth in cents; the octave
is always 1200 cents. A reference pitch and frequency anchor absolute pitch
(C4 = 261.6255653 Hz unless told otherwise).
"""

import math
from functools import lru_cache
from typing import Iterable, Optional

import numpy as np

from ..errors import TuningError
from .constants import GENERATORS_TO
from .interval import Interval
from .linear_map import LatticeVector, Map1D
from .pitch import Pitch

DEFAULT_REFERENCE_PITCH = "C4"
DEFAULT_REFERENCE_FREQ = 261.6255653


class TuningMap:
    def __init__(
        self,
        fifth: float,
        reference_pitch: str = DEFAULT_REFERENCE_PITCH,
        reference_freq: float = DEFAULT_REFERENCE_FREQ,
        midi_map: Optional[Map1D] = None,
    ) -> None:
        if reference_freq <= 0:
            raise TuningError(f"Reference frequency must be positive: {reference_freq}")
        self.fifth = float(fifth)
        self.reference_pitch = Pitch.from_spn(reference_pitch)
        self.reference_freq = float(reference_freq)
        self.midi_map = midi_map
        # fifths/octaves -> cents, folded into the (w, h) basis
        self.cent_map = Map1D(self.fifth, 1200).compose(GENERATORS_TO)

    @classmethod
    def from_edo(
        cls,
        edo: int,
        reference_pitch: str = DEFAULT_REFERENCE_PITCH,
        reference_freq: float = DEFAULT_REFERENCE_FREQ,
    ) -> "TuningMap":
        """Equal division of the octave into ``edo`` parts.

        The fifth is the division step closest to a just 3/2. The same step
        count gives the integer map used by ``to_midi``.
        """
        if edo <= 0:
            raise TuningError(f"EDO must be a positive integer: {edo}")
        fifth_steps = round(math.log2(1.5) * edo)
        fifth = fifth_steps * 1200 / edo
        midi_map = Map1D(fifth_steps, edo).compose(GENERATORS_TO)
        return cls(fifth, reference_pitch, reference_freq, midi_map)

    def to_cents(self, m: LatticeVector) -> float:
        """Width of an Interval in cents."""
        return self.cent_map.map(m)

    def to_ratio(self, m: LatticeVector) -> float:
        """Frequency ratio of an Interval as a decimal number."""
        return 2 ** (self.to_cents(m) / 1200)

    def to_hz(self, p: Pitch) -> float:
        return self.reference_freq * self.to_ratio(self.reference_pitch.interval_to(p))

    def to_hz_array(self, pitches: Iterable[Pitch]) -> np.ndarray:
        """Vectorised ``to_hz`` over many pitches."""
        coords = np.array([(p.w, p.h) for p in pitches], dtype="float64").reshape(-1, 2)
        offsets = coords - np.array([self.reference_pitch.w, self.reference_pitch.h], dtype="float64")
        cents = offsets @ np.array([self.cent_map.m0, self.cent_map.m1], dtype="float64")
        return self.reference_freq * np.exp2(cents / 1200.0)

    def to_midi(self, p: Pitch) -> int:
        """Step number of ``p`` counted from C-1 in this EDO (the MIDI number in 12-EDO)."""
        if self.midi_map is None:
            raise TuningError("Tuning map has no step map; build it with TuningMap.from_edo")
        return int(self.midi_map.map(p))

    def interval_steps(self, m: Interval) -> int:
        """Size of an Interval in EDO steps."""
        if self.midi_map is None:
            raise TuningError("Tuning map has no step map; build it with TuningMap.from_edo")
        return int(self.midi_map.map(m))

    def __repr__(self) -> str:
        return (
            f"TuningMap(fifth={self.fifth!r}, reference_pitch={self.reference_pitch.spn!r}, "
            f"reference_freq={self.reference_freq!r})"
        )


@lru_cache(maxsize=1)
def twelve_edo() -> TuningMap:
    """Shared 12-EDO map used as the default tuning."""
    return TuningMap.from_edo(12)
