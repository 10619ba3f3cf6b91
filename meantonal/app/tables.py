from __future__ import annotations

"""Tabular views of pitches and intervals as pandas DataFrames."""

from typing import Iterable, List, Optional

import pandas as pd

from ..errors import MidiRangeError
from ..notation import render_pitch
from ..theory.interval import Interval
from ..theory.pitch import Pitch
from ..theory.tonality import TonalContext
from ..theory.tuning import TuningMap, twelve_edo

PITCH_COLUMNS = ["name", "w", "h", "midi", "chroma", "letter", "accidental", "octave", "hz"]
INTERVAL_COLUMNS = ["name", "w", "h", "chroma", "quality", "stepspan", "cents"]


def _midi_or_none(p: Pitch) -> Optional[int]:
    try:
        return p.midi
    except MidiRangeError:
        return None


def pitch_table(
    pitches: Iterable[Pitch],
    context: Optional[TonalContext] = None,
    tuning_map: Optional[TuningMap] = None,
    notation: str = "spn",
) -> pd.DataFrame:
    """One row per pitch.

    - midi is a nullable integer column; pitches outside 0..127 get <NA>
    - degree (1-based) and alteration are added when a context is given
    - hz is computed for the whole column at once
    """
    tuning = tuning_map or twelve_edo()
    items: List[Pitch] = list(pitches)
    df = pd.DataFrame(
        {
            "name": [render_pitch(p, notation) for p in items],
            "w": [p.w for p in items],
            "h": [p.h for p in items],
            "midi": pd.array([_midi_or_none(p) for p in items], dtype="Int64"),
            "chroma": [p.chroma for p in items],
            "letter": [p.letter for p in items],
            "accidental": [p.accidental for p in items],
            "octave": [p.octave for p in items],
            "hz": tuning.to_hz_array(items),
        },
        columns=PITCH_COLUMNS,
    )
    if context is not None:
        df["degree"] = [p.degree_in(context) + 1 for p in items]
        df["alteration"] = [p.alteration_in(context) for p in items]
    return df


def interval_table(intervals: Iterable[Interval], tuning_map: Optional[TuningMap] = None) -> pd.DataFrame:
    tuning = tuning_map or twelve_edo()
    items: List[Interval] = list(intervals)
    return pd.DataFrame(
        {
            "name": [m.name for m in items],
            "w": [m.w for m in items],
            "h": [m.h for m in items],
            "chroma": [m.chroma for m in items],
            "quality": [m.quality for m in items],
            "stepspan": [m.stepspan for m in items],
            "cents": [tuning.to_cents(m) for m in items],
        },
        columns=INTERVAL_COLUMNS,
    )
