from __future__ import annotations

"""Error types raised by meantonal.

Everything derives from ValueError so callers that only know about the
builtin still catch bad input.
"""

from typing import Optional


class MeantonalError(ValueError):
    """Base class for all meantonal errors."""


class NotationError(MeantonalError):
    """A note, interval, tonic or mode string did not match its grammar."""

    def __init__(self, text: str, notation: str, detail: Optional[str] = None) -> None:
        self.text = text
        self.notation = notation
        msg = f"Invalid {notation}: {text!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class UnknownModeError(NotationError):
    """Mode name not present in the mode table."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "mode name")


class MidiRangeError(MeantonalError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Outside of standard MIDI range: {value}")


class TuningError(MeantonalError):
    """A tuning map was asked for something it cannot render."""
