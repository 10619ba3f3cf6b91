from __future__ import annotations

"""String adapters between note-name notations and Pitch vectors."""

from typing import Dict, Protocol

from ..errors import NotationError
from ..theory.pitch import Pitch
from .abc import ABC
from .helmholtz import Helmholtz
from .lilypond import LilyPond
from .spn import SPN


class NotationAdapter(Protocol):
    @staticmethod
    def to_pitch(text: str) -> Pitch: ...

    @staticmethod
    def from_pitch(p: Pitch) -> str: ...


NOTATIONS: Dict[str, NotationAdapter] = {
    "spn": SPN,
    "lilypond": LilyPond,
    "helmholtz": Helmholtz,
    "abc": ABC,
}


def get_notation(name: str) -> NotationAdapter:
    try:
        return NOTATIONS[name.lower()]
    except KeyError as e:
        raise NotationError(name, "notation name", f"expected one of {', '.join(NOTATIONS)}") from e


def parse_pitch(text: str, notation: str = "spn") -> Pitch:
    return get_notation(notation).to_pitch(text)


def render_pitch(p: Pitch, notation: str = "spn") -> str:
    return get_notation(notation).from_pitch(p)


__all__ = [
    "ABC",
    "Helmholtz",
    "LilyPond",
    "NOTATIONS",
    "NotationAdapter",
    "SPN",
    "get_notation",
    "parse_pitch",
    "render_pitch",
]
