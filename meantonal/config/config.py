from __future__ import annotations

"""Configuration loading and validation.

Loads YAML configuration, applies defaults and checks that tuning, context
and output settings are usable before the CLI builds anything from them.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import MeantonalError, NotationError
from ..notation import NOTATIONS
from ..notation.spn import SPN
from ..theory.constants import MODES
from ..theory.tonality import TonalContext
from ..theory.tuning import TuningMap

logger = logging.getLogger(__name__)

ALLOWED_NOTATIONS = set(NOTATIONS)


class TuningSettings(BaseModel):
    """Validated ``tuning`` section.

    - edo: equal division of the octave (>0), used when ``fifth`` is unset
    - fifth: width of the fifth in cents, overrides ``edo``
    - reference_pitch: SPN name of the pitch sounding at ``reference_freq``
    - reference_freq: frequency in Hz (>0)
    """

    edo: int = Field(12, gt=0)
    fifth: Optional[Annotated[float, Field(gt=600, lt=800)]] = None
    reference_pitch: str = "A4"
    reference_freq: float = Field(440.0, gt=0)

    @field_validator("reference_pitch")
    @classmethod
    def _spn_parses(cls, v: str) -> str:
        try:
            SPN.to_pitch(v)
        except NotationError as e:
            raise ValueError(str(e)) from e
        return v


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error("Config file not found: %s", path)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        cfg = _load_yaml(Path(__file__).with_name("defaults.yml"))
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported notation, tonic or mode values fall back to the defaults with
    a warning. A broken tuning section is an error.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.

    Raises:
        MeantonalError: if the tuning section does not validate.
    """
    cfg.setdefault("tuning", {})
    cfg.setdefault("context", {})
    cfg.setdefault("output", {})

    tuning = cfg["tuning"]
    context = cfg["context"]
    output = cfg["output"]

    tuning.setdefault("edo", 12)
    tuning.setdefault("fifth", None)
    tuning.setdefault("reference_pitch", "A4")
    tuning.setdefault("reference_freq", 440.0)

    context.setdefault("tonic", "C")
    context.setdefault("mode", "major")

    output.setdefault("notation", "spn")

    notation = str(output.get("notation")).lower()
    if notation not in ALLOWED_NOTATIONS:
        logger.warning("Unsupported notation '%s', using 'spn'.", output.get("notation"))
        notation = "spn"
    output["notation"] = notation

    mode = str(context.get("mode"))
    if mode.upper() not in MODES:
        logger.warning("Unsupported mode '%s', using 'major'.", mode)
        context["mode"] = "major"

    try:
        TonalContext.from_strings(str(context.get("tonic")), context["mode"])
    except NotationError:
        logger.warning("Unsupported tonic '%s', using 'C'.", context.get("tonic"))
        context["tonic"] = "C"

    try:
        cfg["tuning"] = TuningSettings(**tuning).model_dump()
    except ValidationError as e:
        raise MeantonalError(f"Invalid tuning settings: {e}") from e

    return cfg


def tuning_map_from_config(cfg: Dict[str, Any]) -> TuningMap:
    """Build the TuningMap described by a validated config."""
    settings = TuningSettings(**cfg.get("tuning", {}))
    if settings.fifth is not None:
        return TuningMap(settings.fifth, settings.reference_pitch, settings.reference_freq)
    return TuningMap.from_edo(settings.edo, settings.reference_pitch, settings.reference_freq)


def context_from_config(cfg: Dict[str, Any]) -> TonalContext:
    context = cfg.get("context", {})
    return TonalContext.from_strings(str(context.get("tonic", "C")), str(context.get("mode", "major")))
