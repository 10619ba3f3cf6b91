from __future__ import annotations

"""CLI for meantonal: describe notes and intervals, list ranges in a key."""

import argparse
import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from .. import __version__
from ..config.config import context_from_config, load_config, tuning_map_from_config, validate_config
from ..errors import MeantonalError
from ..notation import NOTATIONS, parse_pitch, render_pitch
from ..theory.interval import Interval
from ..theory.pitch import Pitch
from ..theory.tonality import TonalContext
from ..theory.tuning import TuningMap
from .tables import interval_table, pitch_table

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _context(args: argparse.Namespace, cfg: Dict[str, Any]) -> TonalContext:
    if args.tonic is None and args.mode is None:
        return context_from_config(cfg)
    ctx = cfg.get("context", {})
    return TonalContext.from_strings(args.tonic or ctx.get("tonic", "C"), args.mode or ctx.get("mode", "major"))


def _print_table(df: pd.DataFrame) -> None:
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(df.to_string(index=False))


def _cmd_pitch(args: argparse.Namespace, cfg: Dict[str, Any], tuning: TuningMap) -> int:
    p = parse_pitch(args.note, args.notation)
    for name in NOTATIONS:
        print(f"{name:>10}: {render_pitch(p, name)}")
    print(f"{'vector':>10}: ({p.w}, {p.h})")
    print(f"{'chroma':>10}: {p.chroma}")
    print(f"{'hz':>10}: {tuning.to_hz(p):.4f}")
    if tuning.midi_map is not None:
        print(f"{'steps':>10}: {tuning.to_midi(p)}")
    return 0


def _cmd_interval(args: argparse.Namespace, cfg: Dict[str, Any], tuning: TuningMap) -> int:
    m = Interval.from_name(args.name)
    _print_table(interval_table([m, m.simple, m.negative], tuning))
    return 0


def _cmd_range(args: argparse.Namespace, cfg: Dict[str, Any], tuning: TuningMap) -> int:
    start = parse_pitch(args.start, args.notation)
    end = parse_pitch(args.end, args.notation)
    context = _context(args, cfg)
    if args.chromatic:
        pitches: List[Pitch] = list(Pitch.range.chromatic(start, end, context))
    else:
        pitches = list(Pitch.range.diatonic(start, end, context))
    logger.debug("range %s..%s in %s: %d pitches", start, end, context.tonic, len(pitches))
    _print_table(pitch_table(pitches, context, tuning, cfg["output"]["notation"]))
    return 0


def _cmd_transpose(args: argparse.Namespace, cfg: Dict[str, Any], tuning: TuningMap) -> int:
    p = parse_pitch(args.note, args.notation)
    if args.steps is not None:
        q = p.transpose_diatonic(args.steps, _context(args, cfg))
    else:
        q = p.transpose_real(Interval.from_name(args.interval))
    print(render_pitch(q, cfg["output"]["notation"]))
    return 0


def _cmd_melodic(args: argparse.Namespace, cfg: Dict[str, Any], tuning: TuningMap) -> int:
    _print_table(interval_table(Interval.range.melodic(), tuning))
    return 0


COMMANDS = {
    "pitch": _cmd_pitch,
    "interval": _cmd_interval,
    "range": _cmd_range,
    "transpose": _cmd_transpose,
    "melodic": _cmd_melodic,
}


def _add_context_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--tonic", default=None, help="Tonic name, e.g. Eb")
    sp.add_argument("--mode", default=None, help="Mode name, e.g. dorian, major")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="meantonal")
    p.add_argument("--version", action="version", version=f"meantonal {__version__}")
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    p.add_argument(
        "--notation",
        default="spn",
        choices=sorted(NOTATIONS),
        help="Notation of note names given on the command line",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("pitch", help="Describe a note")
    sp.add_argument("note")

    ip = sub.add_parser("interval", help="Describe an interval name, e.g. m6 or -AA4")
    ip.add_argument("name")

    rp = sub.add_parser("range", help="List pitches between two notes in a key")
    rp.add_argument("start")
    rp.add_argument("end")
    rp.add_argument("--chromatic", action="store_true", help="Include singly altered spellings")
    _add_context_args(rp)

    tp = sub.add_parser("transpose", help="Transpose a note")
    tp.add_argument("note")
    group = tp.add_mutually_exclusive_group(required=True)
    group.add_argument("--interval", default=None, help="Interval name, e.g. P5 or -m3")
    group.add_argument("--steps", type=int, default=None, help="Diatonic steps within the key")
    _add_context_args(tp)

    sub.add_parser("melodic", help="List melodic intervals")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        cfg = validate_config(load_config(args.config))
        tuning = tuning_map_from_config(cfg)
        logger.debug("tuning: %r", tuning)
        return COMMANDS[args.cmd](args, cfg, tuning)
    except MeantonalError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
