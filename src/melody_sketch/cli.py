#!/usr/bin/env python3
"""
Command-line entry point for melody-sketch.

Renders a melody token string in a key to a WAV file:

    melody-sketch --scale-tonic Gb --scale-kind minor --output tune.wav ABCDEFGH

Exit status is 0 on success and 1 when any stage fails, with a message
naming the stage on stderr. Usage errors exit with argparse's status 2.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from melody_sketch.config import SynthesisConfig, load_config
from melody_sketch.constants import Stage, TemperamentName
from melody_sketch.errors import ConfigError
from melody_sketch.pipeline import RenderRequest, StageError, run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="melody-sketch",
        description="Render a melody (A-H = scale degrees 0-7, x = rest) to a WAV file",
    )
    parser.add_argument(
        "melody",
        help="Melody tokens: A-H for scale degrees, x for a rest (may be empty)",
    )
    parser.add_argument(
        "--scale-tonic",
        required=True,
        help="Tonic pitch class, e.g. C, F#, Gb",
    )
    parser.add_argument(
        "--scale-kind",
        required=True,
        help="Scale kind: major or minor",
    )
    parser.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Output WAV file (overwritten if it exists)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with synthesis settings",
    )
    parser.add_argument(
        "--tempo",
        type=float,
        dest="tempo_bpm",
        help="Tempo in beats per minute (default: 120)",
    )
    parser.add_argument(
        "--sample-rate",
        type=int,
        help="Sample rate in Hz (default: 44100)",
    )
    parser.add_argument(
        "--octave",
        type=int,
        dest="reference_octave",
        help="Octave the tonic is placed in (default: 4)",
    )
    parser.add_argument(
        "--pitch-standard",
        help="Frequency of A4 in Hz, or stuttgart, baroque, chorton, classical (default: 440)",
    )
    parser.add_argument(
        "--temperament",
        choices=[t.value for t in TemperamentName],
        help="Tuning system (default: equal)",
    )
    parser.add_argument(
        "--dynamic",
        help="Loudness: ppp, pp, p, mp, m, mf, f, ff, fff (default: mf)",
    )
    parser.add_argument(
        "--rule",
        action="append",
        default=[],
        dest="rules",
        metavar="RULE",
        help="Rewrite rule like A->AC applied to the melody before decoding (repeatable)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1,
        help="Number of rewrite passes when rules are given (default: 1)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SynthesisConfig:
    """Load the config file, if any, and apply command-line overrides."""
    config = load_config(args.config) if args.config else SynthesisConfig()
    return config.with_overrides(
        sample_rate=args.sample_rate,
        tempo_bpm=args.tempo_bpm,
        reference_octave=args.reference_octave,
        pitch_standard=args.pitch_standard,
        temperament=args.temperament,
        dynamic=args.dynamic,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"error: {Stage.CONFIG.value} failed: {exc}", file=sys.stderr)
        return 1

    request = RenderRequest(
        tonic=args.scale_tonic,
        scale_kind=args.scale_kind,
        melody=args.melody,
        output=args.output,
        rules=tuple(args.rules),
        iterations=args.iterations,
    )

    try:
        run(request, config)
    except StageError as exc:
        logger.debug("Stage %s failed", exc.stage.value, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
