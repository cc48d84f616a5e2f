"""
Render pipeline - from names and tokens to a WAV file.

Stages run strictly in order: tonic, scale kind, melody, render, write.
A failure in any stage is re-raised as a StageError naming that stage, and
nothing is written unless every earlier stage succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from melody_sketch.audio.wav import write_wav
from melody_sketch.config import SynthesisConfig
from melody_sketch.constants import Stage
from melody_sketch.core.key import Key
from melody_sketch.core.pitch import PitchClass
from melody_sketch.core.scale import ScaleKind
from melody_sketch.core.temperament import temperament_for
from melody_sketch.errors import MelodySketchError
from melody_sketch.melody.decoder import MelodySequence, decode
from melody_sketch.melody.rewrite import RuleSet, expand
from melody_sketch.synth.buffer import WaveformBuffer
from melody_sketch.synth.synthesizer import render

logger = logging.getLogger(__name__)


class StageError(MelodySketchError):
    """A core failure tagged with the pipeline stage it happened in."""

    def __init__(self, stage: Stage, cause: MelodySketchError):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage.value} failed: {cause}")


@contextmanager
def stage(name: Stage) -> Iterator[None]:
    """Re-raise any MelodySketchError inside the block as a StageError."""
    try:
        yield
    except StageError:
        raise
    except MelodySketchError as exc:
        raise StageError(name, exc) from exc


@dataclass(frozen=True)
class RenderRequest:
    """Everything the user asks for, as raw strings."""

    tonic: str
    scale_kind: str
    melody: str
    output: Path
    rules: Sequence[str] = field(default_factory=tuple)
    iterations: int = 1


def parse_key_names(tonic: str, scale_kind: str) -> tuple[PitchClass, ScaleKind]:
    """Parse the tonic and scale kind names."""
    with stage(Stage.TONIC):
        pitch = PitchClass.parse(tonic)
    with stage(Stage.SCALE_KIND):
        kind = ScaleKind.parse(scale_kind)
    return pitch, kind


def tune_key(tonic: PitchClass, kind: ScaleKind, config: SynthesisConfig) -> Key:
    """Place the tonic in the configured octave and build the key."""
    with stage(Stage.RENDER):
        temperament = temperament_for(config.temperament)
        reference_hz = temperament.reference_frequency(
            tonic, config.reference_octave, config.pitch_standard
        )
        return Key(tonic, kind, temperament, reference_hz)


def build_key(tonic: str, scale_kind: str, config: SynthesisConfig) -> Key:
    """Parse the tonic and scale kind and tune the key from the config."""
    return tune_key(*parse_key_names(tonic, scale_kind), config)


def build_melody(text: str, rules: Sequence[str] = (), iterations: int = 1) -> MelodySequence:
    """Expand the melody with any rewrite rules, then decode it."""
    with stage(Stage.MELODY):
        if rules:
            text = expand(text, RuleSet.parse(rules), iterations)
        return decode(text)


def compose(request: RenderRequest, config: SynthesisConfig) -> WaveformBuffer:
    """Run every stage up to and including rendering."""
    tonic, kind = parse_key_names(request.tonic, request.scale_kind)
    sequence = build_melody(request.melody, request.rules, request.iterations)
    key = tune_key(tonic, kind, config)
    with stage(Stage.RENDER):
        return render(
            key,
            sequence,
            config.sample_rate,
            config.event_seconds,
            amplitude=config.amplitude,
            fade_ms=config.fade_ms,
        )


def run(request: RenderRequest, config: SynthesisConfig) -> Path:
    """Render a request and write it to its output path."""
    buffer = compose(request, config)
    with stage(Stage.WRITE):
        path = write_wav(request.output, buffer)
    logger.info(
        "Wrote %s (%.2f s, %d samples @ %d Hz)",
        path,
        buffer.duration,
        len(buffer),
        buffer.sample_rate,
    )
    return path
