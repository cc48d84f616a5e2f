"""
Synthesis configuration.

All tunable defaults live here: sample rate, tempo, where the tonic sits,
tuning and loudness. A config can be loaded from a YAML file and then
overridden field by field from the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from melody_sketch.constants import (
    DEFAULT_BEATS_PER_EVENT,
    DEFAULT_FADE_MS,
    DEFAULT_REFERENCE_OCTAVE,
    DEFAULT_SAMPLE_RATE,
    DEFAULT_TEMPO_BPM,
    PITCH_STANDARDS,
    STUTTGART_PITCH,
    Dynamic,
    TemperamentName,
)
from melody_sketch.core.rhythm import Tempo
from melody_sketch.errors import ConfigError


class SynthesisConfig(BaseModel):
    """
    Settings shared by every stage of a render.

    The defaults render eighth notes at 120 BPM (0.25 s per event) with the
    tonic in octave 4 tuned against A4 = 440 Hz.
    """

    sample_rate: int = Field(DEFAULT_SAMPLE_RATE, gt=0, description="Samples per second")
    tempo_bpm: float = Field(
        DEFAULT_TEMPO_BPM, gt=0, allow_inf_nan=False, description="Beats per minute"
    )
    beats_per_event: float = Field(
        DEFAULT_BEATS_PER_EVENT,
        gt=0,
        allow_inf_nan=False,
        description="Length of one melody event in beats",
    )
    reference_octave: int = Field(
        DEFAULT_REFERENCE_OCTAVE, ge=0, le=9, description="Octave the tonic is placed in"
    )
    pitch_standard: float = Field(
        STUTTGART_PITCH, gt=0, allow_inf_nan=False, description="Frequency of A4 in Hz"
    )
    temperament: TemperamentName = Field(TemperamentName.EQUAL, description="Tuning system")
    dynamic: Dynamic = Field(Dynamic.MF, description="Loudness of notes")
    fade_ms: float = Field(
        DEFAULT_FADE_MS, ge=0, allow_inf_nan=False, description="Fade-in/out length in ms"
    )

    model_config = {"frozen": True}

    @field_validator("temperament", mode="before")
    @classmethod
    def _normalize_temperament(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("pitch_standard", mode="before")
    @classmethod
    def _named_pitch_standard(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in PITCH_STANDARDS:
            return PITCH_STANDARDS[value.strip().lower()]
        return value

    @field_validator("dynamic", mode="before")
    @classmethod
    def _parse_dynamic(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Dynamic.parse(value)
        return value

    @property
    def tempo(self) -> Tempo:
        """Tempo built from tempo_bpm and beats_per_event."""
        return Tempo(self.tempo_bpm, self.beats_per_event)

    @property
    def event_seconds(self) -> float:
        """Length of one melody event in seconds."""
        return self.tempo.event_seconds

    @property
    def amplitude(self) -> float:
        """Peak note amplitude in [0, 1]."""
        return self.dynamic.amplitude

    def with_overrides(self, **overrides: Any) -> SynthesisConfig:
        """
        Return a copy with the given fields replaced.

        None values are ignored, so unset command-line flags keep the
        current value. Overrides are validated like file values.
        """
        updates = {name: value for name, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return SynthesisConfig.model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise ConfigError(_describe(exc)) from exc


def load_config(path: str | Path) -> SynthesisConfig:
    """
    Load a config from a YAML file.

    Missing fields keep their defaults; unknown fields are rejected.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    unknown = set(data) - set(SynthesisConfig.model_fields)
    if unknown:
        raise ConfigError(f"Unknown config field(s) in {path}: {', '.join(sorted(unknown))}")

    try:
        return SynthesisConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {_describe(exc)}") from exc


def _describe(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
