"""
Rhythm primitives - Tempo.

Every melody event lasts the same nominal length: a fixed fraction of a
beat at a fixed tempo. Uses Fraction so note values like 1/2 or 1/3 beat
stay exact until the final conversion to seconds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from melody_sketch.constants import DEFAULT_BEATS_PER_EVENT, DEFAULT_TEMPO_BPM
from melody_sketch.errors import EmptySampleRateError, InvalidTempoError


@dataclass(frozen=True)
class Tempo:
    """
    Beats per minute plus the length of one event in beats.

    Tempo(120, Fraction(1, 2)) = eighth notes at 120 BPM = 0.25 s per event.

    Immutable and hashable.
    """

    bpm: float = DEFAULT_TEMPO_BPM
    beats_per_event: Fraction = Fraction(DEFAULT_BEATS_PER_EVENT)

    def __post_init__(self) -> None:
        if not (self.bpm > 0 and math.isfinite(self.bpm)):
            raise InvalidTempoError(self.bpm)
        if not isinstance(self.beats_per_event, Fraction):
            if not math.isfinite(self.beats_per_event):
                raise InvalidTempoError(self.beats_per_event)
            object.__setattr__(
                self, "beats_per_event", Fraction(self.beats_per_event).limit_denominator(64)
            )
        if self.beats_per_event <= 0:
            raise InvalidTempoError(float(self.beats_per_event))

    @property
    def event_seconds(self) -> float:
        """Length of one event in seconds."""
        return float(self.beats_per_event * 60 / Fraction(self.bpm))

    def samples_per_event(self, sample_rate: int) -> int:
        """
        Length of one event in samples, rounded to the nearest sample.

        Raises:
            EmptySampleRateError: If sample_rate is not positive.
        """
        if sample_rate <= 0:
            raise EmptySampleRateError(sample_rate)
        return event_samples(self.event_seconds, sample_rate)

    def __str__(self) -> str:
        return f"{self.bpm:g} BPM, {self.beats_per_event} beat(s) per event"


def event_samples(event_seconds: float, sample_rate: int) -> int:
    """Convert an event length in seconds to a whole number of samples."""
    return round(event_seconds * sample_rate)
