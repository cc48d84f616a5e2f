"""
Core music primitives - the pitch layer.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Temperament: Tuning systems mapping pitch steps to Hz
- ScaleKind / Scale: Interval patterns defining the seven degrees
- Key: Tonic + scale + temperament, resolves degrees to frequencies
- Tempo: Fixed event length in beats at a fixed BPM
"""

from melody_sketch.core.key import OCTAVE_DEGREE, Key
from melody_sketch.core.pitch import PitchClass
from melody_sketch.core.rhythm import Tempo, event_samples
from melody_sketch.core.scale import DEGREES_IN_SCALE, Scale, ScaleKind, offsets_for
from melody_sketch.core.temperament import (
    EqualTemperament,
    JustIntonation,
    OffsetUnit,
    Temperament,
    temperament_for,
)

__all__ = [
    # Pitch
    "PitchClass",
    # Temperament
    "Temperament",
    "EqualTemperament",
    "JustIntonation",
    "OffsetUnit",
    "temperament_for",
    # Scale
    "DEGREES_IN_SCALE",
    "ScaleKind",
    "Scale",
    "offsets_for",
    # Key
    "OCTAVE_DEGREE",
    "Key",
    # Rhythm
    "Tempo",
    "event_samples",
]
