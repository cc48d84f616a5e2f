"""
melody-sketch - render short melodies to WAV from the command line.

A melody is a string over A-H (scale degrees 0-7) and x (rest). It is
resolved against a key (tonic, scale kind, temperament) and synthesized as
a sine voice into a mono 16-bit WAV file.
"""

from melody_sketch.config import SynthesisConfig, load_config
from melody_sketch.core import (
    EqualTemperament,
    JustIntonation,
    Key,
    PitchClass,
    Scale,
    ScaleKind,
    Temperament,
    Tempo,
)
from melody_sketch.melody import MelodySequence, Note, Rest, RuleSet, decode, expand
from melody_sketch.synth import WaveformBuffer, render

__version__ = "0.1.0"

__all__ = [
    "SynthesisConfig",
    "load_config",
    "EqualTemperament",
    "JustIntonation",
    "Key",
    "PitchClass",
    "Scale",
    "ScaleKind",
    "Temperament",
    "Tempo",
    "MelodySequence",
    "Note",
    "Rest",
    "RuleSet",
    "decode",
    "expand",
    "WaveformBuffer",
    "render",
]
