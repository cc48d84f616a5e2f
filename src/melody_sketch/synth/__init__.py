"""
Synthesis layer - melody events to PCM samples.
"""

from melody_sketch.synth.buffer import SAMPLE_DTYPE, WaveformBuffer
from melody_sketch.synth.synthesizer import fade_envelope, quantize, render, sine

__all__ = [
    "SAMPLE_DTYPE",
    "WaveformBuffer",
    "fade_envelope",
    "quantize",
    "render",
    "sine",
]
