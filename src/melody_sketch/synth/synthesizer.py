"""
Sine synthesis of melody events.

Each event becomes one fixed-length block of samples: a sine tone for a
note, silence for a rest. Notes start at phase zero and get a short linear
fade at both ends so block boundaries do not click. Blocks are independent
and concatenated in event order.

Deterministic: the same key, sequence and settings always give the same
samples.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from melody_sketch.constants import (
    DEFAULT_FADE_MS,
    PCM16_MAX,
    PCM16_MIN,
    Dynamic,
    ErrorMessages,
)
from melody_sketch.core.key import Key
from melody_sketch.core.rhythm import event_samples
from melody_sketch.errors import EmptySampleRateError, InvalidAmplitudeError, InvalidTempoError
from melody_sketch.melody.decoder import MelodySequence, Note
from melody_sketch.synth.buffer import SAMPLE_DTYPE, WaveformBuffer

logger = logging.getLogger(__name__)


def sine(frequency: float, num_samples: int, sample_rate: int) -> np.ndarray:
    """
    Generate a unit-amplitude sine starting at phase 0.

    Args:
        frequency: Frequency in Hz
        num_samples: Length in samples
        sample_rate: Samples per second

    Returns:
        float64 array in [-1, 1]
    """
    t = np.arange(num_samples) / sample_rate
    return np.sin(2 * np.pi * frequency * t)


def fade_envelope(num_samples: int, fade_samples: int) -> np.ndarray:
    """
    Build a linear fade-in / fade-out envelope.

    The ramps start and end at exactly zero and are capped at half the
    segment so they never overlap.

    Args:
        num_samples: Segment length in samples
        fade_samples: Requested ramp length in samples

    Returns:
        float64 array of gains in [0, 1]
    """
    envelope = np.ones(num_samples)
    fade = min(fade_samples, num_samples // 2)
    if fade > 0:
        ramp = np.arange(fade) / fade
        envelope[:fade] = ramp
        envelope[-fade:] = ramp[::-1]
    return envelope


def quantize(signal: np.ndarray) -> np.ndarray:
    """Scale a [-1, 1] float signal to int16, clipping instead of wrapping."""
    scaled = np.round(signal * PCM16_MAX)
    return np.clip(scaled, PCM16_MIN, PCM16_MAX).astype(SAMPLE_DTYPE)


def render_note(
    frequency: float,
    num_samples: int,
    sample_rate: int,
    amplitude: float,
    fade_samples: int,
) -> np.ndarray:
    """Render one faded sine block as int16 samples."""
    tone = sine(frequency, num_samples, sample_rate)
    return quantize(amplitude * tone * fade_envelope(num_samples, fade_samples))


def render_rest(num_samples: int) -> np.ndarray:
    """Render one block of silence."""
    return np.zeros(num_samples, dtype=SAMPLE_DTYPE)


def render(
    key: Key,
    sequence: MelodySequence,
    sample_rate: int,
    event_seconds: float,
    amplitude: float = Dynamic.MF.amplitude,
    fade_ms: float = DEFAULT_FADE_MS,
) -> WaveformBuffer:
    """
    Render a melody in a key to a frozen WaveformBuffer.

    Every event lasts round(event_seconds * sample_rate) samples, so the
    buffer holds exactly len(sequence) times that many samples.

    Args:
        key: Key resolving note degrees to frequencies
        sequence: Events to render, in order
        sample_rate: Samples per second
        event_seconds: Length of one event in seconds
        amplitude: Peak amplitude of notes in [0, 1]
        fade_ms: Length of each fade ramp in milliseconds

    Returns:
        The frozen buffer

    Raises:
        EmptySampleRateError: If sample_rate is not positive
        InvalidTempoError: If event_seconds is not positive, or is shorter
            than one sample
        InvalidAmplitudeError: If amplitude is outside [0, 1]
    """
    if sample_rate <= 0:
        raise EmptySampleRateError(sample_rate)
    if not (event_seconds > 0 and math.isfinite(event_seconds)):
        raise InvalidTempoError(event_seconds)
    if not 0.0 <= amplitude <= 1.0:
        raise InvalidAmplitudeError(amplitude)

    num_samples = event_samples(event_seconds, sample_rate)
    if num_samples < 1:
        raise InvalidTempoError(
            event_seconds,
            ErrorMessages.EVENT_TOO_SHORT.format(seconds=event_seconds, sample_rate=sample_rate),
        )
    fade_samples = round(max(fade_ms, 0.0) * sample_rate / 1000)
    buffer = WaveformBuffer(sample_rate)

    # One block per distinct degree; identical notes reuse it
    blocks: dict[int, np.ndarray] = {}
    for event in sequence:
        if isinstance(event, Note):
            block = blocks.get(event.degree)
            if block is None:
                block = render_note(
                    key.degree_frequency(event.degree),
                    num_samples,
                    sample_rate,
                    amplitude,
                    fade_samples,
                )
                blocks[event.degree] = block
            buffer.append(block)
        else:
            buffer.append(render_rest(num_samples))

    logger.debug(
        "Rendered %d events x %d samples (%d distinct notes) in %s",
        len(sequence),
        num_samples,
        len(blocks),
        key,
    )
    return buffer.freeze()
