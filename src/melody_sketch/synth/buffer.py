"""
WaveformBuffer - the synthesizer's output.

Append-only while rendering, frozen once handed to the audio sink.
Samples are 16-bit signed PCM, mono.
"""

from __future__ import annotations

import numpy as np

from melody_sketch.constants import ErrorMessages
from melody_sketch.errors import EmptySampleRateError

SAMPLE_DTYPE = np.int16


class WaveformBuffer:
    """Mono int16 samples at a fixed sample rate."""

    def __init__(self, sample_rate: int):
        if sample_rate <= 0:
            raise EmptySampleRateError(sample_rate)
        self.sample_rate = sample_rate
        self._segments: list[np.ndarray] = []
        self._length = 0
        self._frozen = False
        self._samples: np.ndarray | None = None

    def append(self, segment: np.ndarray) -> None:
        """Append a block of int16 samples to the end of the buffer."""
        if self._frozen:
            raise RuntimeError(ErrorMessages.BUFFER_FROZEN)
        if segment.dtype != SAMPLE_DTYPE or segment.ndim != 1:
            raise TypeError(f"Segments must be 1-D {np.dtype(SAMPLE_DTYPE)}, got {segment.dtype} x{segment.ndim}")
        self._segments.append(segment)
        self._length += len(segment)

    def freeze(self) -> WaveformBuffer:
        """Stop accepting samples. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def samples(self) -> np.ndarray:
        """All samples in order, as a read-only array."""
        if self._samples is None or len(self._samples) != self._length:
            if self._segments:
                samples = np.concatenate(self._segments)
            else:
                samples = np.zeros(0, dtype=SAMPLE_DTYPE)
            samples.flags.writeable = False
            self._samples = samples
        return self._samples

    @property
    def duration(self) -> float:
        """Length in seconds."""
        return self._length / self.sample_rate

    def to_bytes(self) -> bytes:
        """Little-endian PCM bytes, as stored in a WAV data chunk."""
        return self.samples.astype("<i2").tobytes()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"WaveformBuffer({self._length} samples @ {self.sample_rate} Hz, {state})"
