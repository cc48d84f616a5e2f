"""
WAV output for rendered melodies.

Writes canonical mono 16-bit PCM WAV files (RIFF / WAVE / fmt / data) with
soundfile. This is the end of the pipeline.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import soundfile as sf

from melody_sketch.errors import AudioSinkError
from melody_sketch.synth.buffer import SAMPLE_DTYPE, WaveformBuffer

logger = logging.getLogger(__name__)

WAV_FORMAT = "WAV"
WAV_SUBTYPE = "PCM_16"


def write_wav(path: str | Path, buffer: WaveformBuffer) -> Path:
    """
    Write a buffer to a WAV file, replacing any existing file.

    The buffer is frozen first; nothing can be appended to it afterwards.

    Args:
        path: Destination file
        buffer: Rendered samples

    Returns:
        The path written

    Raises:
        AudioSinkError: If the file cannot be opened or written.
    """
    path = Path(path)
    buffer.freeze()
    try:
        sf.write(
            str(path),
            buffer.samples,
            buffer.sample_rate,
            subtype=WAV_SUBTYPE,
            format=WAV_FORMAT,
        )
    except (OSError, sf.SoundFileError) as exc:
        raise AudioSinkError(path, str(exc)) from exc

    logger.debug("Wrote %d samples @ %d Hz to %s", len(buffer), buffer.sample_rate, path)
    return path


def read_wav(path: str | Path) -> tuple[np.ndarray, int]:
    """
    Read a mono WAV file back as (int16 samples, sample_rate).

    Raises:
        AudioSinkError: If the file cannot be opened or decoded.
    """
    try:
        samples, sample_rate = sf.read(str(path), dtype="int16")
    except (OSError, sf.SoundFileError) as exc:
        raise AudioSinkError(path, str(exc)) from exc
    if samples.ndim > 1:
        samples = samples[:, 0]
    return samples.astype(SAMPLE_DTYPE, copy=False), sample_rate
