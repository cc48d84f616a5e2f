"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from melody_sketch.core import EqualTemperament, Key, PitchClass, ScaleKind


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_wav_path(temp_dir: Path) -> Path:
    """Path for a temporary WAV file."""
    return temp_dir / "test.wav"


@pytest.fixture
def c_major_440() -> Key:
    """C major with the tonic pinned to 440 Hz."""
    return Key(PitchClass.C, ScaleKind.MAJOR, EqualTemperament(), 440.0)
