"""
Constants and enums for the melody renderer.

No magic strings - use enums for constrained values.
"""

from enum import Enum, IntEnum

# Output defaults
DEFAULT_SAMPLE_RATE = 44_100
DEFAULT_TEMPO_BPM = 120.0
DEFAULT_BEATS_PER_EVENT = 0.5  # One eighth note per event
DEFAULT_REFERENCE_OCTAVE = 4
DEFAULT_FADE_MS = 5.0

# Longest token string rewrite rules may grow a melody to
MAX_EXPANDED_SYMBOLS = 100_000

# Full-scale value for 16-bit signed PCM
PCM16_MAX = 32767
PCM16_MIN = -32768

# Pitch standards - frequency of A4 in Hz
STUTTGART_PITCH = 440.0
BAROQUE_PITCH = 415.0
CHORTON_PITCH = 466.0
CLASSICAL_PITCH = 429.5  # 427-430

PITCH_STANDARDS: dict[str, float] = {
    "stuttgart": STUTTGART_PITCH,
    "baroque": BAROQUE_PITCH,
    "chorton": CHORTON_PITCH,
    "classical": CLASSICAL_PITCH,
}


class Stage(str, Enum):
    """Pipeline stages, in the order they run."""

    CONFIG = "config"
    TONIC = "tonic"
    SCALE_KIND = "scale-kind"
    MELODY = "melody"
    RENDER = "render"
    WRITE = "write"


class TemperamentName(str, Enum):
    """Tuning systems selectable by name."""

    EQUAL = "equal"
    JUST = "just"


_DYNAMIC_STEP = 28


class Dynamic(IntEnum):
    """
    Loudness levels on a 0-255 scale.

    Each named level is one step of 28 above the previous one.
    """

    SILENT = 0
    PPP = 1 * _DYNAMIC_STEP
    PP = 2 * _DYNAMIC_STEP
    P = 3 * _DYNAMIC_STEP
    MP = 4 * _DYNAMIC_STEP
    M = 5 * _DYNAMIC_STEP
    MF = 6 * _DYNAMIC_STEP
    F = 7 * _DYNAMIC_STEP
    FF = 8 * _DYNAMIC_STEP
    FFF = 9 * _DYNAMIC_STEP

    @property
    def amplitude(self) -> float:
        """Peak amplitude in [0, 1]."""
        return self.value / 255

    @classmethod
    def parse(cls, name: str) -> "Dynamic":
        """Parse a dynamic marking like 'mf' or 'FF'."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown dynamic: {name}") from None


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH_CLASS = "Unknown pitch class: '{name}'."
    UNKNOWN_SCALE_KIND = "Unknown scale kind: '{name}'. Expected one of: {choices}."
    INVALID_DEGREE = "Scale degree must be 0-7, got {degree}."
    INVALID_MELODY_TOKEN = "Invalid melody token '{char}' at position {position}."
    EMPTY_SAMPLE_RATE = "Sample rate must be positive, got {sample_rate}."
    INVALID_TEMPO = "Tempo values must be positive and finite, got {value}."
    EVENT_TOO_SHORT = (
        "Events of {seconds} s are shorter than one sample at {sample_rate} Hz; "
        "lower the tempo or raise the sample rate."
    )
    INVALID_AMPLITUDE = "Amplitude must be between 0 and 1, got {amplitude}."
    INVALID_REFERENCE = "Reference frequency must be positive and finite, got {hz} Hz."
    TEMPERAMENT_UNAVAILABLE = "Temperament '{name}' is not available yet."
    UNKNOWN_TEMPERAMENT = "Unknown temperament: '{name}'. Expected one of: {choices}."
    AUDIO_SINK = "Could not write WAV file {path}: {reason}"
    EXPANSION_TOO_LONG = (
        "Rewriting grows the melody past {limit} symbols at pass {iteration}; "
        "use fewer iterations or shorter replacements."
    )
    BUFFER_FROZEN = "Waveform buffer is frozen; no further samples can be appended."
