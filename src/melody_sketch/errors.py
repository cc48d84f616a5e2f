"""
Error taxonomy.

Every failure the core can produce is a MelodySketchError. Input validation
failures are also ValueErrors, sink failures are also OSErrors. Only the CLI
turns these into exit codes.
"""

from __future__ import annotations

from melody_sketch.constants import ErrorMessages


class MelodySketchError(Exception):
    """Base class for all melody-sketch failures."""


class InvalidPitchClassError(MelodySketchError, ValueError):
    """A tonic name that is not one of the 12 chromatic pitch classes."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.INVALID_PITCH_CLASS.format(name=name))


class UnknownScaleKindError(MelodySketchError, ValueError):
    """A scale kind string with no matching ScaleKind."""

    def __init__(self, name: str, choices: tuple[str, ...]):
        self.name = name
        self.choices = choices
        super().__init__(
            ErrorMessages.UNKNOWN_SCALE_KIND.format(name=name, choices=", ".join(choices))
        )


class UnknownTemperamentError(MelodySketchError, ValueError):
    """A temperament name with no matching tuning system."""

    def __init__(self, name: str, choices: tuple[str, ...]):
        self.name = name
        self.choices = choices
        super().__init__(
            ErrorMessages.UNKNOWN_TEMPERAMENT.format(name=name, choices=", ".join(choices))
        )


class InvalidDegreeError(MelodySketchError, ValueError):
    """A scale degree outside 0-7."""

    def __init__(self, degree: int):
        self.degree = degree
        super().__init__(ErrorMessages.INVALID_DEGREE.format(degree=degree))


class InvalidMelodyTokenError(MelodySketchError, ValueError):
    """A character outside the melody alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(ErrorMessages.INVALID_MELODY_TOKEN.format(char=char, position=position))


class EmptySampleRateError(MelodySketchError, ValueError):
    """Rendering was asked for a zero (or negative) sample rate."""

    def __init__(self, sample_rate: int):
        self.sample_rate = sample_rate
        super().__init__(ErrorMessages.EMPTY_SAMPLE_RATE.format(sample_rate=sample_rate))


class InvalidTempoError(MelodySketchError, ValueError):
    """A non-positive or non-finite tempo, note value or duration per event."""

    def __init__(self, value: float, message: str | None = None):
        self.value = value
        super().__init__(message or ErrorMessages.INVALID_TEMPO.format(value=value))


class InvalidAmplitudeError(MelodySketchError, ValueError):
    """An output amplitude outside [0, 1]."""

    def __init__(self, amplitude: float):
        self.amplitude = amplitude
        super().__init__(ErrorMessages.INVALID_AMPLITUDE.format(amplitude=amplitude))


class InvalidReferenceError(MelodySketchError, ValueError):
    """A tonic reference or degree frequency that is not positive and finite."""

    def __init__(self, hz: float):
        self.hz = hz
        super().__init__(ErrorMessages.INVALID_REFERENCE.format(hz=hz))


class RuleSyntaxError(MelodySketchError, ValueError):
    """A malformed rewrite rule or rule set."""


class ConfigError(MelodySketchError, ValueError):
    """A configuration file that cannot be read or does not validate."""


class TemperamentUnavailableError(MelodySketchError, NotImplementedError):
    """A declared temperament variant that cannot produce frequencies yet."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.TEMPERAMENT_UNAVAILABLE.format(name=name))


class AudioSinkError(MelodySketchError, OSError):
    """The WAV file could not be opened or written."""

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(ErrorMessages.AUDIO_SINK.format(path=path, reason=reason))


class ScaleDefinitionError(MelodySketchError):
    """
    A scale definition that breaks the 7-degree invariants.

    This is a defect in the scale table, not a user error.
    """
