"""
Key - a tonic, a scale and a temperament resolved to frequencies.

This is the context for turning scale degrees into sound. The degree table
is computed once at construction; a Key never changes afterwards.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from melody_sketch.constants import DEFAULT_REFERENCE_OCTAVE, STUTTGART_PITCH
from melody_sketch.core.pitch import PitchClass
from melody_sketch.core.scale import DEGREES_IN_SCALE, Scale, ScaleKind
from melody_sketch.core.temperament import Temperament, temperament_for
from melody_sketch.errors import InvalidDegreeError, InvalidReferenceError

logger = logging.getLogger(__name__)

# Degrees 0-6 are the scale, degree 7 repeats the tonic an octave up
OCTAVE_DEGREE = DEGREES_IN_SCALE


@dataclass(frozen=True)
class Key:
    """
    A key is a tonic pitch class plus a scale kind, tuned by a temperament.

    `reference_hz` is the absolute frequency of the tonic. The scale's
    offsets are taken in the temperament's own unit, so the Key never
    translates between offset spaces.

    Examples:
        Key(PitchClass.C, ScaleKind.MAJOR, EqualTemperament(), 261.63) = C major
        Key(PitchClass.Fs, ScaleKind.MINOR, EqualTemperament(), 369.99) = F# minor
    """

    tonic: PitchClass
    kind: ScaleKind
    temperament: Temperament
    reference_hz: float
    frequencies: tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not (self.reference_hz > 0 and math.isfinite(self.reference_hz)):
            raise InvalidReferenceError(self.reference_hz)

        unit = self.temperament.offset_unit
        scale = self.scale
        steps = (*scale.offsets(unit), scale.octave_offset(unit))
        frequencies = tuple(
            self.temperament.step_to_frequency(self.reference_hz, step) for step in steps
        )
        for freq in frequencies:
            if not (freq > 0 and math.isfinite(freq)):
                raise InvalidReferenceError(freq)
        object.__setattr__(self, "frequencies", frequencies)
        logger.debug(
            "Key %s: %s",
            self,
            ", ".join(f"{freq:.3f}" for freq in frequencies),
        )

    @property
    def scale(self) -> Scale:
        """The scale this key is built on."""
        return Scale.for_kind(self.kind)

    def degree_frequency(self, degree: int) -> float:
        """
        Resolve a scale degree to a frequency.

        Args:
            degree: 0 (tonic) to 7 (tonic an octave up)

        Returns:
            Frequency in Hz

        Raises:
            InvalidDegreeError: If degree is outside 0-7.
        """
        if not 0 <= degree <= OCTAVE_DEGREE:
            raise InvalidDegreeError(degree)
        return self.frequencies[degree]

    def get_pitches(self) -> list[PitchClass]:
        """Get the seven pitch classes of this key, tonic first."""
        return [self.tonic.transpose(offset) for offset in self.scale.semitone_offsets]

    def __str__(self) -> str:
        return f"{self.tonic.spell()} {self.kind.value}"

    @classmethod
    def from_names(
        cls,
        tonic: str,
        kind: str,
        temperament: str | Temperament = "equal",
        reference_hz: float | None = None,
        octave: int = DEFAULT_REFERENCE_OCTAVE,
        pitch_standard: float = STUTTGART_PITCH,
    ) -> Key:
        """
        Build a key from names like ('Gb', 'minor').

        Args:
            tonic: Tonic name ('C', 'F#', 'Gb', ...)
            kind: Scale kind name ('major' or 'minor')
            temperament: Temperament instance or name
            reference_hz: Absolute tonic frequency; derived from octave and
                pitch_standard when omitted
            octave: Octave the tonic is placed in (C4 = middle C)
            pitch_standard: Frequency of A4 in Hz

        Returns:
            The constructed Key
        """
        pitch = PitchClass.parse(tonic)
        scale_kind = ScaleKind.parse(kind)
        if not isinstance(temperament, Temperament):
            temperament = temperament_for(temperament)
        if reference_hz is None:
            reference_hz = temperament.reference_frequency(pitch, octave, pitch_standard)
        return cls(pitch, scale_kind, temperament, reference_hz)
