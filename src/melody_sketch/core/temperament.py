"""
Temperament primitives - tuning systems.

A temperament maps a tonic frequency and an integer pitch-step offset to a
frequency in Hz. What one step means is the temperament's own business:
equal temperament counts semitones, just intonation counts scale degrees.
Each temperament declares its unit so a Key can ask the Scale for offsets
already expressed in it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from melody_sketch.constants import TemperamentName
from melody_sketch.core.pitch import PitchClass
from melody_sketch.errors import TemperamentUnavailableError, UnknownTemperamentError

# A4 is the pitch-standard note
_STANDARD_PITCH_CLASS = PitchClass.A
_STANDARD_OCTAVE = 4


class OffsetUnit(str, Enum):
    """The unit a temperament's `steps` argument is expressed in."""

    SEMITONE = "semitone"
    DEGREE = "degree"


class Temperament(ABC):
    """
    A tuning system.

    Implementations must be pure: the same arguments always give the
    same frequency.
    """

    name: ClassVar[TemperamentName]
    offset_unit: ClassVar[OffsetUnit]

    @abstractmethod
    def step_to_frequency(self, tonic_hz: float, steps: int) -> float:
        """
        Get the frequency `steps` units above (or below) the tonic.

        Args:
            tonic_hz: Frequency of the tonic in Hz
            steps: Offset from the tonic in this temperament's unit

        Returns:
            Frequency in Hz
        """

    @abstractmethod
    def reference_frequency(self, tonic: PitchClass, octave: int, pitch_standard: float) -> float:
        """
        Place a tonic in an absolute octave.

        Args:
            tonic: The tonic pitch class
            octave: Octave in scientific pitch notation (C4 = middle C)
            pitch_standard: Frequency of A4 in Hz

        Returns:
            Frequency of the tonic in Hz
        """

    # Temperaments are stateless, so instances of one class are interchangeable
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperament):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EqualTemperament(Temperament):
    """
    Twelve-tone equal temperament.

    Steps are semitones; every semitone is the same frequency ratio,
    2 ** (1/12), so twelve steps make an octave.
    """

    name = TemperamentName.EQUAL
    offset_unit = OffsetUnit.SEMITONE

    STEPS_PER_OCTAVE: ClassVar[int] = 12

    def step_to_frequency(self, tonic_hz: float, steps: int) -> float:
        return tonic_hz * 2.0 ** (steps / self.STEPS_PER_OCTAVE)

    def reference_frequency(self, tonic: PitchClass, octave: int, pitch_standard: float) -> float:
        steps = (tonic - _STANDARD_PITCH_CLASS) + (octave - _STANDARD_OCTAVE) * self.STEPS_PER_OCTAVE
        return self.step_to_frequency(pitch_standard, steps)


class JustIntonation(Temperament):
    """
    Just intonation over the seven degrees of a scale.

    Steps are scale-degree indices mapped through a table of whole-number
    frequency ratios, so there is no fixed number of steps per octave.
    The ratio tables are not defined yet; every lookup fails with
    TemperamentUnavailableError.
    """

    name = TemperamentName.JUST
    offset_unit = OffsetUnit.DEGREE

    def step_to_frequency(self, tonic_hz: float, steps: int) -> float:
        raise TemperamentUnavailableError(self.name.value)

    def reference_frequency(self, tonic: PitchClass, octave: int, pitch_standard: float) -> float:
        raise TemperamentUnavailableError(self.name.value)


_TEMPERAMENTS: dict[TemperamentName, type[Temperament]] = {
    TemperamentName.EQUAL: EqualTemperament,
    TemperamentName.JUST: JustIntonation,
}


def temperament_for(name: str | TemperamentName) -> Temperament:
    """
    Create a temperament from its name ('equal' or 'just').

    Raises:
        UnknownTemperamentError: If no temperament has that name.
    """
    if isinstance(name, TemperamentName):
        return _TEMPERAMENTS[name]()

    try:
        key = TemperamentName(name.strip().lower())
    except ValueError:
        raise UnknownTemperamentError(name, tuple(t.value for t in TemperamentName)) from None
    return _TEMPERAMENTS[key]()
