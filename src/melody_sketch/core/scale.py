"""
Scale primitives - ScaleKind and Scale.

Scales are interval patterns from a tonic. A scale can report the offsets of
its seven degrees in whichever unit a temperament consumes: semitones for
equal temperament, degree indices for just intonation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import ClassVar

from melody_sketch.core.temperament import OffsetUnit
from melody_sketch.errors import ScaleDefinitionError, UnknownScaleKindError

DEGREES_IN_SCALE = 7
SEMITONES_PER_OCTAVE = 12


class ScaleKind(str, Enum):
    """The scale kinds a melody can be written in."""

    MAJOR = "major"
    MINOR = "minor"  # Natural minor

    @classmethod
    def parse(cls, name: str) -> ScaleKind:
        """
        Parse a scale kind from a string like 'major' or 'Minor'.

        Raises:
            UnknownScaleKindError: If the name is not a supported kind.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownScaleKindError(name, tuple(k.value for k in cls)) from None


@dataclass(frozen=True)
class Scale:
    """
    A scale defined by its interval pattern.

    The intervals are from one degree to the next (not cumulative), in
    semitones. A major scale is: W W H W W W H (2 2 1 2 2 2 1).

    Immutable and hashable.
    """

    intervals: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]

    def __post_init__(self) -> None:
        if len(self.intervals) != DEGREES_IN_SCALE:
            raise ScaleDefinitionError(
                f"Scale {self.name!r} needs {DEGREES_IN_SCALE} intervals, got {len(self.intervals)}"
            )
        if any(step <= 0 for step in self.intervals):
            raise ScaleDefinitionError(f"Scale {self.name!r} intervals must be positive")
        total = sum(self.intervals)
        if total != SEMITONES_PER_OCTAVE:
            raise ScaleDefinitionError(
                f"Scale {self.name!r} intervals must sum to {SEMITONES_PER_OCTAVE} semitones, got {total}"
            )

    @property
    def semitone_offsets(self) -> tuple[int, ...]:
        """Semitones from the tonic to each of the seven degrees."""
        return (0, *accumulate(self.intervals[:-1]))

    @property
    def degree_indices(self) -> tuple[int, ...]:
        """Index of each degree, 0 for the tonic."""
        return tuple(range(DEGREES_IN_SCALE))

    def offsets(self, unit: OffsetUnit) -> tuple[int, ...]:
        """Offsets of the seven degrees expressed in `unit`."""
        if unit is OffsetUnit.SEMITONE:
            return self.semitone_offsets
        return self.degree_indices

    def octave_offset(self, unit: OffsetUnit) -> int:
        """Offset of the octave above the tonic expressed in `unit`."""
        if unit is OffsetUnit.SEMITONE:
            return sum(self.intervals)
        return DEGREES_IN_SCALE

    @classmethod
    def for_kind(cls, kind: ScaleKind) -> Scale:
        """Get the scale for a ScaleKind."""
        return _SCALES[kind]

    def __str__(self) -> str:
        return self.name or f"Scale({self.intervals})"


Scale.MAJOR = Scale((2, 2, 1, 2, 2, 2, 1), "major")
Scale.NATURAL_MINOR = Scale((2, 1, 2, 2, 1, 2, 2), "minor")

_SCALES: dict[ScaleKind, Scale] = {
    ScaleKind.MAJOR: Scale.MAJOR,
    ScaleKind.MINOR: Scale.NATURAL_MINOR,
}


def offsets_for(kind: ScaleKind | str) -> tuple[int, ...]:
    """
    Get the semitone offsets of a scale kind's seven degrees.

    Accepts a ScaleKind or its name; unknown names raise UnknownScaleKindError.
    """
    if not isinstance(kind, ScaleKind):
        kind = ScaleKind.parse(kind)
    return Scale.for_kind(kind).semitone_offsets
