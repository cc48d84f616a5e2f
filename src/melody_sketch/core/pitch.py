"""
Pitch primitives - PitchClass.

PitchClass represents the 12 chromatic pitches (octave-independent).
Enharmonic spellings collapse onto one chromatic index at parse time.
"""

from __future__ import annotations

from enum import IntEnum

from melody_sketch.errors import InvalidPitchClassError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Natural letter positions; accidentals shift them and wrap (B# == C, Cb == B)
_NATURALS: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS: dict[str, int] = {"": 0, "#": 1, "s": 1, "b": -1}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled by spell().
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db', 'Gb' or 'Fs'.

        The letter is case-insensitive. Edge spellings wrap around the
        octave, so 'B#' is C and 'Cb' is B.

        Raises:
            InvalidPitchClassError: If the name is not a pitch class.
        """
        text = name.strip()
        if not text:
            raise InvalidPitchClassError(name)

        letter, accidental = text[0].upper(), text[1:]
        if letter not in _NATURALS or accidental not in _ACCIDENTALS:
            raise InvalidPitchClassError(name)

        return cls((_NATURALS[letter] + _ACCIDENTALS[accidental]) % 12)
