"""
Tests for core music primitives.

Tests cover:
- PitchClass (pitch.py)
- EqualTemperament, JustIntonation (temperament.py)
- ScaleKind, Scale (scale.py)
- Key (key.py)
- Tempo (rhythm.py)
"""

from fractions import Fraction

import pytest

from melody_sketch.core import (
    EqualTemperament,
    JustIntonation,
    Key,
    OffsetUnit,
    PitchClass,
    Scale,
    ScaleKind,
    Tempo,
    offsets_for,
    temperament_for,
)
from melody_sketch.errors import (
    EmptySampleRateError,
    InvalidDegreeError,
    InvalidPitchClassError,
    InvalidReferenceError,
    InvalidTempoError,
    ScaleDefinitionError,
    TemperamentUnavailableError,
    UnknownScaleKindError,
    UnknownTemperamentError,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse("Fs") == PitchClass.Fs
        assert PitchClass.parse(" a ") == PitchClass.A

    def test_parse_enharmonics(self) -> None:
        """Enharmonic spellings share one index."""
        assert PitchClass.parse("Gb") == PitchClass.parse("F#") == 6
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("Bb") == PitchClass.As
        assert PitchClass.parse("B#") == PitchClass.C
        assert PitchClass.parse("Cb") == PitchClass.B
        assert PitchClass.parse("E#") == PitchClass.F
        assert PitchClass.parse("Fb") == PitchClass.E

    @pytest.mark.parametrize("name", ["", "H", "C##", "Cx", "Do", "#"])
    def test_parse_invalid(self, name: str) -> None:
        """Unknown names raise InvalidPitchClassError."""
        with pytest.raises(InvalidPitchClassError):
            PitchClass.parse(name)

    def test_invalid_is_value_error(self) -> None:
        """Pitch class errors are also ValueErrors."""
        with pytest.raises(ValueError):
            PitchClass.parse("Q")

    def test_transpose(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.C.transpose(7) == PitchClass.G
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_spell(self) -> None:
        """Spell pitch class as string."""
        assert PitchClass.C.spell() == "C"
        assert PitchClass.Fs.spell() == "F#"
        assert PitchClass.Fs.spell(prefer_flats=True) == "Gb"


class TestEqualTemperament:
    """Tests for EqualTemperament."""

    def test_zero_steps_is_tonic(self) -> None:
        """Zero steps returns the tonic exactly."""
        assert EqualTemperament().step_to_frequency(440.0, 0) == 440.0

    @pytest.mark.parametrize("steps", [-24, -13, -1, 0, 3, 7, 11, 19])
    def test_octave_doubling(self, steps: int) -> None:
        """Twelve more steps doubles the frequency."""
        temp = EqualTemperament()
        assert temp.step_to_frequency(261.63, steps + 12) == pytest.approx(
            2 * temp.step_to_frequency(261.63, steps)
        )

    def test_negative_steps(self) -> None:
        """Negative steps go below the tonic."""
        assert EqualTemperament().step_to_frequency(440.0, -12) == pytest.approx(220.0)

    def test_semitone_ratio(self) -> None:
        """One step is the twelfth root of two."""
        assert EqualTemperament().step_to_frequency(100.0, 1) == pytest.approx(100.0 * 2 ** (1 / 12))

    def test_reference_frequency(self) -> None:
        """Tonics are placed relative to A4."""
        temp = EqualTemperament()
        assert temp.reference_frequency(PitchClass.A, 4, 440.0) == 440.0
        assert temp.reference_frequency(PitchClass.C, 4, 440.0) == pytest.approx(261.626, abs=1e-3)
        assert temp.reference_frequency(PitchClass.C, 5, 440.0) == pytest.approx(523.251, abs=1e-3)
        assert temp.reference_frequency(PitchClass.Fs, 4, 440.0) == pytest.approx(369.994, abs=1e-3)
        assert temp.reference_frequency(PitchClass.A, 4, 415.0) == 415.0

    def test_offset_unit(self) -> None:
        """Equal temperament steps are semitones."""
        assert EqualTemperament.offset_unit is OffsetUnit.SEMITONE

    def test_instances_compare_equal(self) -> None:
        """Stateless temperaments of one class are interchangeable."""
        assert EqualTemperament() == EqualTemperament()
        assert EqualTemperament() != JustIntonation()
        assert len({EqualTemperament(), EqualTemperament()}) == 1


class TestJustIntonation:
    """Tests for the JustIntonation placeholder."""

    def test_offset_unit(self) -> None:
        """Just intonation steps are degree indices."""
        assert JustIntonation.offset_unit is OffsetUnit.DEGREE

    def test_unavailable(self) -> None:
        """Frequency lookups fail with a typed error."""
        with pytest.raises(TemperamentUnavailableError):
            JustIntonation().step_to_frequency(440.0, 2)
        with pytest.raises(NotImplementedError):
            JustIntonation().reference_frequency(PitchClass.C, 4, 440.0)


class TestTemperamentFor:
    """Tests for temperament lookup by name."""

    def test_lookup(self) -> None:
        """Names resolve case-insensitively."""
        assert isinstance(temperament_for("equal"), EqualTemperament)
        assert isinstance(temperament_for(" Just "), JustIntonation)

    def test_unknown(self) -> None:
        """Unknown names raise UnknownTemperamentError."""
        with pytest.raises(UnknownTemperamentError, match="meantone"):
            temperament_for("meantone")


class TestScaleKind:
    """Tests for ScaleKind parsing."""

    def test_parse(self) -> None:
        """Scale kinds parse case-insensitively."""
        assert ScaleKind.parse("major") == ScaleKind.MAJOR
        assert ScaleKind.parse("Minor") == ScaleKind.MINOR

    def test_unknown(self) -> None:
        """Unsupported kinds raise UnknownScaleKindError."""
        with pytest.raises(UnknownScaleKindError, match="dorian") as exc_info:
            ScaleKind.parse("dorian")
        assert exc_info.value.choices == ("major", "minor")


class TestScale:
    """Tests for Scale."""

    def test_major_offsets(self) -> None:
        """Major scale offsets."""
        assert offsets_for(ScaleKind.MAJOR) == (0, 2, 4, 5, 7, 9, 11)

    def test_minor_offsets(self) -> None:
        """Natural minor scale offsets."""
        assert offsets_for("minor") == (0, 2, 3, 5, 7, 8, 10)

    def test_offsets_for_unknown(self) -> None:
        """Unknown kind names fail at the boundary."""
        with pytest.raises(UnknownScaleKindError):
            offsets_for("lydian")

    @pytest.mark.parametrize("kind", list(ScaleKind))
    def test_offset_invariants(self, kind: ScaleKind) -> None:
        """Seven strictly increasing offsets in [0, 11] starting at 0."""
        offsets = offsets_for(kind)
        assert len(offsets) == 7
        assert offsets[0] == 0
        assert all(a < b for a, b in zip(offsets, offsets[1:]))
        assert all(0 <= o <= 11 for o in offsets)

    def test_offsets_by_unit(self) -> None:
        """Offsets come in either unit, octave included."""
        assert Scale.MAJOR.offsets(OffsetUnit.DEGREE) == (0, 1, 2, 3, 4, 5, 6)
        assert Scale.MAJOR.octave_offset(OffsetUnit.SEMITONE) == 12
        assert Scale.MAJOR.octave_offset(OffsetUnit.DEGREE) == 7

    def test_invalid_definitions(self) -> None:
        """Broken scale tables are defects."""
        with pytest.raises(ScaleDefinitionError):
            Scale((2, 2, 1, 2, 2, 3), "six steps")
        with pytest.raises(ScaleDefinitionError):
            Scale((2, 2, 1, 2, 2, 2, 2), "too wide")
        with pytest.raises(ScaleDefinitionError):
            Scale((0, 2, 3, 2, 2, 2, 1), "zero step")


class TestKey:
    """Tests for Key."""

    def test_tonic_is_reference(self, c_major_440: Key) -> None:
        """Degree 0 is the reference frequency exactly."""
        assert c_major_440.degree_frequency(0) == 440.0

    def test_octave_repeat(self, c_major_440: Key) -> None:
        """Degree 7 is one octave above the tonic."""
        assert c_major_440.degree_frequency(7) == pytest.approx(880.0)

    def test_degree_frequencies(self, c_major_440: Key) -> None:
        """Degrees follow the scale's semitone offsets."""
        for degree, offset in enumerate((0, 2, 4, 5, 7, 9, 11)):
            assert c_major_440.degree_frequency(degree) == pytest.approx(440.0 * 2 ** (offset / 12))

    @pytest.mark.parametrize("degree", [-1, 8, 100])
    def test_invalid_degree(self, c_major_440: Key, degree: int) -> None:
        """Degrees outside 0-7 raise InvalidDegreeError."""
        with pytest.raises(InvalidDegreeError):
            c_major_440.degree_frequency(degree)

    def test_invalid_reference(self) -> None:
        """A non-positive reference frequency is rejected."""
        with pytest.raises(InvalidReferenceError):
            Key(PitchClass.C, ScaleKind.MAJOR, EqualTemperament(), 0.0)

    @pytest.mark.parametrize("reference_hz", [float("inf"), float("nan")])
    def test_non_finite_reference(self, reference_hz: float) -> None:
        """Infinite or NaN reference frequencies are rejected."""
        with pytest.raises(InvalidReferenceError):
            Key(PitchClass.C, ScaleKind.MAJOR, EqualTemperament(), reference_hz)

    def test_degree_frequency_overflow(self) -> None:
        """A finite tonic whose upper degrees overflow is rejected."""
        with pytest.raises(InvalidReferenceError):
            Key(PitchClass.C, ScaleKind.MAJOR, EqualTemperament(), 1.5e308)
        with pytest.raises(InvalidReferenceError):
            Key.from_names("B", "major", octave=9, pitch_standard=1e308)

    def test_just_intonation_fails_at_construction(self) -> None:
        """An unavailable temperament fails when the key is built."""
        with pytest.raises(TemperamentUnavailableError):
            Key(PitchClass.C, ScaleKind.MAJOR, JustIntonation(), 261.63)

    def test_c_major_octave_4(self) -> None:
        """C major from C4 with A4 = 440 Hz."""
        key = Key.from_names("C", "major")
        expected = [261.626, 293.665, 329.628, 349.228, 391.995, 440.000, 493.883, 523.251]
        for degree, hz in enumerate(expected):
            assert key.degree_frequency(degree) == pytest.approx(hz, abs=1e-3)

    def test_g_flat_minor(self) -> None:
        """Gb minor from Gb4 with A4 = 440 Hz."""
        key = Key.from_names("Gb", "minor")
        expected = [369.994, 415.305, 440.000, 493.883, 554.365, 587.330, 659.255, 739.989]
        for degree, hz in enumerate(expected):
            assert key.degree_frequency(degree) == pytest.approx(hz, abs=1e-3)

    def test_from_names_with_reference(self) -> None:
        """An explicit reference frequency wins over the octave."""
        key = Key.from_names("D", "minor", reference_hz=300.0)
        assert key.degree_frequency(0) == 300.0

    def test_from_names_errors(self) -> None:
        """Name parsing errors surface from from_names."""
        with pytest.raises(InvalidPitchClassError):
            Key.from_names("X", "major")
        with pytest.raises(UnknownScaleKindError):
            Key.from_names("C", "dorian")

    def test_get_pitches(self) -> None:
        """Pitch classes of the key."""
        assert Key.from_names("D", "minor").get_pitches() == [
            PitchClass.D,
            PitchClass.E,
            PitchClass.F,
            PitchClass.G,
            PitchClass.A,
            PitchClass.As,
            PitchClass.C,
        ]

    def test_key_str(self, c_major_440: Key) -> None:
        """String representation of keys."""
        assert str(c_major_440) == "C major"
        assert str(Key.from_names("F#", "minor")) == "F# minor"

    def test_immutable(self, c_major_440: Key) -> None:
        """Keys cannot be modified."""
        with pytest.raises(AttributeError):
            c_major_440.reference_hz = 220.0  # type: ignore[misc]


class TestTempo:
    """Tests for Tempo."""

    def test_default(self) -> None:
        """Eighth notes at 120 BPM last a quarter second."""
        tempo = Tempo()
        assert tempo.beats_per_event == Fraction(1, 2)
        assert tempo.event_seconds == 0.25
        assert tempo.samples_per_event(44100) == 11025

    def test_float_beats(self) -> None:
        """Float note values become fractions."""
        assert Tempo(90, 0.25).beats_per_event == Fraction(1, 4)

    def test_invalid(self) -> None:
        """Non-positive values are rejected."""
        with pytest.raises(InvalidTempoError):
            Tempo(0)
        with pytest.raises(InvalidTempoError):
            Tempo(120, Fraction(0))
        with pytest.raises(EmptySampleRateError):
            Tempo().samples_per_event(0)

    @pytest.mark.parametrize(
        ("bpm", "beats"),
        [(float("inf"), 0.5), (float("nan"), 0.5), (120, float("inf")), (120, float("nan"))],
    )
    def test_non_finite(self, bpm: float, beats: float) -> None:
        """Infinite or NaN tempo values are rejected."""
        with pytest.raises(InvalidTempoError):
            Tempo(bpm, beats)
