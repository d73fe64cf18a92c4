"""Tests for the pitch model and Note dataclass."""

import dataclasses

import pytest
import numpy as np
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from chord_voicer.core import (
    Note,
    InvalidNoteName,
    PITCH_NAMES,
    name_and_octave_to_semitone,
    semitone_to_note,
    normalize_pitch_class,
)


class TestNameAndOctaveToSemitone:
    """Tests for label -> semitone conversion."""

    def test_natural_notes(self):
        assert name_and_octave_to_semitone("C4") == 48
        assert name_and_octave_to_semitone("A5") == 69
        assert name_and_octave_to_semitone("B0") == 11

    def test_sharps_and_flats(self):
        assert name_and_octave_to_semitone("F#3") == 42
        assert name_and_octave_to_semitone("Bb2") == 34
        assert name_and_octave_to_semitone("Db4") == name_and_octave_to_semitone("C#4")

    def test_default_octave_is_four(self):
        assert name_and_octave_to_semitone("D") == 50
        assert name_and_octave_to_semitone("G#") == 56

    def test_octave_zero_is_kept(self):
        assert name_and_octave_to_semitone("C0") == 0
        assert name_and_octave_to_semitone("A0") == 9

    def test_negative_octave(self):
        assert name_and_octave_to_semitone("C-1") == -12
        assert name_and_octave_to_semitone("B-1") == -1

    @pytest.mark.parametrize("label", ["H4", "X", "Cb4", "E#4", "c4", "", "4"])
    def test_invalid_names(self, label):
        with pytest.raises(InvalidNoteName):
            name_and_octave_to_semitone(label)

    def test_invalid_name_is_value_error(self):
        with pytest.raises(ValueError) as exc:
            name_and_octave_to_semitone("Q3")
        assert exc.value.label == "Q3"


class TestSemitoneToNote:
    """Tests for semitone -> Note conversion."""

    def test_a440(self):
        note = semitone_to_note(69)
        assert note.name == "A"
        assert note.octave == 5
        assert note.frequency == pytest.approx(440.0)

    def test_middle_of_range(self):
        assert semitone_to_note(48) == Note("C", 4)
        assert semitone_to_note(61) == Note("C#", 5)

    def test_negative_semitone_uses_floor(self):
        note = semitone_to_note(-1)
        assert note.name == "B"
        assert note.octave == -1

        note = semitone_to_note(-12)
        assert note.name == "C"
        assert note.octave == -1

    def test_round_trip_all_names(self):
        for name in PITCH_NAMES:
            for octave in range(0, 9):
                note = semitone_to_note(name_and_octave_to_semitone(f"{name}{octave}"))
                assert note.name == name
                assert note.octave == octave


class TestNote:
    """Tests for Note dataclass."""

    def test_frequency_invariant(self):
        for semitone in range(-24, 120):
            note = semitone_to_note(semitone)
            expected = 440 * 2 ** ((note.pitch_class + note.octave * 12 - 69) / 12)
            assert np.isclose(note.frequency, expected, rtol=1e-9, atol=0)

    def test_flat_name_normalized(self):
        assert Note("Db", 4).name == "C#"
        assert Note("Bb", 3) == Note("A#", 3)

    def test_invalid_name_rejected(self):
        with pytest.raises(InvalidNoteName):
            Note("H", 4)

    def test_frozen(self):
        note = Note("C", 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.octave = 5

    def test_with_octave_returns_new_note(self):
        note = Note("E", 4)
        higher = note.with_octave(5)
        assert higher == Note("E", 5)
        assert note.octave == 4
        assert higher.frequency == pytest.approx(note.frequency * 2)

    def test_label_and_from_label(self):
        assert Note("F#", 3).label == "F#3"
        assert str(Note("G", 2)) == "G2"
        assert Note.from_label("Eb3") == Note("D#", 3)

    def test_midi_pitch(self):
        # Same frequency as the MIDI note with this number
        assert Note("A", 5).midi_pitch == 69
        assert Note("C", 4).midi_pitch == 48
        assert Note("C", -2).midi_pitch == 0
        assert Note("C", 11).midi_pitch == 127


class TestNormalizePitchClass:

    def test_flats(self):
        assert normalize_pitch_class("Eb") == "D#"
        assert normalize_pitch_class("Gb") == "F#"
        assert normalize_pitch_class("Ab") == "G#"

    def test_canonical_unchanged(self):
        for name in PITCH_NAMES:
            assert normalize_pitch_class(name) == name

    def test_unknown(self):
        with pytest.raises(InvalidNoteName):
            normalize_pitch_class("Fb")
