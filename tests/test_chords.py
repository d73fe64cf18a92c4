"""Tests for chord symbol parsing and chord-to-notes resolution."""

import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from chord_voicer.core import InvalidNoteName
from chord_voicer.theory import (
    Chord,
    CHORD_QUALITIES,
    parse_chord_symbol,
    generate_chord_notes,
    extension_offset,
)


def labels(notes):
    return [n.label for n in notes]


class TestParseChordSymbol:
    """Tests for the chord parser."""

    def test_major_seventh(self):
        chord = parse_chord_symbol("Cmaj7")
        assert chord == Chord(root="C", quality="major7", extensions=(), bass=None)

    def test_capital_m7_is_major_seventh(self):
        assert parse_chord_symbol("CM7").quality == "major7"

    def test_minor_seventh_with_sharp_root(self):
        chord = parse_chord_symbol("F#m7")
        assert chord.root == "F#"
        assert chord.quality == "minor7"
        assert chord.extensions == ()

    def test_dominant(self):
        assert parse_chord_symbol("G7").quality == "dominant"

    def test_minor(self):
        chord = parse_chord_symbol("Am")
        assert chord.root == "A"
        assert chord.quality == "minor"

    def test_flat_root_normalized(self):
        assert parse_chord_symbol("Ebaug") == Chord("D#", "augmented")
        assert parse_chord_symbol("Bb").root == "A#"
        assert parse_chord_symbol("Gbsus4") == Chord("F#", "sus4")

    def test_suspended(self):
        assert parse_chord_symbol("Gsus2").quality == "sus2"
        assert parse_chord_symbol("Asus4").quality == "sus4"

    def test_plain_root_defaults_to_major(self):
        assert parse_chord_symbol("E") == Chord("E", "major")

    def test_whitespace_trimmed(self):
        assert parse_chord_symbol("  Dm  ") == Chord("D", "minor")

    def test_number_is_extension_not_quality(self):
        assert parse_chord_symbol("C9") == Chord("C", "major", (9,))
        assert parse_chord_symbol("C13") == Chord("C", "major", (13,))

    def test_extension_after_quality(self):
        chord = parse_chord_symbol("Dm7add11")
        assert chord.quality == "minor7"
        assert chord.extensions == (11,)

    def test_half_diminished_leaves_five_as_extension(self):
        # Documented quirk: the "5" of "b5" is captured as degree 5
        chord = parse_chord_symbol("Cm7b5")
        assert chord.quality == "minor7"
        assert chord.extensions == (5,)

    def test_dim_matches_minor_first(self):
        # Documented quirk: "m" is checked by containment before "dim"
        chord = parse_chord_symbol("Bbdim")
        assert chord.root == "A#"
        assert chord.quality == "minor"

    def test_bass_never_set(self):
        assert parse_chord_symbol("C/G").bass is None

    def test_unknown_root_accepted(self):
        chord = parse_chord_symbol("Xyz123")
        assert chord.root == "X"
        assert chord.quality == "major"
        assert chord.extensions == (123,)

    def test_empty_symbol(self):
        chord = parse_chord_symbol("")
        assert chord.root == ""
        assert chord.quality == "major"

    def test_symbol_property(self):
        assert parse_chord_symbol("F#m7").symbol == "F#m7"
        assert parse_chord_symbol("C9").symbol == "C9"
        assert Chord("C", "major", bass="G").symbol == "C/G"


class TestChordQualities:

    def test_table_size(self):
        assert len(CHORD_QUALITIES) == 26

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            CHORD_QUALITIES["power"] = (0, 7)

    def test_intervals_ascending_from_root(self):
        for intervals in CHORD_QUALITIES.values():
            assert intervals[0] == 0
            assert list(intervals) == sorted(intervals)


class TestGenerateChordNotes:
    """Tests for chord-to-notes resolution."""

    def test_major_seventh(self):
        notes = generate_chord_notes(Chord("C", "major7"), 4)
        assert labels(notes) == ["C4", "E4", "G4", "B4"]
        assert [n.semitone - 48 for n in notes] == [0, 4, 7, 11]

    def test_minor_ninth(self):
        notes = generate_chord_notes(Chord("A", "m9"), 4)
        assert labels(notes) == ["A4", "C5", "E5", "G5", "B5"]

    def test_unknown_quality_falls_back_to_major(self):
        notes = generate_chord_notes(Chord("C", "power"), 4)
        assert labels(notes) == ["C4", "E4", "G4"]

    def test_flat_root(self):
        notes = generate_chord_notes(Chord("Bb", "major"), 3)
        assert labels(notes) == ["A#3", "D4", "F4"]

    def test_extension_folding(self):
        notes = generate_chord_notes(Chord("C", "major", (9, 11, 13)), 4)
        assert labels(notes) == ["C4", "E4", "G4", "D5", "E5", "F#5"]

    def test_low_extensions_ignored(self):
        notes = generate_chord_notes(parse_chord_symbol("Cm7b5"), 4)
        assert labels(notes) == ["C4", "D#4", "G4", "A#4"]

    def test_default_octave(self):
        assert generate_chord_notes(Chord("D", "minor")) == generate_chord_notes(Chord("D", "minor"), 4)

    def test_invalid_root_raises(self):
        with pytest.raises(InvalidNoteName):
            generate_chord_notes(parse_chord_symbol("Xyz123"), 4)

    def test_empty_root_raises(self):
        with pytest.raises(InvalidNoteName):
            generate_chord_notes(parse_chord_symbol(""), 4)


class TestExtensionOffset:

    @pytest.mark.parametrize("degree,offset", [(8, 13), (9, 14), (11, 16), (13, 18), (15, 25)])
    def test_offsets(self, degree, offset):
        assert extension_offset(degree) == offset
