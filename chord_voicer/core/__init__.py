"""Core types and constants for Chord Voicer."""

from .note import (
    Note,
    InvalidNoteName,
    normalize_pitch_class,
    name_and_octave_to_semitone,
    semitone_to_note,
    semitone_to_frequency,
)
from .constants import (
    PITCH_NAMES,
    FLAT_TO_SHARP,
    DEFAULT_OCTAVE,
    MAX_VOICING_OCTAVE,
    DEFAULT_TEMPO,
)

__all__ = [
    "Note",
    "InvalidNoteName",
    "normalize_pitch_class",
    "name_and_octave_to_semitone",
    "semitone_to_note",
    "semitone_to_frequency",
    "PITCH_NAMES",
    "FLAT_TO_SHARP",
    "DEFAULT_OCTAVE",
    "MAX_VOICING_OCTAVE",
    "DEFAULT_TEMPO",
]
