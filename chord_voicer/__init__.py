"""Chord Voicer - Chord symbols to smoothly connected keyboard voicings.

Architecture Layers:
    1. core/    - Note type, pitch model, constants, errors
    2. theory/  - Chord parsing, note resolution, voicing, voice leading
    3. output/  - Export (MIDI, piano-roll grid, audio, JSON)
"""

__version__ = "0.1.0"

# Core types
from .core import Note, InvalidNoteName

# Theory layer
from .theory import (
    Chord,
    Voicing,
    VoicingType,
    VoiceLeader,
    SmoothingConfig,
    parse_chord_symbol,
    generate_chord_notes,
    generate_voicing,
    generate_smooth_voicings,
)

# Output layer
from .output import MIDIExporter, PianoRoll, AudioRenderer

__all__ = [
    # Core
    "Note",
    "InvalidNoteName",
    # Theory
    "Chord",
    "Voicing",
    "VoicingType",
    "VoiceLeader",
    "SmoothingConfig",
    "parse_chord_symbol",
    "generate_chord_notes",
    "generate_voicing",
    "generate_smooth_voicings",
    # Output
    "MIDIExporter",
    "PianoRoll",
    "AudioRenderer",
]
