"""Theory layer - Chord symbols to smoothly connected voicings.

This layer turns chord symbols into playable keyboard voicings:
- Chord symbol parsing (root, quality, extensions)
- Chord-to-notes resolution from the quality table
- Four-voice arrangement (close, open, drop2, drop3)
- Progression smoothing (leap reduction, parallel octaves/fifths)

Pipeline: symbol → Chord → Notes → Voicing → smoothed Voicings
"""

from .chords import (
    Chord,
    CHORD_QUALITIES,
    parse_chord_symbol,
    generate_chord_notes,
    extension_offset,
)
from .voicing import Voicing, VoicingType, to_four_voices, generate_voicing
from .voice_leading import (
    VoiceLeader,
    SmoothingConfig,
    SmoothingStats,
    generate_smooth_voicings,
)

__all__ = [
    # Chords
    "Chord",
    "CHORD_QUALITIES",
    "parse_chord_symbol",
    "generate_chord_notes",
    "extension_offset",
    # Voicing
    "Voicing",
    "VoicingType",
    "to_four_voices",
    "generate_voicing",
    # Voice leading
    "VoiceLeader",
    "SmoothingConfig",
    "SmoothingStats",
    "generate_smooth_voicings",
]
