"""Chord symbols - Parse symbols and resolve them into notes.

Implements:
- Root extraction with sharp and flat accidentals
- Quality detection by prioritised substring match
- Extension degree scanning (9, 11, 13, ...)
- Quality table lookup and extension folding into absolute notes
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Tuple

from ..core import Note, semitone_to_note, name_and_octave_to_semitone
from ..core.constants import (
    ACCIDENTAL_ROOTS,
    DEFAULT_OCTAVE,
    DIATONIC_STEPS,
    SEMITONES_PER_OCTAVE,
)

logger = logging.getLogger(__name__)


# Quality label -> ascending semitone offsets from the root
CHORD_QUALITIES = MappingProxyType({
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "dominant": (0, 4, 7, 10),
    "major7": (0, 4, 7, 11),
    "minor7": (0, 3, 7, 10),
    "minorMajor7": (0, 3, 7, 11),
    "diminished": (0, 3, 6),
    "diminished7": (0, 3, 6, 9),
    "augmented": (0, 4, 8),
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "add9": (0, 4, 7, 14),
    "madd9": (0, 3, 7, 14),
    "6": (0, 4, 7, 9),
    "m6": (0, 3, 7, 9),
    "69": (0, 4, 7, 9, 14),
    "m69": (0, 3, 7, 9, 14),
    "9": (0, 4, 7, 10, 14),
    "m9": (0, 3, 7, 10, 14),
    "maj9": (0, 4, 7, 11, 14),
    "11": (0, 4, 7, 10, 14, 17),
    "m11": (0, 3, 7, 10, 14, 17),
    "maj11": (0, 4, 7, 11, 14, 17),
    "13": (0, 4, 7, 10, 14, 17, 21),
    "m13": (0, 3, 7, 10, 14, 17, 21),
    "maj13": (0, 4, 7, 11, 14, 17, 21),
})

# Quality tokens in priority order: (pattern, quality, remove all occurrences)
QUALITY_TOKENS: Tuple[Tuple[str, str, bool], ...] = (
    ("maj7|M7", "major7", True),
    ("m7", "minor7", False),
    ("7", "dominant", False),
    ("m", "minor", False),
    ("dim", "diminished", False),
    ("aug", "augmented", False),
    ("sus2", "sus2", False),
    ("sus4", "sus4", False),
)

# Display suffix per quality
QUALITY_SUFFIXES = {
    "major": "",
    "minor": "m",
    "dominant": "7",
    "major7": "maj7",
    "minor7": "m7",
    "minorMajor7": "mMaj7",
    "diminished": "dim",
    "diminished7": "dim7",
    "augmented": "aug",
}

_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Chord:
    """Represents a parsed chord symbol."""

    root: str  # Root note (e.g., "C", "F#"); validated only when resolved
    quality: str = "major"  # One of CHORD_QUALITIES
    extensions: Tuple[int, ...] = ()  # Extension degrees (e.g., 9, 11, 13)
    bass: Optional[str] = None  # Slash-chord bass, never filled by the parser

    def __post_init__(self):
        # Accept lists for convenience, store an immutable tuple
        object.__setattr__(self, "extensions", tuple(int(e) for e in self.extensions))

    @property
    def intervals(self) -> Tuple[int, ...]:
        """Semitone offsets of the base quality (major for unknown labels)."""
        return CHORD_QUALITIES.get(self.quality, CHORD_QUALITIES["major"])

    @property
    def symbol(self) -> str:
        """Get chord symbol (e.g., 'Cmaj7', 'Am', 'G/B')."""
        suffix = QUALITY_SUFFIXES.get(self.quality, self.quality)
        symbol = f"{self.root}{suffix}"
        for ext in self.extensions:
            symbol += str(ext)
        if self.bass and self.bass != self.root:
            symbol += f"/{self.bass}"
        return symbol


def _extract_root(symbol: str) -> Tuple[str, str]:
    """Split a symbol into (root, remaining residue)."""
    for sharp, flat in ACCIDENTAL_ROOTS:
        if symbol.startswith(sharp) or symbol.startswith(flat):
            return sharp, symbol[2:]
    return symbol[:1], symbol[1:]


def _detect_quality(residue: str) -> Tuple[str, str]:
    """Find the first quality token in the residue and remove it."""
    for pattern, quality, remove_all in QUALITY_TOKENS:
        if re.search(pattern, residue):
            count = 0 if remove_all else 1
            return quality, re.sub(pattern, "", residue, count=count)
    return "major", residue


def parse_chord_symbol(symbol: str) -> Chord:
    """
    Parse a chord symbol into a Chord.

    Never raises: an unrecognised root is kept as-is and fails later, when
    the chord is resolved to notes.

    Known quirks, kept intentionally:
    - "Cm7b5" leaves "5" in the residue, captured as extension 5 and then
      ignored by the resolver (degrees <= 7 add nothing)
    - "m" is matched by containment before "dim", so "Cdim" parses as minor

    Args:
        symbol: Chord symbol (e.g., "Cmaj7", "F#m7", "Bbdim", "C9")

    Returns:
        Chord with root, quality and extensions
    """
    root, residue = _extract_root(symbol.strip())
    quality, residue = _detect_quality(residue)
    extensions = tuple(int(d) for d in _DIGITS_RE.findall(residue))
    return Chord(root=root, quality=quality, extensions=extensions)


def extension_offset(degree: int) -> int:
    """
    Semitone offset of an extension degree above the root.

    The degree is folded into an octave shift plus a scale step; this is an
    approximation, not a true diatonic interval (an 11th lands 16 semitones
    up rather than 17).
    """
    octave_offset = ((degree - 1) // DIATONIC_STEPS) * SEMITONES_PER_OCTAVE
    degree_in_octave = ((degree - 1) % DIATONIC_STEPS) + 1
    return octave_offset + degree_in_octave


def generate_chord_notes(chord: Chord, reference_octave: int = DEFAULT_OCTAVE) -> List[Note]:
    """
    Resolve a chord into notes around a reference octave.

    Args:
        chord: Parsed chord
        reference_octave: Octave of the root note

    Returns:
        Base-interval notes followed by extension notes, in input order

    Raises:
        InvalidNoteName: if the chord's root is not a recognised pitch class
    """
    root_semitone = name_and_octave_to_semitone(f"{chord.root}{reference_octave}")

    if chord.quality not in CHORD_QUALITIES:
        logger.debug("Unknown chord quality %r, falling back to major triad", chord.quality)

    notes = [semitone_to_note(root_semitone + interval) for interval in chord.intervals]

    for degree in chord.extensions:
        # Degrees up to 7 are already covered by the base intervals
        if degree > DIATONIC_STEPS:
            notes.append(semitone_to_note(root_semitone + extension_offset(degree)))

    return notes
