"""Voicing arrangement - Lay chord notes out as four keyboard voices."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Union

from ..core import Note
from ..core.constants import DEFAULT_OCTAVE, MAX_VOICING_OCTAVE, VOICE_COUNT
from .chords import Chord, generate_chord_notes


class VoicingType(str, Enum):
    """Four-voice keyboard arrangement styles."""

    CLOSE = "close"
    OPEN = "open"
    DROP2 = "drop2"
    DROP3 = "drop3"


@dataclass
class Voicing:
    """A four-note realisation of one chord in a progression."""

    notes: List[Note]  # Voice 0 is the bass
    type: VoicingType = VoicingType.CLOSE
    position: int = 0  # 1-based index within the progression, 0 if standalone

    @property
    def labels(self) -> List[str]:
        """Note labels from bass to top voice."""
        return [note.label for note in self.notes]

    @property
    def semitones(self) -> List[int]:
        return [note.semitone for note in self.notes]

    @property
    def frequencies(self) -> List[float]:
        return [note.frequency for note in self.notes]


def _capped(octave: int) -> int:
    return min(octave, MAX_VOICING_OCTAVE)


def to_four_voices(notes: Sequence[Note]) -> List[Note]:
    """
    Normalise a chord's notes to exactly four voices.

    - Four or more notes: the first four are kept
    - A triad [root, third, fifth] becomes [root, fifth, third, root an
      octave up]
    - Fewer notes: the root is doubled an octave above the previous
      doubling until four voices exist

    Doubled roots never go above octave 5.

    Raises:
        ValueError: if notes is empty
    """
    if not notes:
        raise ValueError("Cannot voice an empty note list")

    if len(notes) >= VOICE_COUNT:
        return list(notes[:VOICE_COUNT])

    root = notes[0]
    if len(notes) == 3:
        _, third, fifth = notes
        return [root, fifth, third, root.with_octave(_capped(root.octave + 1))]

    result = list(notes)
    last = root
    while len(result) < VOICE_COUNT:
        last = root.with_octave(_capped(last.octave + 1))
        result.append(last)
    return result


def _shift_voice(notes: List[Note], index: int, delta: int) -> None:
    note = notes[index]
    notes[index] = note.with_octave(note.octave + delta)


def generate_voicing(
    chord: Chord,
    voicing_type: Union[VoicingType, str] = VoicingType.CLOSE,
    reference_octave: int = DEFAULT_OCTAVE,
) -> Voicing:
    """
    Build a four-note voicing of a chord.

    Args:
        chord: Parsed chord
        voicing_type: close, open, drop2 or drop3
        reference_octave: Octave of the root note

    Returns:
        Voicing with position 0

    Raises:
        InvalidNoteName: if the chord's root is not a recognised pitch class
        ValueError: if voicing_type is unknown
    """
    voicing_type = VoicingType(voicing_type)
    notes = to_four_voices(generate_chord_notes(chord, reference_octave))

    if voicing_type is VoicingType.OPEN:
        if notes[3].octave < MAX_VOICING_OCTAVE:
            _shift_voice(notes, 3, +1)
    elif voicing_type is VoicingType.DROP2:
        # No floor: very low reference octaves can go below octave 0
        _shift_voice(notes, 1, -1)
    elif voicing_type is VoicingType.DROP3:
        _shift_voice(notes, 2, -1)

    return Voicing(notes=notes, type=voicing_type, position=0)
