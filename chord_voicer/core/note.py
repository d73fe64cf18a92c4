"""Note data class and the pitch model.

A note's absolute position is ``pitch_class_index + octave * 12``. Under this
scheme semitone 69 (440 Hz) is labelled A5, one octave above the MIDI
convention, so the semitone value itself lines up with MIDI pitch numbers.
"""

import re
from dataclasses import dataclass

from .constants import (
    PITCH_NAMES,
    FLAT_TO_SHARP,
    A4_FREQUENCY,
    A4_SEMITONE,
    SEMITONES_PER_OCTAVE,
    DEFAULT_OCTAVE,
    MIDI_MIN,
    MIDI_MAX,
)

_LABEL_RE = re.compile(r"^(?P<name>.*?)(?P<octave>-?\d+)?$")


class InvalidNoteName(ValueError):
    """Raised when a note name is not one of the 12 sharp or 5 flat spellings."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Invalid note name: {label!r}")


def normalize_pitch_class(name: str) -> str:
    """Return the canonical (sharp) spelling of a pitch class name."""
    name = FLAT_TO_SHARP.get(name, name)
    if name not in PITCH_NAMES:
        raise InvalidNoteName(name)
    return name


def semitone_to_frequency(semitone: int) -> float:
    """Convert an absolute semitone index to frequency (Hz)."""
    return A4_FREQUENCY * (2 ** ((semitone - A4_SEMITONE) / 12.0))


def name_and_octave_to_semitone(label: str) -> int:
    """
    Convert a label such as "C4", "F#3" or "Bb" to an absolute semitone.

    The octave defaults to 4 when the label carries none.

    Raises:
        InvalidNoteName: if the name part is not a recognised spelling
    """
    match = _LABEL_RE.match(label.strip())
    name = match.group("name")
    octave_text = match.group("octave")
    octave = int(octave_text) if octave_text is not None else DEFAULT_OCTAVE

    try:
        pitch_class = normalize_pitch_class(name)
    except InvalidNoteName:
        raise InvalidNoteName(label) from None

    return PITCH_NAMES.index(pitch_class) + octave * SEMITONES_PER_OCTAVE


def semitone_to_note(semitone: int) -> "Note":
    """Convert an absolute semitone index to a Note."""
    octave, index = divmod(semitone, SEMITONES_PER_OCTAVE)
    return Note(name=PITCH_NAMES[index], octave=octave)


@dataclass(frozen=True)
class Note:
    """A pitched note: pitch class name plus octave."""

    name: str  # Canonical pitch class (e.g., "C", "F#")
    octave: int

    def __post_init__(self):
        if self.name not in PITCH_NAMES:
            object.__setattr__(self, "name", normalize_pitch_class(self.name))

    @classmethod
    def from_label(cls, label: str) -> "Note":
        """Build a Note from a label such as "Eb3"."""
        return semitone_to_note(name_and_octave_to_semitone(label))

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return PITCH_NAMES.index(self.name)

    @property
    def semitone(self) -> int:
        """Absolute semitone index (pitch class + octave * 12)."""
        return self.pitch_class + self.octave * SEMITONES_PER_OCTAVE

    @property
    def frequency(self) -> float:
        """Fundamental frequency in Hz."""
        return semitone_to_frequency(self.semitone)

    @property
    def label(self) -> str:
        """Get note label (e.g., 'C4', 'A#3')."""
        return f"{self.name}{self.octave}"

    @property
    def midi_pitch(self) -> int:
        """MIDI pitch with the same frequency, clamped to 0-127."""
        return max(MIDI_MIN, min(MIDI_MAX, self.semitone))

    def with_octave(self, octave: int) -> "Note":
        """Return the same pitch class re-pitched to another octave."""
        return Note(name=self.name, octave=octave)

    def __str__(self) -> str:
        return self.label
