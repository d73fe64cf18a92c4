"""Output layer - Export voicings."""

from .midi import MIDIExporter, validate_tempo, slot_duration
from .piano_roll import PianoRoll
from .audio import AudioRenderer, Envelope
from .serialize import note_to_dict, voicing_to_dict, voicings_to_dict

__all__ = [
    "MIDIExporter",
    "validate_tempo",
    "slot_duration",
    "PianoRoll",
    "AudioRenderer",
    "Envelope",
    "note_to_dict",
    "voicing_to_dict",
    "voicings_to_dict",
]
