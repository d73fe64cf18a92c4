"""MIDI export functionality."""

import logging

import pretty_midi
from typing import List
from pathlib import Path

from ..core.constants import (
    DEFAULT_TEMPO,
    TEMPO_MIN,
    TEMPO_MAX,
    BEATS_PER_VOICING,
    MIDI_MIN,
    MIDI_MAX,
)
from ..theory import Voicing

logger = logging.getLogger(__name__)


def validate_tempo(tempo: float) -> float:
    """Check a tempo against the supported BPM range."""
    if not TEMPO_MIN <= tempo <= TEMPO_MAX:
        raise ValueError(f"Tempo must be between {TEMPO_MIN} and {TEMPO_MAX} BPM, got {tempo}")
    return tempo


def slot_duration(tempo: float, beats_per_voicing: float = BEATS_PER_VOICING) -> float:
    """Seconds each voicing sounds for at the given tempo."""
    return beats_per_voicing * 60.0 / tempo


class MIDIExporter:
    """Export voicings to MIDI format, one voicing per fixed slot."""

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        beats_per_voicing: float = BEATS_PER_VOICING,
        velocity: int = 80,
        instrument_name: str = "Acoustic Grand Piano",
        instrument_program: int = 0,
    ):
        """
        Initialize MIDIExporter.

        Args:
            tempo: Tempo in BPM (60-200)
            beats_per_voicing: Beats each voicing is held for
            velocity: MIDI velocity for every note (0-127)
            instrument_name: MIDI instrument name
            instrument_program: MIDI program number (0-127)
        """
        self.tempo = validate_tempo(tempo)
        self.beats_per_voicing = beats_per_voicing
        self.velocity = velocity
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program

    @property
    def slot_duration(self) -> float:
        return slot_duration(self.tempo, self.beats_per_voicing)

    def export(self, voicings: List[Voicing], output_path: str) -> None:
        """
        Export voicings to MIDI file.

        Args:
            voicings: Ordered voicings of a progression
            output_path: Path to output MIDI file
        """
        midi = self.voicings_to_pretty_midi(voicings)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))

    def voicings_to_pretty_midi(self, voicings: List[Voicing]) -> pretty_midi.PrettyMIDI:
        """Convert voicings to PrettyMIDI object without saving."""
        midi = pretty_midi.PrettyMIDI(initial_tempo=self.tempo)

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        duration = self.slot_duration
        for slot, voicing in enumerate(voicings):
            start = slot * duration
            pitches = set()
            for note in voicing.notes:
                if not MIDI_MIN <= note.semitone <= MIDI_MAX:
                    logger.debug("Chord %d: %s outside MIDI range, skipped", slot + 1, note.label)
                    continue
                pitches.add(note.midi_pitch)
            # A voice doubled at the same pitch is only struck once
            for pitch in sorted(pitches):
                instrument.notes.append(pretty_midi.Note(
                    velocity=self.velocity,
                    pitch=pitch,
                    start=start,
                    end=start + duration,
                ))

        midi.instruments.append(instrument)
        return midi
