"""Global constants for Chord Voicer."""

# Pitch names (sharps are the canonical spelling)
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Flat spellings accepted on input
FLAT_TO_SHARP = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

# Two-character roots checked before falling back to a natural root
ACCIDENTAL_ROOTS = [
    ("C#", "Db"),
    ("D#", "Eb"),
    ("F#", "Gb"),
    ("G#", "Ab"),
    ("A#", "Bb"),
]

# Tuning (semitone 69 is A5 under the index + octave * 12 scheme)
A4_FREQUENCY = 440.0
A4_SEMITONE = 69
SEMITONES_PER_OCTAVE = 12
DIATONIC_STEPS = 7

# Voicing defaults
DEFAULT_OCTAVE = 4
MAX_VOICING_OCTAVE = 5
VOICE_COUNT = 4

# Playback defaults
DEFAULT_TEMPO = 120
TEMPO_MIN = 60
TEMPO_MAX = 200
BEATS_PER_VOICING = 2  # one half note per chord

# MIDI ranges
MIDI_MIN = 0
MIDI_MAX = 127
