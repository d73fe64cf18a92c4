"""JSON-ready representations of voicings."""

from typing import Any, Dict, List, Optional, Sequence

from ..core import Note
from ..theory import Voicing


def note_to_dict(note: Note) -> Dict[str, Any]:
    return {
        "name": note.name,
        "octave": note.octave,
        "frequency": round(note.frequency, 3),
    }


def voicing_to_dict(voicing: Voicing, chord: Optional[str] = None) -> Dict[str, Any]:
    data = {
        "position": voicing.position,
        "type": voicing.type.value,
        "notes": [note_to_dict(n) for n in voicing.notes],
    }
    if chord is not None:
        data["chord"] = chord
    return data


def voicings_to_dict(voicings: Sequence[Voicing], chords: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    """Convert voicings to a list of dicts, optionally labelled with their chord symbols."""
    if chords is None:
        return [voicing_to_dict(v) for v in voicings]
    return [voicing_to_dict(v, c) for v, c in zip(voicings, chords)]
