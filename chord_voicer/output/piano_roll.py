"""Piano-roll grid - Voicings laid out against a fixed key axis."""

from typing import List, Sequence, Tuple
import numpy as np

from ..core import PITCH_NAMES
from ..theory import Voicing

DEFAULT_OCTAVES = (2, 3, 4, 5)


class PianoRoll:
    """Map voicings onto a grid keyed by (pitch class, octave).

    Rows run from the highest key down to the lowest, columns are chords in
    progression order. Each sounding cell holds the 1-based voice number
    (1 = bass); empty cells are 0. Notes outside the axis are dropped.
    """

    def __init__(self, octaves: Sequence[int] = DEFAULT_OCTAVES):
        self.octaves = tuple(sorted(octaves))
        self.keys: List[Tuple[str, int]] = [
            (name, octave)
            for octave in reversed(self.octaves)
            for name in reversed(PITCH_NAMES)
        ]
        self._row_index = {key: row for row, key in enumerate(self.keys)}

    @property
    def row_labels(self) -> List[str]:
        """Key labels from top row to bottom (e.g., 'B5', ..., 'C2')."""
        return [f"{name}{octave}" for name, octave in self.keys]

    def row_of(self, name: str, octave: int) -> int:
        """Row index of a key, or -1 when it is off the axis."""
        return self._row_index.get((name, octave), -1)

    def grid(self, voicings: Sequence[Voicing]) -> np.ndarray:
        """Build the key x chord grid for a progression."""
        grid = np.zeros((len(self.keys), len(voicings)), dtype=np.int8)

        for col, voicing in enumerate(voicings):
            for voice, note in enumerate(voicing.notes):
                row = self.row_of(note.name, note.octave)
                if row >= 0 and grid[row, col] == 0:
                    grid[row, col] = voice + 1

        return grid

    def active_rows(self, voicings: Sequence[Voicing]) -> np.ndarray:
        """Indices of rows with at least one sounding note."""
        return np.flatnonzero(self.grid(voicings).any(axis=1))
