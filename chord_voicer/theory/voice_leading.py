"""Voice leading - Smooth a progression of voicings.

Processes a progression strictly left to right. For each adjacent pair of
voicings two passes run before moving on:
- Leap reduction: re-octave a voice that jumps more than a perfect fifth
- Parallel check: break up parallel perfect octaves and fifths

Pipeline: symbols → [parse, voice] → leap reduction + parallel check → voicings
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..core.constants import DEFAULT_OCTAVE, MAX_VOICING_OCTAVE, SEMITONES_PER_OCTAVE
from .chords import parse_chord_symbol
from .voicing import Voicing, VoicingType, generate_voicing

logger = logging.getLogger(__name__)


@dataclass
class SmoothingConfig:
    """Configuration for progression smoothing.

    Attributes:
        reference_octave: Octave every chord is first voiced at (default: 4)
        max_leap: Largest voice movement left alone, in semitones (default: 7)
        max_adjusted_leap: An octave shift is only accepted when it brings the
            movement down to this many semitones or fewer (default: 4)
        max_octave: Highest octave a smoothing shift may produce (default: 5)
        forbidden_intervals: Interval classes treated as perfect consonances
            for the parallel check (default: unison/octave and fifth)
    """

    reference_octave: int = DEFAULT_OCTAVE
    max_leap: int = 7
    max_adjusted_leap: int = 4
    max_octave: int = MAX_VOICING_OCTAVE
    forbidden_intervals: Tuple[int, ...] = (0, 7)


@dataclass
class SmoothingStats:
    """Statistics from a smoothing run."""

    chord_count: int = 0
    leaps_found: int = 0
    leaps_reduced: int = 0
    parallels_found: int = 0
    parallels_fixed: int = 0
    adjusted_voices: List[Tuple[int, int]] = field(default_factory=list)  # (position, voice)

    @property
    def parallels_unresolved(self) -> int:
        """Parallel perfect intervals left in place by the octave ceiling."""
        return self.parallels_found - self.parallels_fixed


class VoiceLeader:
    """Build voicings for a chord progression and smooth the voice leading.

    The smoothing replaces notes by index in each voicing; voicings later in
    the progression are compared against the already-adjusted earlier ones.
    """

    def __init__(self, config: Optional[SmoothingConfig] = None):
        """Initialize VoiceLeader.

        Args:
            config: Optional SmoothingConfig, defaults to the standard thresholds
        """
        self.config = config if config is not None else SmoothingConfig()

    def build(
        self,
        chord_symbols: Sequence[str],
        voicing_type: Union[VoicingType, str] = VoicingType.CLOSE,
    ) -> List[Voicing]:
        """Parse and voice each chord, numbering positions from 1."""
        voicings = []
        for i, symbol in enumerate(chord_symbols):
            chord = parse_chord_symbol(symbol)
            voicing = generate_voicing(chord, voicing_type, self.config.reference_octave)
            voicing.position = i + 1
            voicings.append(voicing)
        return voicings

    def smooth(
        self,
        chord_symbols: Sequence[str],
        voicing_type: Union[VoicingType, str] = VoicingType.CLOSE,
        return_stats: bool = False,
    ):
        """
        Generate smoothed voicings for a progression.

        Args:
            chord_symbols: Ordered chord symbols (e.g., ["C", "Am", "F", "G"])
            voicing_type: close, open, drop2 or drop3
            return_stats: If True, return (voicings, stats) tuple

        Returns:
            List of voicings, or (voicings, stats) if return_stats=True

        Raises:
            InvalidNoteName: if any chord root is not a recognised pitch class;
                no voicings are returned in that case
        """
        stats = SmoothingStats()
        voicings = self.build(chord_symbols, voicing_type)
        stats.chord_count = len(voicings)

        for i in range(1, len(voicings)):
            self._reduce_leaps(voicings[i - 1], voicings[i], stats)
            self._fix_parallels(voicings[i - 1], voicings[i], stats)

        logger.debug(
            "Smoothed %d voicings: %d/%d leaps reduced, %d/%d parallels fixed",
            stats.chord_count,
            stats.leaps_reduced,
            stats.leaps_found,
            stats.parallels_fixed,
            stats.parallels_found,
        )

        if return_stats:
            return voicings, stats
        return voicings

    def _reduce_leaps(self, prev: Voicing, current: Voicing, stats: SmoothingStats) -> None:
        """Pull voices that leap more than max_leap back towards the previous chord."""
        for j in range(min(len(prev.notes), len(current.notes))):
            prev_semitone = prev.notes[j].semitone
            note = current.notes[j]
            distance = abs(note.semitone - prev_semitone)

            if distance <= self.config.max_leap:
                continue
            stats.leaps_found += 1

            octave = note.octave + (-1 if note.semitone > prev_semitone else 1)
            if octave > self.config.max_octave:
                continue

            adjusted = note.with_octave(octave)
            adjusted_distance = abs(adjusted.semitone - prev_semitone)
            if adjusted_distance < distance and adjusted_distance <= self.config.max_adjusted_leap:
                current.notes[j] = adjusted
                stats.leaps_reduced += 1
                stats.adjusted_voices.append((current.position, j))
                logger.debug(
                    "Chord %d voice %d: %s -> %s (leap %d -> %d)",
                    current.position, j, note.label, adjusted.label, distance, adjusted_distance,
                )

    def _fix_parallels(self, prev: Voicing, current: Voicing, stats: SmoothingStats) -> None:
        """Raise the upper voice of any pair moving in parallel octaves or fifths."""
        forbidden = self.config.forbidden_intervals
        count = len(current.notes)

        for j in range(count - 1):
            for k in range(j + 1, count):
                current_interval = _interval_class(current.notes[j].semitone, current.notes[k].semitone)
                prev_interval = _interval_class(prev.notes[j].semitone, prev.notes[k].semitone)

                if prev_interval not in forbidden or current_interval not in forbidden:
                    continue
                stats.parallels_found += 1

                upper = current.notes[k]
                if upper.octave + 1 <= self.config.max_octave:
                    current.notes[k] = upper.with_octave(upper.octave + 1)
                    stats.parallels_fixed += 1
                    stats.adjusted_voices.append((current.position, k))
                else:
                    logger.debug(
                        "Chord %d voices %d/%d: parallel interval left unresolved at octave ceiling",
                        current.position, j, k,
                    )


def _interval_class(a: int, b: int) -> int:
    return abs(a - b) % SEMITONES_PER_OCTAVE


def generate_smooth_voicings(
    chord_symbols: Sequence[str],
    voicing_type: Union[VoicingType, str] = VoicingType.CLOSE,
    config: Optional[SmoothingConfig] = None,
) -> List[Voicing]:
    """
    Voice a chord progression with smooth voice leading.

    Args:
        chord_symbols: Ordered chord symbols; an empty list returns []
        voicing_type: close, open, drop2 or drop3
        config: Optional SmoothingConfig

    Returns:
        One voicing per symbol, positions 1..n
    """
    return VoiceLeader(config=config).smooth(chord_symbols, voicing_type)
