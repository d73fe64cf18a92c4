"""Offline audio rendering of voicings.

An AudioRenderer is an explicitly owned synthesis handle: construct one and
pass it to whatever needs sound. It renders a square-wave organ tone with an
ADSR envelope into numpy buffers and writes WAV files with soundfile.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence
import numpy as np
import soundfile as sf

from ..core.constants import DEFAULT_TEMPO, BEATS_PER_VOICING
from ..theory import Voicing
from .midi import validate_tempo, slot_duration


@dataclass
class Envelope:
    """ADSR envelope, times in seconds and sustain as a level (0-1)."""

    attack: float = 0.01
    decay: float = 0.1
    sustain: float = 0.8
    release: float = 0.5


class AudioRenderer:
    """Render voicings to audio buffers."""

    def __init__(
        self,
        sample_rate: int = 22050,
        tempo: float = DEFAULT_TEMPO,
        beats_per_voicing: float = BEATS_PER_VOICING,
        volume_db: float = -24.0,
        envelope: Optional[Envelope] = None,
    ):
        """
        Initialize AudioRenderer.

        Args:
            sample_rate: Output sample rate in Hz
            tempo: Tempo in BPM (60-200)
            beats_per_voicing: Beats each voicing is held for
            volume_db: Output gain in dB (negative values attenuate)
            envelope: Optional Envelope, defaults to a short organ envelope
        """
        self.sample_rate = sample_rate
        self.tempo = validate_tempo(tempo)
        self.beats_per_voicing = beats_per_voicing
        self.volume_db = volume_db
        self.envelope = envelope if envelope is not None else Envelope()

    @property
    def gain(self) -> float:
        return float(10 ** (self.volume_db / 20.0))

    @property
    def slot_duration(self) -> float:
        return slot_duration(self.tempo, self.beats_per_voicing)

    def _envelope_curve(self, hold: float) -> np.ndarray:
        """Amplitude curve for a note held `hold` seconds, including release."""
        env = self.envelope
        sr = self.sample_rate

        attack = np.linspace(0.0, 1.0, max(1, int(env.attack * sr)), endpoint=False)
        decay = np.linspace(1.0, env.sustain, max(1, int(env.decay * sr)), endpoint=False)
        sustain_len = max(0, int(hold * sr) - len(attack) - len(decay))
        sustain = np.full(sustain_len, env.sustain)
        release = np.linspace(env.sustain, 0.0, max(1, int(env.release * sr)))

        return np.concatenate([attack, decay, sustain, release])

    def render_voicing(self, voicing: Voicing, duration: Optional[float] = None) -> np.ndarray:
        """Render one voicing held for `duration` seconds (default: one slot)."""
        if duration is None:
            duration = self.slot_duration

        curve = self._envelope_curve(duration)
        t = np.arange(len(curve)) / self.sample_rate

        mix = np.zeros(len(curve))
        for freq in voicing.frequencies:
            mix += np.sign(np.sin(2 * np.pi * freq * t))

        if voicing.notes:
            mix /= len(voicing.notes)

        return (mix * curve * self.gain).astype(np.float32)

    def render_progression(self, voicings: Sequence[Voicing]) -> np.ndarray:
        """Render voicings back to back, one per slot, with release tails overlapping."""
        if not voicings:
            return np.zeros(0, dtype=np.float32)

        hop = int(round(self.slot_duration * self.sample_rate))
        rendered: List[np.ndarray] = [self.render_voicing(v) for v in voicings]
        total = hop * (len(rendered) - 1) + max(len(r) for r in rendered)

        out = np.zeros(total, dtype=np.float32)
        for i, buf in enumerate(rendered):
            out[i * hop:i * hop + len(buf)] += buf

        return np.clip(out, -1.0, 1.0)

    def write(self, voicings: Sequence[Voicing], output_path: str) -> None:
        """Render voicings and save them as a WAV file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        sf.write(str(output_path), self.render_progression(voicings), self.sample_rate)
