"""
Running pace options.
Maps a per-km pace band onto the cadence (BPM) range that suits it.
"""

from dataclasses import dataclass
from typing import Dict, Any, List

DEFAULT_MIN_TEMPO = 165.0

@dataclass(frozen=True)
class PaceOption:
    """A pace band and its matching tempo band."""
    km_mins_lower: int
    km_mins_upper: int
    bpm_lower: int
    bpm_upper: int

    @property
    def min_tempo(self) -> float:
        """Minimum tempo a track needs for this pace."""
        return float(self.bpm_lower)

    @property
    def label(self) -> str:
        return f"{self.km_mins_lower} - {self.km_mins_upper} mins per km ({self.bpm_lower} BPM+)"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "km_mins_lower": self.km_mins_lower,
            "km_mins_upper": self.km_mins_upper,
            "bpm_lower": self.bpm_lower,
            "bpm_upper": self.bpm_upper,
            "label": self.label
        }

# Slowest first. Bands from run2r.com cadence tables.
PACE_OPTIONS: List[PaceOption] = [
    PaceOption(km_mins_lower=8, km_mins_upper=10, bpm_lower=150, bpm_upper=156),
    PaceOption(km_mins_lower=6, km_mins_upper=8, bpm_lower=156, bpm_upper=163),
    PaceOption(km_mins_lower=4, km_mins_upper=6, bpm_lower=163, bpm_upper=171),
]
