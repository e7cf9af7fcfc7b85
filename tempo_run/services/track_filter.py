"""
Track filtering and seed selection.
"""

from typing import Iterable, List

from tempo_run.models.audio_features import EnrichedTrack
from tempo_run.models.seed import Seed, SeedKind

MIN_ENERGY = 0.5
MIN_VALENCE = 0.3
MAX_SEED_ARTISTS = 5

def matches_thresholds(track: EnrichedTrack, min_tempo: float) -> bool:
    """Check a track is upbeat and fast enough; all bounds are exclusive."""
    if not track.has_audio_features:
        return False
    return (
        track.valence > MIN_VALENCE
        and track.energy > MIN_ENERGY
        and track.tempo > min_tempo
    )

def filter_by_threshold(tracks: Iterable[EnrichedTrack], min_tempo: float) -> List[EnrichedTrack]:
    """Keep tracks with valence > 0.3, energy > 0.5 and tempo > min_tempo."""
    return [track for track in tracks if matches_thresholds(track, min_tempo)]

def select_seed_artists(seeds: Iterable[Seed]) -> List[str]:
    """Get IDs of the first five artist seeds, in selection order."""
    artist_ids = [seed.id for seed in seeds if seed.kind == SeedKind.ARTIST]
    return artist_ids[:MAX_SEED_ARTISTS]
