"""
Recommended tracks for the discover playlist.
"""

import logging
from typing import Iterable, List

from tempo_run.api.spotify_client import SpotifyClient
from tempo_run.models.seed import Seed
from tempo_run.models.track import Track
from tempo_run.services.track_filter import MIN_ENERGY, MIN_VALENCE, select_seed_artists

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 50

async def fetch_recommended_tracks(
    client: SpotifyClient,
    seeds: Iterable[Seed],
    min_tempo: float,
    limit: int = RECOMMENDATION_LIMIT
) -> List[Track]:
    """
    Ask Spotify for upbeat tracks seeded by the selected artists.

    Args:
        client: Authenticated Spotify client
        seeds: Selected seeds; only the first five artists are used
        min_tempo: Minimum tempo in BPM
        limit: Number of tracks to request

    Returns:
        Recommended tracks

    Raises:
        ValueError: If no artist seed was selected
    """
    artist_ids = select_seed_artists(seeds)
    if not artist_ids:
        raise ValueError("At least one artist seed is required for recommendations")

    result = await client.get_recommendations(
        seed_artists=artist_ids,
        min_tempo=min_tempo,
        min_energy=MIN_ENERGY,
        min_valence=MIN_VALENCE,
        limit=limit
    )

    tracks = [Track.from_spotify(item) for item in result.get("tracks") or []]
    logger.info(f"Got {len(tracks)} recommended tracks from {len(artist_ids)} artist seed(s)")
    return tracks
