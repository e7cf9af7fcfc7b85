"""
Audio features fetcher.

Spotify caps the audio-features endpoint at 100 IDs per request, so IDs are
split into chunks that are requested concurrently and joined once all of them
have completed.
"""

import asyncio
import logging
from typing import List, Sequence

from tempo_run.api.spotify_client import SpotifyClient, MAX_AUDIO_FEATURES_IDS
from tempo_run.models.audio_features import AudioFeatures

logger = logging.getLogger(__name__)

def chunk_ids(ids: Sequence[str], size: int) -> List[List[str]]:
    """Split IDs into contiguous chunks of at most ``size``."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(ids[i:i + size]) for i in range(0, len(ids), size)]

async def _fetch_batch(client: SpotifyClient, batch: List[str]) -> List[AudioFeatures]:
    result = await client.get_audio_features_for_tracks(batch)

    features = []
    for entry in result.get("audio_features") or []:
        # Spotify returns null for IDs it has no analysis for
        if entry is None:
            continue
        features.append(AudioFeatures.from_spotify(entry))

    missing = len(batch) - len(features)
    if missing:
        logger.warning(f"No audio features returned for {missing} of {len(batch)} tracks")
    return features

async def fetch_audio_features(
    client: SpotifyClient,
    ids: Sequence[str],
    batch_size: int = MAX_AUDIO_FEATURES_IDS
) -> List[AudioFeatures]:
    """
    Fetch audio features for the given track IDs.

    Results are concatenated in chunk order. Within a chunk the order is
    whatever Spotify returns, so callers must join on ID rather than position.
    If any chunk fails the whole call fails.

    Args:
        client: Authenticated Spotify client
        ids: Track IDs
        batch_size: IDs per request (at most 100)

    Returns:
        Flattened list of AudioFeatures
    """
    if batch_size > MAX_AUDIO_FEATURES_IDS:
        raise ValueError(f"Batch size cannot exceed {MAX_AUDIO_FEATURES_IDS}, got {batch_size}")

    batches = chunk_ids(ids, batch_size)
    if not batches:
        return []

    logger.info(f"Fetching audio features for {len(ids)} tracks in {len(batches)} batch(es)")
    results = await asyncio.gather(*[_fetch_batch(client, batch) for batch in batches])

    return [features for batch_result in results for features in batch_result]
