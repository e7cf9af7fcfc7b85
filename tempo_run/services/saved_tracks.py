"""
Saved tracks fetcher.
Pages through the user's library until it is exhausted or enough tracks are collected.
"""

import logging
from typing import List

from tempo_run.api.spotify_client import SpotifyClient, MAX_SAVED_TRACKS_LIMIT
from tempo_run.models.track import Track

logger = logging.getLogger(__name__)

SAVED_TRACKS_PAGE_SIZE = MAX_SAVED_TRACKS_LIMIT

async def fetch_saved_tracks(
    client: SpotifyClient,
    target_count: int,
    page_size: int = SAVED_TRACKS_PAGE_SIZE
) -> List[Track]:
    """
    Fetch the current user's saved tracks.

    Pages are requested in offset order. Paging stops once there is no next
    page or at least ``target_count`` tracks have been collected, so the result
    can overshoot the target by up to one page. Items whose track is null
    are skipped and logged.

    Args:
        client: Authenticated Spotify client
        target_count: Number of tracks wanted
        page_size: Tracks per request (Spotify allows at most 50)

    Returns:
        Saved tracks in library order
    """
    tracks: List[Track] = []
    pages = 0
    offset = 0
    skipped = 0

    while True:
        page = await client.get_saved_tracks(limit=page_size, offset=offset)
        pages += 1

        items = page.get("items") or []
        offset += len(items)
        for item in items:
            # Tracks removed from Spotify come back as null
            if not item.get("track"):
                skipped += 1
                continue
            tracks.append(Track.from_spotify(item["track"]))

        has_next = bool(page.get("next"))
        if not items or not has_next or len(tracks) >= target_count:
            break

    if skipped:
        logger.warning(f"Skipped {skipped} saved item(s) without a track")

    logger.info(f"Fetched {len(tracks)} saved tracks in {pages} page(s)")
    return tracks
