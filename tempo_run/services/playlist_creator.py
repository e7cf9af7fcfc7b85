"""
Playlist creation on the user's Spotify account.
"""

import logging
from typing import List

from tempo_run.api.spotify_client import SpotifyClient, MAX_PLAYLIST_ADD_URIS
from tempo_run.models.playlist import Playlist

logger = logging.getLogger(__name__)

PLAYLIST_NAME = "Running Playlist"
PLAYLIST_DESCRIPTION = "Your running playlist, created using Tempo Run."

async def create_playlist(
    client: SpotifyClient,
    track_uris: List[str],
    name: str = PLAYLIST_NAME,
    description: str = PLAYLIST_DESCRIPTION,
    public: bool = True
) -> Playlist:
    """
    Create a playlist for the current user and fill it with the given tracks.

    Tracks are added in order, 100 per request, so up to 100 URIs take
    exactly one add request. An empty URI list sends no add request and
    leaves the playlist empty, since Spotify rejects an empty ``uris`` body.
    Nothing is rolled back: if adding tracks fails the empty playlist stays
    on the account and the error propagates.

    Args:
        client: Authenticated Spotify client
        track_uris: Spotify track URIs, in playlist order
        name: Playlist name
        description: Playlist description
        public: Whether the playlist is public

    Returns:
        Created playlist with its share URL
    """
    me = await client.get_me()

    spotify_playlist = await client.create_playlist(
        me["id"],
        name,
        description=description,
        public=public
    )
    logger.info(f"Created playlist {spotify_playlist['id']} for user {me['id']}")

    for i in range(0, len(track_uris), MAX_PLAYLIST_ADD_URIS):
        batch = track_uris[i:i + MAX_PLAYLIST_ADD_URIS]
        await client.add_tracks_to_playlist(spotify_playlist["id"], batch)

    logger.info(f"Added {len(track_uris)} tracks to playlist {spotify_playlist['id']}")
    return Playlist.from_spotify(spotify_playlist, track_uris)
