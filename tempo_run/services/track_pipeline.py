"""
Running playlist pipeline.
Coordinates the fetch, enrich, merge and filter steps and playlist creation.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from config.settings import Settings
from tempo_run.api.base_client import AuthenticationError
from tempo_run.api.spotify_client import SpotifyClient
from tempo_run.models.audio_features import EnrichedTrack
from tempo_run.models.auth_state import AuthState
from tempo_run.models.pace import DEFAULT_MIN_TEMPO
from tempo_run.models.playlist import Playlist, PlaylistType
from tempo_run.models.seed import Seed
from tempo_run.models.track import Track
from tempo_run.services.audio_features import fetch_audio_features
from tempo_run.services.merge import merge_by_id, complete_records
from tempo_run.services.playlist_creator import create_playlist
from tempo_run.services.recommendations import fetch_recommended_tracks, RECOMMENDATION_LIMIT
from tempo_run.services.saved_tracks import fetch_saved_tracks
from tempo_run.services.track_filter import filter_by_threshold

logger = logging.getLogger(__name__)

SAVED_TRACKS_FETCH_LIMIT = 1000

PlaylistTrack = Union[EnrichedTrack, Track]

async def get_my_saved_tracks_with_audio_features(
    client: SpotifyClient,
    min_tempo: float = DEFAULT_MIN_TEMPO,
    fetch_up_to: int = SAVED_TRACKS_FETCH_LIMIT
) -> List[EnrichedTrack]:
    """
    Get the user's saved tracks that are upbeat and fast enough to run to.

    Args:
        client: Authenticated Spotify client
        min_tempo: Tracks must be faster than this (BPM)
        fetch_up_to: Stop paging the library after this many tracks

    Returns:
        Complete enriched tracks passing the thresholds; may be empty
    """
    saved_tracks = await fetch_saved_tracks(client, fetch_up_to)
    features = await fetch_audio_features(client, [track.id for track in saved_tracks])

    enriched = complete_records(merge_by_id(saved_tracks, features))
    filtered = filter_by_threshold(enriched, min_tempo)

    logger.info(f"{len(filtered)} of {len(saved_tracks)} saved tracks are above {min_tempo} BPM")
    return filtered

async def get_my_recommended_tracks(
    client: SpotifyClient,
    seeds: Iterable[Seed],
    min_tempo: float = DEFAULT_MIN_TEMPO,
    limit: int = RECOMMENDATION_LIMIT
) -> List[Track]:
    """Get recommended tracks for the discover playlist."""
    return await fetch_recommended_tracks(client, seeds, min_tempo, limit=limit)

async def get_tracks(
    client: SpotifyClient,
    playlist_type: PlaylistType,
    min_tempo: float = DEFAULT_MIN_TEMPO,
    seeds: Sequence[Seed] = (),
    fetch_up_to: int = SAVED_TRACKS_FETCH_LIMIT,
    recommendation_limit: int = RECOMMENDATION_LIMIT
) -> List[PlaylistTrack]:
    """Get tracks for the chosen playlist type."""
    if playlist_type == PlaylistType.DISCOVER:
        return await get_my_recommended_tracks(client, seeds, min_tempo, limit=recommendation_limit)
    return await get_my_saved_tracks_with_audio_features(client, min_tempo, fetch_up_to=fetch_up_to)

class TempoRunService:
    """Session-level service for building running playlists for one user."""

    def __init__(self, settings: Settings, auth_state: AuthState, client: Optional[SpotifyClient] = None):
        """
        Initialize the service.

        Args:
            settings: Application settings
            auth_state: The user's bearer token and expiry
            client: Pre-built client, mostly for tests
        """
        self.settings = settings
        self.auth_state = auth_state
        self.client = client

    async def __aenter__(self):
        """Async context manager entry."""
        if not self.auth_state.is_valid():
            raise AuthenticationError("Spotify session has expired, please log in again")

        if self.client is None:
            self.client = SpotifyClient(
                access_token=self.auth_state.access_token,
                expires_at=self.auth_state.expires_at,
                config=self.settings.spotify
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.client:
            await self.client.close()

    async def get_tracks(
        self,
        playlist_type: PlaylistType,
        min_tempo: Optional[float] = None,
        seeds: Sequence[Seed] = ()
    ) -> List[PlaylistTrack]:
        """
        Get tracks for a running playlist.

        Args:
            playlist_type: DISCOVER uses recommendations, MY_TRACKS the saved library
            min_tempo: Minimum tempo (defaults to the configured default)
            seeds: Selected seeds for DISCOVER

        Returns:
            Matching tracks; may be empty
        """
        pipeline = self.settings.pipeline
        if min_tempo is None:
            min_tempo = pipeline["default_min_tempo"]

        logger.info(f"Building {playlist_type.value} track list above {min_tempo} BPM")

        return await get_tracks(
            self.client,
            playlist_type,
            min_tempo,
            seeds,
            fetch_up_to=pipeline["saved_tracks_limit"],
            recommendation_limit=pipeline["recommendation_limit"]
        )

    async def create_playlist(self, track_uris: List[str]) -> Playlist:
        """Create the running playlist from track URIs."""
        playlist_settings = self.settings.playlist
        return await create_playlist(
            self.client,
            track_uris,
            name=playlist_settings["name"],
            description=playlist_settings["description"],
            public=playlist_settings["public"]
        )

    async def get_seed_candidates(self, limit: int = 50) -> List[Seed]:
        """Get the user's top artists as seed candidates."""
        result = await self.client.get_my_top_artists(limit=limit)
        return [Seed.from_spotify_artist(artist) for artist in result.get("items") or []]
