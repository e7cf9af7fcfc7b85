"""
Spotify Web API client implementation.
Wraps the endpoints the running playlist pipeline needs: saved tracks, audio
features, recommendations, top artists and playlist management.
"""

import logging
import urllib.parse
from datetime import datetime
from typing import Dict, Any, List, Optional

from config.settings import APIConfig
from tempo_run.api.base_client import BaseAPIClient, AuthenticationError

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.spotify.com/authorize"

DEFAULT_SCOPES = [
    "playlist-modify-public",
    "playlist-modify-private",
    "user-read-private",
    "user-library-read",
    "user-top-read",
]

# Per-request caps imposed by Spotify
MAX_SAVED_TRACKS_LIMIT = 50
MAX_AUDIO_FEATURES_IDS = 100
MAX_PLAYLIST_ADD_URIS = 100
MAX_RECOMMENDATION_SEEDS = 5

def get_authorization_url(client_id: str, redirect_uri: str, scopes: Optional[List[str]] = None) -> str:
    """
    Get the implicit grant authorization URL.

    Args:
        client_id: Spotify application client ID
        redirect_uri: Redirect URI registered for the application
        scopes: Spotify scopes to request (defaults to DEFAULT_SCOPES)

    Returns:
        Authorization URL for the user to visit
    """
    params = {
        "client_id": client_id,
        "response_type": "token",
        "redirect_uri": redirect_uri,
        "scope": " ".join(scopes or DEFAULT_SCOPES),
    }
    return AUTHORIZE_URL + "?" + urllib.parse.urlencode(params)

class SpotifyClient(BaseAPIClient):
    """Spotify Web API client authenticated with a user's bearer token."""

    def __init__(
        self,
        access_token: str,
        expires_at: Optional[datetime] = None,
        config: Optional[APIConfig] = None
    ):
        """
        Initialize Spotify client.

        Args:
            access_token: User bearer token
            expires_at: When the token stops being valid, if known
            config: Endpoint configuration (defaults to the public Web API)
        """
        config = config or APIConfig(base_url="https://api.spotify.com/v1")
        super().__init__(
            base_url=config.base_url,
            rate_limit=config.rate_limit_per_minute,
            timeout=config.timeout,
            max_retries=config.max_retries
        )
        self.access_token = access_token
        self.expires_at = expires_at

    def _get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers for API requests."""
        if not self.access_token:
            raise AuthenticationError("No access token available")
        if self.expires_at is not None and datetime.now() >= self.expires_at:
            raise AuthenticationError("Access token has expired")
        return {"Authorization": f"Bearer {self.access_token}"}

    async def get_saved_tracks(self, limit: int = MAX_SAVED_TRACKS_LIMIT, offset: int = 0) -> Dict[str, Any]:
        """
        Get a page of the current user's saved tracks.

        Returns:
            Paging object with ``items`` (``{"track": ...}``) and ``next``
        """
        params = {"limit": min(limit, MAX_SAVED_TRACKS_LIMIT), "offset": offset}
        return await self._make_request("GET", "me/tracks", params=params)

    async def get_audio_features_for_tracks(self, track_ids: List[str]) -> Dict[str, Any]:
        """
        Get audio features for up to 100 tracks.

        Returns:
            Dictionary with ``audio_features`` list (entries may be null)
        """
        if len(track_ids) > MAX_AUDIO_FEATURES_IDS:
            raise ValueError(f"At most {MAX_AUDIO_FEATURES_IDS} track IDs per request, got {len(track_ids)}")

        params = {"ids": ",".join(track_ids)}
        return await self._make_request("GET", "audio-features", params=params)

    async def get_recommendations(
        self,
        seed_artists: List[str],
        min_tempo: float,
        min_energy: float,
        min_valence: float,
        limit: int = 50
    ) -> Dict[str, Any]:
        """
        Get track recommendations seeded by artists.

        Returns:
            Dictionary with ``tracks`` list of simplified track objects
        """
        if len(seed_artists) > MAX_RECOMMENDATION_SEEDS:
            raise ValueError(f"At most {MAX_RECOMMENDATION_SEEDS} seeds per request, got {len(seed_artists)}")

        params = {
            "seed_artists": ",".join(seed_artists),
            "min_tempo": min_tempo,
            "min_energy": min_energy,
            "min_valence": min_valence,
            "limit": limit
        }
        return await self._make_request("GET", "recommendations", params=params)

    async def get_me(self) -> Dict[str, Any]:
        """Get current user's profile."""
        return await self._make_request("GET", "me")

    async def get_my_top_artists(self, limit: int = 50) -> Dict[str, Any]:
        """Get the current user's top artists."""
        return await self._make_request("GET", "me/top/artists", params={"limit": limit})

    async def create_playlist(
        self,
        user_id: str,
        name: str,
        description: str = "",
        public: bool = True
    ) -> Dict[str, Any]:
        """
        Create a new playlist owned by the given user.

        Returns:
            Spotify playlist object
        """
        data = {
            "name": name,
            "description": description,
            "public": public
        }
        return await self._make_request("POST", f"users/{user_id}/playlists", data=data)

    async def add_tracks_to_playlist(self, playlist_id: str, track_uris: List[str]) -> Dict[str, Any]:
        """
        Add up to 100 tracks to a playlist, appended in the given order.

        Returns:
            Dictionary with the new ``snapshot_id``
        """
        if len(track_uris) > MAX_PLAYLIST_ADD_URIS:
            raise ValueError(f"At most {MAX_PLAYLIST_ADD_URIS} URIs per request, got {len(track_uris)}")

        data = {"uris": track_uris}
        return await self._make_request("POST", f"playlists/{playlist_id}/tracks", data=data)
