"""
Pytest configuration and shared fixtures for the Tempo Run tests.
"""

import pytest

from config.settings import Settings
from tempo_run.models.seed import Seed, SeedKind
from unittest.mock import AsyncMock

def spotify_track(index: int) -> dict:
    """Spotify track object as returned inside saved tracks and recommendations."""
    return {
        "id": f"track{index:04d}",
        "name": f"Test Song {index}",
        "artists": [{"id": f"artist{index}", "name": f"Test Artist {index}"}],
        "uri": f"spotify:track:track{index:04d}",
        "album": {"images": [{"url": f"https://i.scdn.co/image/{index}", "height": 640}]}
    }

def spotify_features(track_id: str, tempo: float = 170.0, energy: float = 0.8, valence: float = 0.6) -> dict:
    """Spotify audio features object."""
    return {
        "id": track_id,
        "tempo": tempo,
        "energy": energy,
        "valence": valence,
        "danceability": 0.7,
        "type": "audio_features"
    }

def saved_tracks_source(total: int):
    """Side effect serving ``total`` saved tracks through limit/offset paging."""
    library = [spotify_track(i) for i in range(total)]

    async def get_saved_tracks(limit=50, offset=0):
        page = library[offset:offset + limit]
        has_more = offset + limit < total
        return {
            "items": [{"added_at": "2024-01-01T00:00:00Z", "track": track} for track in page],
            "limit": limit,
            "offset": offset,
            "total": total,
            "next": f"https://api.spotify.com/v1/me/tracks?offset={offset + limit}&limit={limit}" if has_more else None
        }

    return get_saved_tracks

def features_source(features_by_id: dict):
    """Side effect answering audio-features requests from a lookup table."""

    async def get_audio_features_for_tracks(track_ids):
        return {"audio_features": [features_by_id.get(track_id) for track_id in track_ids]}

    return get_audio_features_for_tracks

@pytest.fixture
def track_payload():
    """Factory for Spotify track objects."""
    return spotify_track

@pytest.fixture
def features_payload():
    """Factory for Spotify audio features objects."""
    return spotify_features

@pytest.fixture
def saved_tracks_pages():
    """Factory for paged saved tracks side effects."""
    return saved_tracks_source

@pytest.fixture
def features_lookup():
    """Factory for audio features side effects."""
    return features_source

@pytest.fixture
def settings():
    """Settings with defaults."""
    return Settings()

@pytest.fixture
def mock_spotify_client():
    """Mock Spotify API client."""
    client = AsyncMock()
    client.get_me.return_value = {"id": "runner42", "display_name": "Runner"}
    client.create_playlist.return_value = {
        "id": "playlist123",
        "name": "Running Playlist",
        "description": "Your running playlist, created using Tempo Run.",
        "external_urls": {"spotify": "https://open.spotify.com/playlist/playlist123"}
    }
    client.add_tracks_to_playlist.return_value = {"snapshot_id": "snap1"}
    return client

@pytest.fixture
def artist_seeds():
    """Six artist seeds with a genre seed in the middle."""
    seeds = [Seed(id=f"artist{i}", name=f"Artist {i}", kind=SeedKind.ARTIST) for i in range(6)]
    seeds.insert(2, Seed(id="genre-rock", name="Rock", kind=SeedKind.GENRE))
    return seeds
