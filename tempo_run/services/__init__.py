"""Track aggregation pipeline and playlist services."""

from .saved_tracks import fetch_saved_tracks
from .audio_features import fetch_audio_features
from .merge import merge_by_id, complete_records
from .track_filter import filter_by_threshold, select_seed_artists
from .recommendations import fetch_recommended_tracks
from .playlist_creator import create_playlist
from .track_pipeline import (
    get_my_saved_tracks_with_audio_features,
    get_my_recommended_tracks,
    get_tracks,
    TempoRunService
)

__all__ = [
    'fetch_saved_tracks',
    'fetch_audio_features',
    'merge_by_id',
    'complete_records',
    'filter_by_threshold',
    'select_seed_artists',
    'fetch_recommended_tracks',
    'create_playlist',
    'get_my_saved_tracks_with_audio_features',
    'get_my_recommended_tracks',
    'get_tracks',
    'TempoRunService'
]
