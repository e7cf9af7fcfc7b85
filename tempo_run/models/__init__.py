"""Data models for the running playlist generator."""

from .track import Track
from .audio_features import AudioFeatures, EnrichedTrack
from .seed import Seed, SeedKind, SeedSelection
from .playlist import Playlist, PlaylistType
from .pace import PaceOption, PACE_OPTIONS, DEFAULT_MIN_TEMPO
from .auth_state import AuthState

__all__ = [
    'Track',
    'AudioFeatures',
    'EnrichedTrack',
    'Seed',
    'SeedKind',
    'SeedSelection',
    'Playlist',
    'PlaylistType',
    'PaceOption',
    'PACE_OPTIONS',
    'DEFAULT_MIN_TEMPO',
    'AuthState'
]
