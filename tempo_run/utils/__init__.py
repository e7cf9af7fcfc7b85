"""Utility modules for the running playlist generator."""

from .rate_limiter import RateLimiter
from .validators import (
    ValidationError,
    validate_min_tempo,
    validate_pace_index,
    resolve_min_tempo,
    validate_track_uris
)

__all__ = [
    'RateLimiter',
    'ValidationError',
    'validate_min_tempo',
    'validate_pace_index',
    'resolve_min_tempo',
    'validate_track_uris'
]
