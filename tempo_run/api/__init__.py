"""API clients for the Spotify Web API."""

from .base_client import BaseAPIClient, APIError, RateLimitError, AuthenticationError
from .spotify_client import SpotifyClient, get_authorization_url

__all__ = [
    'BaseAPIClient',
    'APIError',
    'RateLimitError',
    'AuthenticationError',
    'SpotifyClient',
    'get_authorization_url'
]
