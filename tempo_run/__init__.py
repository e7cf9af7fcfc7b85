"""Tempo Run: running playlists built from Spotify tempo and mood data."""

__version__ = "1.0.0"
