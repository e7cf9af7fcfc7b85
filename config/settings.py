"""
Application settings and configuration management.
Handles environment variables, API configuration, and pipeline defaults.
"""

import os
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class APIConfig:
    """Configuration for external API services."""
    base_url: str
    timeout: int = 30
    max_retries: int = 0  # Retries after a 429; 0 = fail on first error
    rate_limit_per_minute: int = 100

class Settings:
    """Main application settings."""

    def __init__(self):
        # Spotify API Configuration
        self.spotify = APIConfig(
            base_url="https://api.spotify.com/v1",
            timeout=int(os.getenv("SPOTIFY_TIMEOUT", "30")),
            max_retries=int(os.getenv("SPOTIFY_MAX_RETRIES", "0")),
            rate_limit_per_minute=int(os.getenv("SPOTIFY_RATE_LIMIT", "100"))
        )
        self.SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
        self.SPOTIFY_REDIRECT_URI = os.getenv("SPOTIFY_REDIRECT_URI", "http://localhost:8888/callback")
        self.SPOTIFY_ACCESS_TOKEN = os.getenv("SPOTIFY_ACCESS_TOKEN")

        # Track pipeline settings
        self.pipeline = {
            "saved_tracks_limit": 1000,  # Stop paging the library past this many tracks
            "default_min_tempo": 165.0,
            "recommendation_limit": 50
        }

        # Playlist creation settings
        self.playlist = {
            "name": "Running Playlist",
            "description": "Your running playlist, created using Tempo Run.",
            "public": True
        }

        # Logging Configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def validate(
        self,
        require_client_id: bool = False,
        require_token: bool = False,
        access_token: Optional[str] = None
    ) -> bool:
        """Validate that required configuration is present."""
        required_vars = []

        if require_client_id and not self.SPOTIFY_CLIENT_ID:
            required_vars.append("SPOTIFY_CLIENT_ID")
        if require_token and not (access_token or self.SPOTIFY_ACCESS_TOKEN):
            required_vars.append("SPOTIFY_ACCESS_TOKEN")

        if required_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(required_vars)}")

        return True
