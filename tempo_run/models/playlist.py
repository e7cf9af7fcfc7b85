"""
Playlist data models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, List

class PlaylistType(str, Enum):
    """Which source a running playlist is built from."""
    DISCOVER = "DISCOVER"    # Recommendations seeded from chosen artists
    MY_TRACKS = "MY_TRACKS"  # The user's saved tracks

@dataclass
class Playlist:
    """A playlist created on the user's Spotify account."""
    id: str
    name: str
    external_url: Optional[str] = None
    description: Optional[str] = None
    track_uris: List[str] = field(default_factory=list)

    @property
    def track_count(self) -> int:
        return len(self.track_uris)

    def to_dict(self) -> Dict[str, Any]:
        """Convert playlist to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "external_url": self.external_url,
            "description": self.description,
            "track_uris": list(self.track_uris),
            "track_count": self.track_count
        }

    @classmethod
    def from_spotify(cls, spotify_playlist: Dict[str, Any], track_uris: Optional[List[str]] = None) -> 'Playlist':
        """Create Playlist from a Spotify playlist object."""
        return cls(
            id=spotify_playlist["id"],
            name=spotify_playlist["name"],
            external_url=(spotify_playlist.get("external_urls") or {}).get("spotify"),
            description=spotify_playlist.get("description"),
            track_uris=list(track_uris or [])
        )
