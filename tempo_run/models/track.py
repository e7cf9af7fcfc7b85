"""
Track data model representing a track from the user's library or recommendations.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, List

@dataclass(frozen=True)
class Track:
    """Represents a playable music track as returned by Spotify."""
    id: str                              # Spotify track ID
    name: str                            # Track name
    artists: List[str]                   # Artist names, in credit order
    uri: str                             # Playable URI (spotify:track:...)
    image_url: Optional[str] = None      # Album artwork, largest first

    @property
    def artist(self) -> str:
        """Get comma separated artist names."""
        return ", ".join(self.artists)

    @property
    def display_name(self) -> str:
        """Get display name for the track."""
        return f"{self.name} - {self.artist}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert track to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "artists": list(self.artists),
            "artist": self.artist,
            "uri": self.uri,
            "image_url": self.image_url
        }

    @classmethod
    def from_spotify(cls, spotify_track: Dict[str, Any]) -> 'Track':
        """Create Track from a Spotify track object (full or simplified)."""
        artists = [artist["name"] for artist in spotify_track.get("artists", [])]
        images = (spotify_track.get("album") or {}).get("images") or []

        return cls(
            id=spotify_track["id"],
            name=spotify_track["name"],
            artists=artists,
            uri=spotify_track["uri"],
            image_url=images[0].get("url") if images else None
        )
