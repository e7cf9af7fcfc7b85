"""
Audio features and enriched track models.
AudioFeatures are fetched separately from tracks and joined onto them by ID.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Any, Optional, List, Union
from .track import Track

@dataclass(frozen=True)
class AudioFeatures:
    """Numeric audio descriptors Spotify computes for a track."""
    id: str                 # Same namespace as Track.id
    tempo: float            # Beats per minute
    energy: float           # Musical intensity (0.0-1.0)
    valence: float          # Musical positivity (0.0-1.0)

    def __post_init__(self):
        """Validate that features are within expected ranges."""
        if not 0.0 <= self.energy <= 1.0:
            raise ValueError(f"Energy must be between 0.0 and 1.0, got {self.energy}")
        if not 0.0 <= self.valence <= 1.0:
            raise ValueError(f"Valence must be between 0.0 and 1.0, got {self.valence}")
        if self.tempo < 0.0:
            raise ValueError(f"Tempo must not be negative, got {self.tempo}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "tempo": self.tempo,
            "energy": self.energy,
            "valence": self.valence
        }

    @classmethod
    def from_spotify(cls, data: Dict[str, Any]) -> 'AudioFeatures':
        """Create AudioFeatures from a Spotify audio features object."""
        return cls(
            id=data["id"],
            tempo=float(data["tempo"]),
            energy=float(data["energy"]),
            valence=float(data["valence"])
        )

FEATURE_FIELDS = ("tempo", "energy", "valence")

@dataclass(frozen=True)
class EnrichedTrack:
    """
    A track joined with its audio features by ID.

    Either side may be missing while records are being merged; the pipeline
    only hands complete records downstream.
    """
    id: str
    name: Optional[str] = None
    artists: Optional[List[str]] = None
    uri: Optional[str] = None
    image_url: Optional[str] = None
    tempo: Optional[float] = None
    energy: Optional[float] = None
    valence: Optional[float] = None

    @property
    def has_track_fields(self) -> bool:
        return self.name is not None and self.uri is not None

    @property
    def has_audio_features(self) -> bool:
        return all(getattr(self, name) is not None for name in FEATURE_FIELDS)

    @property
    def is_complete(self) -> bool:
        """True when both the track and its audio features are present."""
        return self.has_track_fields and self.has_audio_features

    @property
    def artist(self) -> str:
        return ", ".join(self.artists or [])

    def merge(self, other: 'EnrichedTrack') -> 'EnrichedTrack':
        """
        Merge another record with the same ID into this one.

        Fields set on ``other`` win over fields set on ``self``; fields that are
        None on ``other`` leave ``self`` untouched.

        Args:
            other: Record sharing this record's ID

        Returns:
            New merged record
        """
        if other.id != self.id:
            raise ValueError(f"Cannot merge records with different IDs: {self.id} != {other.id}")

        updates = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if f.name != "id" and getattr(other, f.name) is not None
        }
        return replace(self, **updates)

    def to_track(self) -> Track:
        """Get the track side of this record."""
        if not self.has_track_fields:
            raise ValueError(f"Record {self.id} has no track fields")
        return Track(
            id=self.id,
            name=self.name,
            artists=list(self.artists or []),
            uri=self.uri,
            image_url=self.image_url
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "artists": list(self.artists) if self.artists is not None else None,
            "artist": self.artist,
            "uri": self.uri,
            "image_url": self.image_url,
            "tempo": self.tempo,
            "energy": self.energy,
            "valence": self.valence
        }

    @classmethod
    def from_record(cls, record: Union[Track, AudioFeatures, 'EnrichedTrack']) -> 'EnrichedTrack':
        """Lift a Track, AudioFeatures or EnrichedTrack into an EnrichedTrack."""
        if isinstance(record, EnrichedTrack):
            return record
        if isinstance(record, Track):
            return cls(
                id=record.id,
                name=record.name,
                artists=list(record.artists),
                uri=record.uri,
                image_url=record.image_url
            )
        if isinstance(record, AudioFeatures):
            return cls(
                id=record.id,
                tempo=record.tempo,
                energy=record.energy,
                valence=record.valence
            )
        raise TypeError(f"Cannot merge record of type {type(record).__name__}")
