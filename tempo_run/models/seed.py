"""
Seed data models.
Seeds are user-chosen artists or genres that steer the discover playlist.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

MAX_SEEDS = 5

class SeedKind(str, Enum):
    """Kind of entity a seed refers to."""
    ARTIST = "ARTIST"
    GENRE = "GENRE"

@dataclass(frozen=True)
class Seed:
    """A user-selected artist or genre."""
    id: str
    name: str
    kind: SeedKind = SeedKind.ARTIST

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"id": self.id, "name": self.name, "kind": self.kind.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Seed':
        """Create Seed from dictionary representation."""
        return cls(
            id=data["id"],
            name=data["name"],
            kind=SeedKind(data.get("kind", SeedKind.ARTIST.value))
        )

    @classmethod
    def from_spotify_artist(cls, artist: Dict[str, Any]) -> 'Seed':
        """Create an ARTIST seed from a Spotify artist object."""
        return cls(id=artist["id"], name=artist["name"], kind=SeedKind.ARTIST)

class SeedSelection:
    """Ordered set of seeds a user has picked during a session."""

    def __init__(self, max_seeds: int = MAX_SEEDS):
        self.max_seeds = max_seeds
        self._seeds: List[Seed] = []

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self):
        return iter(self._seeds)

    def __contains__(self, seed_id: str) -> bool:
        return self.get(seed_id) is not None

    @property
    def seeds(self) -> List[Seed]:
        return list(self._seeds)

    @property
    def artist_count(self) -> int:
        return sum(1 for seed in self._seeds if seed.kind == SeedKind.ARTIST)

    @property
    def is_full(self) -> bool:
        """True once no further artist seed can be used."""
        return self.artist_count >= self.max_seeds

    def get(self, seed_id: str) -> Optional[Seed]:
        for seed in self._seeds:
            if seed.id == seed_id:
                return seed
        return None

    def add(self, seed: Seed) -> bool:
        """
        Add a seed to the selection.

        Only artist seeds count toward ``max_seeds``. Re-adding a selected seed
        is a no-op, and artist seeds past the limit are ignored.

        Returns:
            True if the seed is in the selection afterwards
        """
        if seed.id in self:
            return True
        if seed.kind == SeedKind.ARTIST and self.is_full:
            logger.warning(f"Ignoring artist seed {seed.id}: at most {self.max_seeds} artist seeds are used")
            return False
        self._seeds.append(seed)
        return True

    def remove(self, seed_id: str) -> None:
        """Remove a seed by ID; unknown IDs are ignored."""
        self._seeds = [seed for seed in self._seeds if seed.id != seed_id]

    def clear(self) -> None:
        self._seeds = []
