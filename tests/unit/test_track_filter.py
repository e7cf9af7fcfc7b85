#!/usr/bin/env python3
"""
Unit tests for threshold filtering and seed selection.
"""

import pytest
from tempo_run.models.audio_features import EnrichedTrack
from tempo_run.models.seed import Seed, SeedKind
from tempo_run.services.track_filter import filter_by_threshold, select_seed_artists, matches_thresholds

def enriched(track_id="t1", tempo=170.0, energy=0.8, valence=0.6) -> EnrichedTrack:
    return EnrichedTrack(
        id=track_id,
        name="Song",
        artists=["Artist"],
        uri=f"spotify:track:{track_id}",
        tempo=tempo,
        energy=energy,
        valence=valence
    )

class TestFilterByThreshold:
    """Unit tests for filter_by_threshold."""

    def test_keeps_matching_tracks(self):
        tracks = [enriched("fast", tempo=170.0), enriched("slow", tempo=120.0)]

        result = filter_by_threshold(tracks, 165)

        assert [track.id for track in result] == ["fast"]

    @pytest.mark.parametrize("tempo,energy,valence", [
        (165.0, 0.8, 0.6),  # tempo on the boundary
        (170.0, 0.5, 0.6),  # energy on the boundary
        (170.0, 0.8, 0.3),  # valence on the boundary
    ])
    def test_boundaries_are_excluded(self, tempo, energy, valence):
        assert filter_by_threshold([enriched(tempo=tempo, energy=energy, valence=valence)], 165) == []

    def test_just_above_boundaries_is_kept(self):
        track = enriched(tempo=165.01, energy=0.51, valence=0.31)

        assert filter_by_threshold([track], 165) == [track]

    def test_min_tempo_is_caller_supplied(self):
        track = enriched(tempo=152.0)

        assert filter_by_threshold([track], 150) == [track]
        assert filter_by_threshold([track], 156) == []

    def test_records_without_features_never_pass(self):
        partial = EnrichedTrack(id="t1", name="Song", uri="spotify:track:t1")

        assert not matches_thresholds(partial, 0)
        assert filter_by_threshold([partial], 0) == []

    def test_empty_result_is_not_an_error(self):
        assert filter_by_threshold([enriched(energy=0.1)], 165) == []

    def test_preserves_order(self):
        tracks = [enriched(f"t{i}") for i in range(5)]

        assert filter_by_threshold(tracks, 165) == tracks

class TestSelectSeedArtists:
    """Unit tests for select_seed_artists."""

    def test_first_five_artists_in_order(self, artist_seeds):
        assert len(artist_seeds) == 7

        result = select_seed_artists(artist_seeds)

        assert result == ["artist0", "artist1", "artist2", "artist3", "artist4"]

    def test_genres_never_included(self):
        seeds = [
            Seed(id="pop", name="Pop", kind=SeedKind.GENRE),
            Seed(id="a1", name="A1"),
            Seed(id="rock", name="Rock", kind=SeedKind.GENRE),
        ]

        assert select_seed_artists(seeds) == ["a1"]

    def test_no_seeds(self):
        assert select_seed_artists([]) == []
