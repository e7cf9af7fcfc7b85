#!/usr/bin/env python3
"""
Unit tests for the batched audio features fetcher.
"""

import asyncio
import math
import pytest
from collections import Counter
from tempo_run.api.base_client import APIError
from tempo_run.services.audio_features import fetch_audio_features, chunk_ids

class TestChunkIds:
    """Unit tests for chunk_ids."""

    def test_contiguous_chunks(self):
        assert chunk_ids(["a", "b", "c", "d", "e"], 2) == [["a", "b"], ["c", "d"], ["e"]]

    def test_empty(self):
        assert chunk_ids([], 100) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            chunk_ids(["a"], 0)

class TestFetchAudioFeatures:
    """Unit tests for fetch_audio_features."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [1, 99, 100, 101, 250])
    async def test_one_request_per_hundred_ids(self, mock_spotify_client, features_payload, features_lookup, count):
        ids = [f"id{i}" for i in range(count)]
        mock_spotify_client.get_audio_features_for_tracks.side_effect = features_lookup(
            {track_id: features_payload(track_id) for track_id in ids}
        )

        features = await fetch_audio_features(mock_spotify_client, ids)

        assert mock_spotify_client.get_audio_features_for_tracks.await_count == math.ceil(count / 100)
        assert Counter(f.id for f in features) == Counter(ids)

        batches = [c.args[0] for c in mock_spotify_client.get_audio_features_for_tracks.await_args_list]
        assert all(len(batch) <= 100 for batch in batches)
        assert [track_id for batch in batches for track_id in batch] == ids

    @pytest.mark.asyncio
    async def test_no_ids_no_requests(self, mock_spotify_client):
        assert await fetch_audio_features(mock_spotify_client, []) == []
        mock_spotify_client.get_audio_features_for_tracks.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_batches_run_concurrently(self, mock_spotify_client, features_payload):
        """All batch requests are in flight before any of them completes."""
        in_flight = 0
        peak = 0

        async def slow_batch(track_ids):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return {"audio_features": [features_payload(track_id) for track_id in track_ids]}

        mock_spotify_client.get_audio_features_for_tracks.side_effect = slow_batch

        await fetch_audio_features(mock_spotify_client, [f"id{i}" for i in range(300)])

        assert peak == 3

    @pytest.mark.asyncio
    async def test_results_in_chunk_order(self, mock_spotify_client, features_payload):
        async def reversed_delays(track_ids):
            # Later chunks finish first
            await asyncio.sleep(0.03 if track_ids[0] == "id0" else 0.0)
            return {"audio_features": [features_payload(track_id) for track_id in track_ids]}

        mock_spotify_client.get_audio_features_for_tracks.side_effect = reversed_delays

        features = await fetch_audio_features(mock_spotify_client, [f"id{i}" for i in range(150)])

        assert features[0].id == "id0"
        assert features[100].id == "id100"

    @pytest.mark.asyncio
    async def test_null_entries_are_skipped(self, mock_spotify_client, features_payload, features_lookup):
        mock_spotify_client.get_audio_features_for_tracks.side_effect = features_lookup(
            {"a": features_payload("a"), "c": features_payload("c")}
        )

        features = await fetch_audio_features(mock_spotify_client, ["a", "b", "c"])

        assert [f.id for f in features] == ["a", "c"]

    @pytest.mark.asyncio
    async def test_any_batch_failure_fails_everything(self, mock_spotify_client, features_payload):
        async def second_batch_fails(track_ids):
            if track_ids[0] == "id100":
                raise APIError("Request failed: 503 Service Unavailable", status=503)
            return {"audio_features": [features_payload(track_id) for track_id in track_ids]}

        mock_spotify_client.get_audio_features_for_tracks.side_effect = second_batch_fails

        with pytest.raises(APIError):
            await fetch_audio_features(mock_spotify_client, [f"id{i}" for i in range(250)])

    @pytest.mark.asyncio
    async def test_batch_size_is_capped(self, mock_spotify_client):
        with pytest.raises(ValueError, match="cannot exceed 100"):
            await fetch_audio_features(mock_spotify_client, ["a"], batch_size=101)

    @pytest.mark.asyncio
    async def test_smaller_batch_size(self, mock_spotify_client, features_payload, features_lookup):
        ids = [f"id{i}" for i in range(10)]
        mock_spotify_client.get_audio_features_for_tracks.side_effect = features_lookup(
            {track_id: features_payload(track_id) for track_id in ids}
        )

        await fetch_audio_features(mock_spotify_client, ids, batch_size=4)

        assert mock_spotify_client.get_audio_features_for_tracks.await_count == 3
