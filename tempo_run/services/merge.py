"""
Merge tracks and audio features into enriched records by shared ID.
"""

import itertools
import logging
from typing import Dict, Iterable, List, Union

from tempo_run.models.track import Track
from tempo_run.models.audio_features import AudioFeatures, EnrichedTrack

logger = logging.getLogger(__name__)

MergeableRecord = Union[Track, AudioFeatures, EnrichedTrack]

def merge_by_id(
    tracks: Iterable[MergeableRecord],
    features: Iterable[MergeableRecord]
) -> List[EnrichedTrack]:
    """
    Group both inputs by ID and merge each group into one record.

    Later records win field by field. Output holds one record per distinct ID
    across both inputs; an ID present on only one side yields a partial record.
    Output order is not part of the contract.
    """
    merged: Dict[str, EnrichedTrack] = {}

    for record in itertools.chain(tracks, features):
        enriched = EnrichedTrack.from_record(record)
        existing = merged.get(enriched.id)
        merged[enriched.id] = existing.merge(enriched) if existing else enriched

    return list(merged.values())

def complete_records(records: Iterable[EnrichedTrack]) -> List[EnrichedTrack]:
    """Drop records missing either their track or their audio features."""
    complete = []
    dropped = []
    for record in records:
        if record.is_complete:
            complete.append(record)
        else:
            dropped.append(record.id)

    if dropped:
        logger.warning(
            f"Dropped {len(dropped)} track(s) without matching audio features: "
            f"{', '.join(dropped[:5])}{'...' if len(dropped) > 5 else ''}"
        )
    return complete
