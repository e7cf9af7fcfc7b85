"""
Input validation utilities for user-supplied pipeline parameters.
"""

import re
from typing import Any, List, Optional

from tempo_run.models.pace import PACE_OPTIONS, PaceOption, DEFAULT_MIN_TEMPO

TRACK_URI_PATTERN = re.compile(r"^spotify:track:[A-Za-z0-9]{22}$")

MIN_TEMPO_RANGE = (0.0, 300.0)

class ValidationError(ValueError):
    """Exception raised for validation errors."""
    pass

def validate_min_tempo(value: Any) -> float:
    """
    Validate a minimum tempo.

    Args:
        value: Tempo in BPM

    Returns:
        Tempo as float

    Raises:
        ValidationError: If the value is not a number in range
    """
    if isinstance(value, bool):
        raise ValidationError("Minimum tempo must be numeric")
    try:
        tempo = float(value)
    except (ValueError, TypeError):
        raise ValidationError(f"Minimum tempo must be numeric, got {value!r}")

    low, high = MIN_TEMPO_RANGE
    if not low <= tempo <= high:
        raise ValidationError(f"Minimum tempo must be between {low} and {high} BPM, got {tempo}")
    return tempo

def validate_pace_index(index: Any) -> PaceOption:
    """Resolve a 1-based pace option index."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(f"Pace must be an integer, got {index!r}")
    if not 1 <= index <= len(PACE_OPTIONS):
        raise ValidationError(f"Pace must be between 1 and {len(PACE_OPTIONS)}, got {index}")
    return PACE_OPTIONS[index - 1]

def resolve_min_tempo(min_tempo: Optional[Any] = None, pace: Optional[int] = None) -> float:
    """
    Work out the minimum tempo from either an explicit value or a pace choice.

    An explicit tempo wins over a pace; with neither, DEFAULT_MIN_TEMPO is used.
    """
    if min_tempo is not None:
        return validate_min_tempo(min_tempo)
    if pace is not None:
        return validate_pace_index(pace).min_tempo
    return DEFAULT_MIN_TEMPO

def validate_track_uris(uris: List[str]) -> List[str]:
    """
    Validate Spotify track URIs.

    Raises:
        ValidationError: On the first malformed URI
    """
    if not isinstance(uris, list):
        raise ValidationError("Track URIs must be a list")

    for uri in uris:
        if not isinstance(uri, str) or not TRACK_URI_PATTERN.match(uri):
            raise ValidationError(f"Invalid Spotify track URI: {uri!r}")
    return uris
