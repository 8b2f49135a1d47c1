"""Engine-independent building blocks: time zone ids and skeleton tables.

Python 3.13+. Zero external dependencies.
"""

from .skeleton import (
    PATTERN_ITEMS,
    FieldSpec,
    build_skeleton,
    hour_cycle_default,
    hour_tokens,
    pattern_data,
    reverse_map,
)
from .timezones import canonicalize_time_zone, reported_time_zone

__all__ = [
    "PATTERN_ITEMS",
    "FieldSpec",
    "build_skeleton",
    "canonicalize_time_zone",
    "hour_cycle_default",
    "hour_tokens",
    "pattern_data",
    "reported_time_zone",
    "reverse_map",
]
