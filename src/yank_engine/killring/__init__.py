"""Kill ring entries and the bounded ring that stores them."""

from .entity import (
    AppendDirection,
    AppendedRegion,
    KillRingEntity,
    MultiRegionEntity,
    PlainTextEntity,
    RegionText,
)
from .ring import DEFAULT_CAPACITY, KillRing

__all__ = [
    "AppendDirection",
    "AppendedRegion",
    "DEFAULT_CAPACITY",
    "KillRing",
    "KillRingEntity",
    "MultiRegionEntity",
    "PlainTextEntity",
    "RegionText",
]
