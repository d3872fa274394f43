"""Core value types for the chunklist manifest.

This module defines:
- `ManifestType`: playback mode of the chunklist (VOD, live event, live window).
- `OutputMode`: where serialized manifests are sent (nowhere, file, HTTP).
- `Chunk`: one immutable media segment reference.

Design notes
------------
- `Chunk` is frozen; the chunklist only ever holds references it owns.
- Durations are seconds as floats; the serializer decides on formatting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ManifestType(Enum):
    """Playback mode, drives the PLAYLIST-TYPE tag and window eviction."""

    VOD = "vod"
    LIVE_EVENT = "event"  # always growing
    LIVE_WINDOW = "window"  # sliding window, fixed size


class OutputMode(Enum):
    """Destination of serialized manifests."""

    NONE = "none"
    FILE = "file"
    HTTP = "http"


@dataclass(slots=True, frozen=True)
class Chunk:
    """A single media segment reference."""

    file_name: str
    duration_s: float
    is_disco: bool = False  # discontinuity before this segment
    is_growing: bool = False  # segment still being written

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration_s) or self.duration_s < 0:
            raise ValueError(f"chunk duration must be a finite number >= 0, got {self.duration_s}")
