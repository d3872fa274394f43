"""Mutable chunklist state and the sliding-window eviction policy.

`ChunklistState` is the single owner of the chunk collection and of the
playlist-level counters. `evict_to_window` is the only code path that
removes chunks; it runs after every append on a live window.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from hlschunklist.core.config import ChunklistConfig
from hlschunklist.core.models import Chunk, ManifestType

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChunklistState:
    """Everything the serializer needs to render one chunklist."""

    manifest_type: ManifestType
    version: int
    independent_segments: bool
    target_duration_s: float
    sliding_window_size: int
    chunklist_path: str
    init_segment_path: str | None = None
    media_sequence: int = 0
    discontinuity_sequence: int = 0
    closed: bool = False
    chunks: deque[Chunk] = field(default_factory=deque)

    @classmethod
    def from_config(cls, config: ChunklistConfig) -> ChunklistState:
        return cls(
            manifest_type=config.manifest_type,
            version=config.version,
            independent_segments=config.independent_segments,
            target_duration_s=config.target_duration_s,
            sliding_window_size=config.sliding_window_size,
            chunklist_path=config.chunklist_path,
            init_segment_path=config.init_segment_path,
        )


def evict_to_window(state: ChunklistState) -> list[Chunk]:
    """Drop the oldest chunks of a live window until it fits; return them.

    Each evicted chunk advances the media sequence by one. An evicted chunk
    carrying a discontinuity also advances the discontinuity sequence, since
    its EXT-X-DISCONTINUITY tag leaves the playlist with it.
    VOD and live event chunklists are never trimmed.
    """
    if state.manifest_type is not ManifestType.LIVE_WINDOW:
        return []

    evicted: list[Chunk] = []
    while len(state.chunks) > state.sliding_window_size:
        chunk = state.chunks.popleft()
        state.media_sequence += 1
        if chunk.is_disco:
            state.discontinuity_sequence += 1
        evicted.append(chunk)
        logger.debug(
            "evicted %s (media_sequence=%d, discontinuity_sequence=%d)",
            chunk.file_name,
            state.media_sequence,
            state.discontinuity_sequence,
        )
    return evicted
