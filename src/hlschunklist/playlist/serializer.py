"""Chunklist serializer.

Renders a `ChunklistState` to `.m3u8` text. The output is a pure function of
the state: same state, same bytes. Tag order is fixed:

    EXTM3U, VERSION, MEDIA-SEQUENCE, DISCONTINUITY-SEQUENCE, PLAYLIST-TYPE,
    TARGETDURATION, INDEPENDENT-SEGMENTS, MAP, segments, ENDLIST
"""

from __future__ import annotations

from hlschunklist.constants import (
    EXT_X_DISCONTINUITY,
    EXT_X_DISCONTINUITY_SEQ,
    EXT_X_ENDLIST,
    EXT_X_INDEPENDENT_SEGS,
    EXT_X_MAP,
    EXT_X_MEDIA_SEQUENCE,
    EXT_X_PLAYLIST_TYPE,
    EXT_X_TARGETDURATION,
    EXT_X_VERSION,
    EXTINF,
    EXTM3U,
)
from hlschunklist.core.models import Chunk, ManifestType
from hlschunklist.playlist.paths import playlist_uri
from hlschunklist.playlist.state import ChunklistState

_PLAYLIST_TYPES: dict[ManifestType, str] = {
    ManifestType.VOD: "VOD",
    ManifestType.LIVE_EVENT: "EVENT",
}


def format_target_duration(seconds: float) -> str:
    """Target duration as an integer string (round to nearest, no decimals)."""
    return f"{seconds:.0f}"


def format_segment_duration(seconds: float) -> str:
    """Segment duration with exactly eight decimal places."""
    return f"{seconds:.8f}"


def _segment_lines(chunk: Chunk, chunklist_path: str) -> list[str]:
    lines = []
    if chunk.is_disco:
        lines.append(EXT_X_DISCONTINUITY)
    lines.append(f"{EXTINF}:{format_segment_duration(chunk.duration_s)},")
    lines.append(playlist_uri(chunk.file_name, chunklist_path))
    return lines


def render_lines(state: ChunklistState) -> list[str]:
    """Playlist lines, without terminators."""
    lines = [
        EXTM3U,
        f"{EXT_X_VERSION}:{state.version}",
        f"{EXT_X_MEDIA_SEQUENCE}:{state.media_sequence}",
        f"{EXT_X_DISCONTINUITY_SEQ}:{state.discontinuity_sequence}",
    ]

    playlist_type = _PLAYLIST_TYPES.get(state.manifest_type)
    if playlist_type is not None:
        lines.append(f"{EXT_X_PLAYLIST_TYPE}:{playlist_type}")

    lines.append(f"{EXT_X_TARGETDURATION}:{format_target_duration(state.target_duration_s)}")

    if state.independent_segments:
        lines.append(EXT_X_INDEPENDENT_SEGS)

    if state.init_segment_path is not None:
        uri = playlist_uri(state.init_segment_path, state.chunklist_path)
        lines.append(f'{EXT_X_MAP}:URI="{uri}"')

    for chunk in state.chunks:
        lines.extend(_segment_lines(chunk, state.chunklist_path))

    if state.closed:
        lines.append(EXT_X_ENDLIST)

    return lines


def render_playlist(state: ChunklistState) -> str:
    """Full chunklist text; every line, the last included, ends with a newline."""
    return "".join(f"{line}\n" for line in render_lines(state))
