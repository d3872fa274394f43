"""Chunklist state machine and serializer.

This package provides:
- Chunklist: the manifest owner (append, init segment, version, close)
- ChunklistState / evict_to_window: state container and live-window trimming
- render_playlist: deterministic `.m3u8` rendering
- playlist_uri: lexical relative URIs for segment references
"""

from hlschunklist.playlist.chunklist import Chunklist
from hlschunklist.playlist.paths import playlist_uri, relative_to
from hlschunklist.playlist.serializer import render_lines, render_playlist
from hlschunklist.playlist.state import ChunklistState, evict_to_window

__all__ = [
    "Chunklist",
    "ChunklistState",
    "evict_to_window",
    "render_lines",
    "render_playlist",
    "playlist_uri",
    "relative_to",
]
