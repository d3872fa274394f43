from __future__ import annotations

from .core.config import ChunklistConfig, HttpOutputConfig
from .core.errors import ChunklistError, ManifestConfigError, SinkError
from .core.interfaces import IManifestSink
from .core.models import Chunk, ManifestType, OutputMode
from .playlist.chunklist import Chunklist
from .playlist.serializer import render_playlist
from .sinks import FileSink, HttpSink, NullSink, make_sink

__version__ = "1.0.0"

__all__ = [
    "Chunklist",
    "Chunk",
    "ManifestType",
    "OutputMode",
    "ChunklistConfig",
    "HttpOutputConfig",
    "IManifestSink",
    "FileSink",
    "HttpSink",
    "NullSink",
    "make_sink",
    "render_playlist",
    "ChunklistError",
    "ManifestConfigError",
    "SinkError",
    "__version__",
]
