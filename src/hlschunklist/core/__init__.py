"""Core data models, configuration, interfaces and errors.

This package provides:
- Value types (Chunk, ManifestType, OutputMode)
- Configuration classes (ChunklistConfig, HttpOutputConfig)
- The output sink protocol (IManifestSink)
- The exception hierarchy (ChunklistError, ManifestConfigError, SinkError)
"""

from hlschunklist.core.config import ChunklistConfig, HttpOutputConfig
from hlschunklist.core.errors import ChunklistError, ManifestConfigError, SinkError
from hlschunklist.core.interfaces import IManifestSink
from hlschunklist.core.models import Chunk, ManifestType, OutputMode

__all__ = [
    "ChunklistConfig",
    "HttpOutputConfig",
    "ChunklistError",
    "ManifestConfigError",
    "SinkError",
    "IManifestSink",
    "Chunk",
    "ManifestType",
    "OutputMode",
]
