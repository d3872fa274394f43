"""Output sinks for serialized chunklists.

This package provides:
- NullSink: discards renditions (OutputMode.NONE)
- FileSink: overwrites a local file (OutputMode.FILE)
- HttpSink: POSTs to an ingest server (OutputMode.HTTP)
- make_sink: picks one from a ChunklistConfig
"""

from hlschunklist.sinks.factory import make_sink
from hlschunklist.sinks.file import FileSink
from hlschunklist.sinks.http import HttpSink
from hlschunklist.sinks.null import NullSink

__all__ = [
    "make_sink",
    "FileSink",
    "HttpSink",
    "NullSink",
]
