from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# IManifestSink
# ---------------------------------------------------------------------------

@runtime_checkable
class IManifestSink(Protocol):
    """
    Abstract destination for serialized chunklist bytes.

    Domain expectations:
    - It receives the full playlist on every call, never a diff.
    - It keeps no reference back to the chunklist.
    - Failures surface as SinkError; logging is the caller's choice.
    """

    def save(self, data: bytes) -> None:
        """
        Persist or publish one rendition of the chunklist.

        Implementations:
        - NullSink (discard)
        - FileSink (overwrite a local file)
        - HttpSink (POST to an ingest server)
        """
        ...

    def close(self) -> None:
        """
        Release resources held by the sink (HTTP connection pools...).
        """
        ...
