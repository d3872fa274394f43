"""Exception hierarchy shared by the chunklist core and the output sinks."""

from __future__ import annotations


class ChunklistError(Exception):
    """Base class for every error raised by hlschunklist."""


class ManifestConfigError(ChunklistError, ValueError):
    """Raised when a chunklist is constructed from an invalid configuration."""


class SinkError(ChunklistError):
    """Raised when serialized manifest bytes could not be saved or published.

    The underlying exception (``OSError``, ``httpx.HTTPError``...) is always
    chained as ``__cause__``.
    """

    def __init__(self, message: str, *, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
