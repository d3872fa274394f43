from __future__ import annotations


class NullSink:
    """Sink for OutputMode.NONE: accepts and discards every rendition."""

    def save(self, data: bytes) -> None:
        return None

    def close(self) -> None:
        return None
