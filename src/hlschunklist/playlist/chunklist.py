"""HLS chunklist manifest.

`Chunklist` owns the manifest state for one output stream and is the only
way to mutate it. It is a small state machine: open on construction, closed
(terminal) after `close_manifest`. Every mutating call can optionally
re-render the playlist and push it to the configured output sink.

Not thread-safe: a chunklist assumes a single writer.
"""

from __future__ import annotations

import logging

from hlschunklist.core.config import ChunklistConfig
from hlschunklist.core.interfaces import IManifestSink
from hlschunklist.core.models import Chunk, ManifestType
from hlschunklist.playlist.serializer import render_playlist
from hlschunklist.playlist.state import ChunklistState, evict_to_window
from hlschunklist.sinks.factory import make_sink

logger = logging.getLogger(__name__)


class Chunklist:
    """Chunklist manifest with sliding-window eviction and pluggable output.

    Parameters
    ----------
    config : ChunklistConfig
        Manifest and output settings; validated here.
    sink : IManifestSink | None
        Output sink override. Defaults to the one selected by
        `config.output_mode`.
    """

    def __init__(self, config: ChunklistConfig, *, sink: IManifestSink | None = None) -> None:
        config.validate()
        self.config = config
        self._state = ChunklistState.from_config(config)
        self._sink = sink if sink is not None else make_sink(config)

    # ---- read-only view ----

    @property
    def manifest_type(self) -> ManifestType:
        return self._state.manifest_type

    @property
    def version(self) -> int:
        return self._state.version

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """Snapshot of the chunks currently in the playlist, oldest first."""
        return tuple(self._state.chunks)

    @property
    def media_sequence(self) -> int:
        return self._state.media_sequence

    @property
    def discontinuity_sequence(self) -> int:
        return self._state.discontinuity_sequence

    @property
    def init_segment_path(self) -> str | None:
        return self._state.init_segment_path

    @property
    def closed(self) -> bool:
        return self._state.closed

    @property
    def sink(self) -> IManifestSink:
        return self._sink

    # ---- mutations ----

    def append_chunk(self, chunk: Chunk, publish: bool = False) -> None:
        """Append `chunk`, trim a live window, and optionally publish.

        Raises SinkError if publishing fails.
        """
        if self._state.closed:
            logger.warning("Appending %s to closed chunklist %s", chunk.file_name, self._state.chunklist_path)

        self._state.chunks.append(chunk)
        evict_to_window(self._state)

        if publish:
            self.publish()

    def set_init_chunk(self, init_chunk_path: str) -> None:
        """Reference an init segment (EXT-X-MAP) from the next rendition on."""
        self._state.init_segment_path = init_chunk_path

    def set_hls_version(self, version: int) -> None:
        self._state.version = version

    def close_manifest(self, publish: bool = False) -> None:
        """Mark the playlist finished (EXT-X-ENDLIST). Cannot be undone.

        Raises SinkError if publishing fails.
        """
        self._state.closed = True
        if publish:
            self.publish()

    # ---- output ----

    def render(self) -> str:
        return render_playlist(self._state)

    def to_bytes(self) -> bytes:
        return self.render().encode("utf-8")

    def publish(self) -> None:
        """Render now and hand the bytes to the sink."""
        self._sink.save(self.to_bytes())

    def close(self) -> None:
        """Release sink resources. The manifest state is left untouched."""
        self._sink.close()

    def __enter__(self) -> Chunklist:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Chunklist(type={self._state.manifest_type.name}, chunks={len(self._state.chunks)}, "
            f"media_sequence={self._state.media_sequence}, closed={self._state.closed})"
        )
