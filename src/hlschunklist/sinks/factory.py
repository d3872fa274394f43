from __future__ import annotations

from hlschunklist.core.config import ChunklistConfig
from hlschunklist.core.interfaces import IManifestSink
from hlschunklist.core.models import OutputMode
from hlschunklist.sinks.file import FileSink
from hlschunklist.sinks.http import HttpSink
from hlschunklist.sinks.null import NullSink


def make_sink(config: ChunklistConfig) -> IManifestSink:
    """Build the sink matching `config.output_mode`."""
    match config.output_mode:
        case OutputMode.NONE:
            return NullSink()
        case OutputMode.FILE:
            return FileSink(config.chunklist_path)
        case OutputMode.HTTP:
            http = config.http
            if http is None:
                raise ValueError("HTTP output mode requires an HttpOutputConfig")
            return HttpSink(
                config.chunklist_path,
                host=http.host,
                scheme=http.scheme,
                client=http.client,
                timeout_s=http.timeout_s,
                propagate_errors=http.propagate_errors,
            )
    raise RuntimeError(f"Unsupported output mode: {config.output_mode!r}")
