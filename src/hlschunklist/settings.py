"""JSON configuration file support.

A settings file describes one chunklist, for example::

    {
      "type": "window",
      "chunklist": "out/chunklist.m3u8",
      "version": 6,
      "target_duration": 6,
      "window": 5,
      "independent_segments": true,
      "init": "out/init.mp4",
      "output": "http",
      "http": {"host": "ingest.local:8080", "scheme": "http"}
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from hlschunklist.constants import (
    DEFAULT_HLS_VERSION,
    DEFAULT_HTTP_TIMEOUT_S,
    DEFAULT_TARGET_DURATION,
    DEFAULT_WINDOW_SIZE,
)
from hlschunklist.core.config import ChunklistConfig, HttpOutputConfig
from hlschunklist.core.errors import ManifestConfigError
from hlschunklist.core.models import ManifestType, OutputMode


class HttpSettings(BaseModel):
    host: str
    scheme: Literal["http", "https"] = "http"
    timeout_s: float = Field(default=DEFAULT_HTTP_TIMEOUT_S, gt=0, allow_inf_nan=False)
    propagate_errors: bool = True


class ChunklistSettings(BaseModel):
    type: Literal["vod", "event", "window"]
    chunklist: str
    version: int = DEFAULT_HLS_VERSION
    target_duration: float = Field(default=DEFAULT_TARGET_DURATION, ge=0, allow_inf_nan=False)
    window: int = DEFAULT_WINDOW_SIZE
    independent_segments: bool = False
    init: str | None = None
    output: Literal["none", "file", "http"] = "none"
    http: HttpSettings | None = None

    def to_config(self) -> ChunklistConfig:
        http = None
        if self.http is not None:
            http = HttpOutputConfig(
                host=self.http.host,
                scheme=self.http.scheme,
                timeout_s=self.http.timeout_s,
                propagate_errors=self.http.propagate_errors,
            )
        config = ChunklistConfig(
            manifest_type=ManifestType(self.type),
            chunklist_path=self.chunklist,
            version=self.version,
            independent_segments=self.independent_segments,
            target_duration_s=self.target_duration,
            sliding_window_size=self.window,
            init_segment_path=self.init,
            output_mode=OutputMode(self.output),
            http=http,
        )
        config.validate()
        return config


def load_settings(path: str | Path) -> ChunklistSettings:
    """Parse a JSON settings file; raise ManifestConfigError when invalid."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        return ChunklistSettings.model_validate_json(raw)
    except ValidationError as e:
        raise ManifestConfigError(f"invalid chunklist settings in {path}:\n{e}") from e
