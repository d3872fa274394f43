from __future__ import annotations

import math
from dataclasses import dataclass, field

import httpx

from hlschunklist.constants import (
    DEFAULT_HLS_VERSION,
    DEFAULT_HTTP_TIMEOUT_S,
    DEFAULT_TARGET_DURATION,
    DEFAULT_WINDOW_SIZE,
)
from hlschunklist.core.errors import ManifestConfigError
from hlschunklist.core.models import ManifestType, OutputMode


@dataclass(frozen=True)
class HttpOutputConfig:
    """Upload target for the HTTP output mode."""

    host: str
    scheme: str = "http"
    timeout_s: float = DEFAULT_HTTP_TIMEOUT_S
    propagate_errors: bool = True  # False: upload failures are only logged
    # Optional pre-built client (shared pools, custom transports in tests)
    client: httpx.Client | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ChunklistConfig:
    """Configuration for one chunklist, fixed at construction."""

    manifest_type: ManifestType
    chunklist_path: str
    version: int = DEFAULT_HLS_VERSION
    independent_segments: bool = False
    target_duration_s: float = DEFAULT_TARGET_DURATION
    sliding_window_size: int = DEFAULT_WINDOW_SIZE  # LIVE_WINDOW only
    init_segment_path: str | None = None
    output_mode: OutputMode = OutputMode.NONE
    http: HttpOutputConfig | None = None

    def validate(self) -> None:
        """Raise ManifestConfigError on settings the chunklist cannot honor."""
        if self.manifest_type is ManifestType.LIVE_WINDOW and self.sliding_window_size < 1:
            raise ManifestConfigError(
                f"sliding_window_size must be >= 1 for a live window, got {self.sliding_window_size}"
            )
        if not math.isfinite(self.target_duration_s) or self.target_duration_s < 0:
            raise ManifestConfigError(f"target_duration_s must be a finite number >= 0, got {self.target_duration_s}")
        if self.output_mode is OutputMode.HTTP:
            if self.http is None or not self.http.host:
                raise ManifestConfigError("HTTP output mode requires an HttpOutputConfig with a host")
            if not self.http.scheme:
                raise ManifestConfigError("HTTP output mode requires a scheme")
