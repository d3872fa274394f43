import logging
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from hlschunklist.core.config import ChunklistConfig
from hlschunklist.core.interfaces import IManifestSink
from hlschunklist.core.models import Chunk, ManifestType


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    # The CLI installs its own handler and stops propagation; undo it so caplog keeps working
    log = logging.getLogger("hlschunklist")
    log.handlers.clear()
    log.propagate = True
    log.setLevel(logging.NOTSET)


@pytest.fixture
def mock_sink():
    sink = MagicMock(spec=IManifestSink)
    sink.save = MagicMock(return_value=None)
    sink.close = MagicMock(return_value=None)
    return sink


@pytest.fixture
def make_config() -> Callable[..., ChunklistConfig]:
    def _make(manifest_type: ManifestType = ManifestType.VOD, **kwargs: Any) -> ChunklistConfig:
        kwargs.setdefault("chunklist_path", "out/chunklist.m3u8")
        return ChunklistConfig(manifest_type=manifest_type, **kwargs)

    return _make


@pytest.fixture
def chunk() -> Callable[..., Chunk]:
    def _chunk(name: str, duration_s: float = 6.0, *, is_disco: bool = False) -> Chunk:
        return Chunk(file_name=f"out/{name}", duration_s=duration_s, is_disco=is_disco)

    return _chunk
