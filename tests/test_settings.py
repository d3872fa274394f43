import json

import pytest

from hlschunklist.core.errors import ManifestConfigError
from hlschunklist.core.models import ManifestType, OutputMode
from hlschunklist.settings import ChunklistSettings, load_settings


def _write(tmp_path, payload: dict):
    path = tmp_path / "chunklist.json"
    path.write_text(json.dumps(payload))
    return path


def test_load_full_settings(tmp_path) -> None:
    path = _write(
        tmp_path,
        {
            "type": "window",
            "chunklist": "out/chunklist.m3u8",
            "version": 6,
            "target_duration": 4,
            "window": 5,
            "independent_segments": True,
            "init": "out/init.mp4",
            "output": "http",
            "http": {"host": "ingest.local:8080", "scheme": "https", "timeout_s": 3},
        },
    )

    config = load_settings(path).to_config()

    assert config.manifest_type is ManifestType.LIVE_WINDOW
    assert config.chunklist_path == "out/chunklist.m3u8"
    assert config.version == 6
    assert config.target_duration_s == 4.0
    assert config.sliding_window_size == 5
    assert config.independent_segments is True
    assert config.init_segment_path == "out/init.mp4"
    assert config.output_mode is OutputMode.HTTP
    assert config.http is not None
    assert (config.http.host, config.http.scheme, config.http.timeout_s) == ("ingest.local:8080", "https", 3.0)
    assert config.http.propagate_errors is True


def test_defaults() -> None:
    config = ChunklistSettings(type="vod", chunklist="c.m3u8").to_config()

    assert config.manifest_type is ManifestType.VOD
    assert config.version == 3
    assert config.target_duration_s == 6.0
    assert config.output_mode is OutputMode.NONE
    assert config.init_segment_path is None
    assert config.http is None


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "live", "chunklist": "c.m3u8"},
        {"type": "vod"},
        {"type": "vod", "chunklist": "c.m3u8", "target_duration": -1},
        {"type": "vod", "chunklist": "c.m3u8", "output": "ftp"},
    ],
)
def test_invalid_settings(tmp_path, payload: dict) -> None:
    with pytest.raises(ManifestConfigError):
        load_settings(_write(tmp_path, payload))


def test_window_must_be_positive() -> None:
    with pytest.raises(ManifestConfigError):
        ChunklistSettings(type="window", chunklist="c.m3u8", window=0).to_config()


def test_http_output_needs_http_block() -> None:
    with pytest.raises(ManifestConfigError):
        ChunklistSettings(type="event", chunklist="c.m3u8", output="http").to_config()


def test_http_log_only_mode(tmp_path) -> None:
    path = _write(
        tmp_path,
        {
            "type": "event",
            "chunklist": "c.m3u8",
            "output": "http",
            "http": {"host": "ingest", "propagate_errors": False},
        },
    )

    config = load_settings(path).to_config()

    assert config.http is not None
    assert config.http.propagate_errors is False
