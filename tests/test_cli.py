import json

from click.testing import CliRunner

from hlschunklist import __version__
from hlschunklist.cli import cli, parse_segment


def test_parse_segment() -> None:
    c = parse_segment("out/a.ts:6.006")
    assert (c.file_name, c.duration_s, c.is_disco) == ("out/a.ts", 6.006, False)

    c = parse_segment("C:/media/b.ts:2:disco")
    assert (c.file_name, c.duration_s, c.is_disco) == ("C:/media/b.ts", 2.0, True)


def test_version() -> None:
    result = CliRunner().invoke(cli, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_render_window_to_stdout() -> None:
    result = CliRunner().invoke(
        cli,
        [
            "render",
            "--type", "window",
            "--window", "2",
            "--chunklist", "out/chunklist.m3u8",
            "--segment", "out/a.ts:6",
            "--segment", "out/b.ts:6",
            "--segment", "out/c.ts:6:disco",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "#EXTM3U\n"
        "#EXT-X-VERSION:3\n"
        "#EXT-X-MEDIA-SEQUENCE:1\n"
        "#EXT-X-DISCONTINUITY-SEQUENCE:0\n"
        "#EXT-X-TARGETDURATION:6\n"
        "#EXTINF:6.00000000,\n"
        "b.ts\n"
        "#EXT-X-DISCONTINUITY\n"
        "#EXTINF:6.00000000,\n"
        "c.ts\n"
    )


def test_render_vod_to_file(tmp_path) -> None:
    target = tmp_path / "chunklist.m3u8"
    result = CliRunner().invoke(
        cli,
        [
            "render",
            "--type", "vod",
            "--chunklist", str(target),
            "--init", str(tmp_path / "init.mp4"),
            "--segment", f"{tmp_path / 'a.m4s'}:4.5",
            "--close",
            "--output", "file",
        ],
    )

    assert result.exit_code == 0, result.output
    text = target.read_text()
    assert '#EXT-X-MAP:URI="init.mp4"\n' in text
    assert "#EXTINF:4.50000000,\na.m4s\n" in text
    assert text.endswith("#EXT-X-ENDLIST\n")


def test_render_from_config_file(tmp_path) -> None:
    settings = tmp_path / "chunklist.json"
    settings.write_text(json.dumps({"type": "event", "chunklist": "chunklist.m3u8", "version": 7}))

    result = CliRunner().invoke(cli, ["render", "--config", str(settings), "--segment", "s.ts:1"])

    assert result.exit_code == 0, result.output
    assert "#EXT-X-VERSION:7\n" in result.stdout
    assert "#EXT-X-PLAYLIST-TYPE:EVENT\n" in result.stdout


def test_render_requires_type() -> None:
    result = CliRunner().invoke(cli, ["render", "--segment", "a.ts:1"])
    assert result.exit_code == 2


def test_render_rejects_bad_segment() -> None:
    result = CliRunner().invoke(cli, ["render", "--type", "vod", "--segment", "a.ts"])
    assert result.exit_code == 2


def test_render_rejects_bad_window() -> None:
    result = CliRunner().invoke(cli, ["render", "--type", "window", "--window", "0"])
    assert result.exit_code == 1
    assert "sliding_window_size" in result.output


def test_render_http_without_host_fails() -> None:
    result = CliRunner().invoke(cli, ["render", "--type", "vod", "--output", "http"])
    assert result.exit_code == 1
