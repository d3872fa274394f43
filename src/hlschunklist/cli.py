from __future__ import annotations

from dataclasses import replace

import click
from rich.console import Console

from . import __version__
from .core.config import ChunklistConfig, HttpOutputConfig
from .core.errors import ChunklistError
from .core.models import Chunk, ManifestType, OutputMode
from .log import configure_logging
from .playlist.chunklist import Chunklist
from .settings import load_settings

console = Console(stderr=True)


def parse_segment(value: str) -> Chunk:
    """Parse ``PATH:DURATION[:disco]`` into a Chunk."""
    is_disco = False
    if value.lower().endswith(":disco"):
        is_disco = True
        value = value[: -len(":disco")]

    path, sep, duration = value.rpartition(":")
    if not sep or not path:
        raise click.BadParameter(f"expected PATH:DURATION[:disco], got {value!r}", param_hint="--segment")
    try:
        return Chunk(file_name=path, duration_s=float(duration), is_disco=is_disco)
    except ValueError as e:
        raise click.BadParameter(f"{value!r}: {e}", param_hint="--segment") from e


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def cli(log_level: str) -> None:
    """hlschunklist — build and publish HLS chunklist manifests."""
    configure_logging(log_level.upper(), console=console)


@cli.command("version")
def version_cmd() -> None:
    """Print the package version."""
    click.echo(__version__)


@cli.command("render")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON settings file")
@click.option(
    "--type",
    "manifest_type",
    type=click.Choice([t.value for t in ManifestType]),
    default=None,
    help="Playlist mode: vod, event or window",
)
@click.option("--chunklist", "chunklist_path", type=str, default="chunklist.m3u8", show_default=True)
@click.option("--version", "hls_version", type=int, default=3, show_default=True, help="EXT-X-VERSION")
@click.option("--target-duration", type=float, default=6.0, show_default=True, help="Seconds")
@click.option("--window", type=int, default=5, show_default=True, help="Sliding window size (window mode)")
@click.option("--independent-segments/--no-independent-segments", default=False, show_default=True)
@click.option("--init", "init_path", type=str, default=None, help="Init segment path (EXT-X-MAP)")
@click.option("--segment", "segments", multiple=True, help="PATH:DURATION[:disco]; repeat in playback order")
@click.option("--close/--no-close", default=False, show_default=True, help="Append EXT-X-ENDLIST")
@click.option(
    "--output",
    type=click.Choice([m.value for m in OutputMode]),
    default=None,
    help="none prints to stdout; file/http publish the chunklist",
)
@click.option("--host", type=str, default="", help="Ingest host for http output")
@click.option("--scheme", type=click.Choice(["http", "https"]), default="http", show_default=True)
@click.option(
    "--publish-each/--no-publish-each",
    default=False,
    show_default=True,
    help="Publish after every appended segment instead of once at the end",
)
def render_cmd(
    config_path: str | None,
    manifest_type: str | None,
    chunklist_path: str,
    hls_version: int,
    target_duration: float,
    window: int,
    independent_segments: bool,
    init_path: str | None,
    segments: tuple[str, ...],
    close: bool,
    output: str | None,
    host: str,
    scheme: str,
    publish_each: bool,
) -> None:
    """Build a chunklist from segments and print or publish it."""
    chunks = [parse_segment(s) for s in segments]

    try:
        if config_path:
            config = load_settings(config_path).to_config()
            if output is not None:
                config = _with_output(config, OutputMode(output), host, scheme)
        else:
            if manifest_type is None:
                raise click.UsageError("Pass --type or --config")
            config = _with_output(
                ChunklistConfig(
                    manifest_type=ManifestType(manifest_type),
                    chunklist_path=chunklist_path,
                    version=hls_version,
                    independent_segments=independent_segments,
                    target_duration_s=target_duration,
                    sliding_window_size=window,
                    init_segment_path=init_path,
                ),
                OutputMode(output or "none"),
                host,
                scheme,
            )

        with Chunklist(config) as chunklist:
            if init_path and config_path:
                chunklist.set_init_chunk(init_path)
            for chunk in chunks:
                chunklist.append_chunk(chunk, publish=publish_each)
            if close:
                chunklist.close_manifest(publish=False)

            if config.output_mode is OutputMode.NONE:
                click.echo(chunklist.render(), nl=False)
                return

            chunklist.publish()
    except ChunklistError as e:
        raise click.ClickException(str(e)) from e

    console.print(
        f"[bold]published[/]: {config.chunklist_path} via {config.output_mode.value} • "
        f"chunks={len(chunklist.chunks)}  media_sequence={chunklist.media_sequence}  "
        f"closed={chunklist.closed}"
    )


def _with_output(config: ChunklistConfig, mode: OutputMode, host: str, scheme: str) -> ChunklistConfig:
    http = config.http
    if mode is OutputMode.HTTP and host:
        http = HttpOutputConfig(host=host, scheme=scheme)
    return replace(config, output_mode=mode, http=http)


if __name__ == "__main__":
    cli()
