"""locerr command line: preview diagnostics against real files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from locerr import __version__
from locerr.config import ColorMode, RenderConfig, find_config, load_config
from locerr.errors import error_at, error_in
from locerr.render import DiagnosticRenderer
from locerr.source import Source

logger = logging.getLogger("locerr.cli")

_FILE = click.Path(exists=True, dir_okay=False, allow_dash=True)


def _load_source(file: str) -> Source:
    if file == "-":
        return Source.from_stdin(click.get_text_stream("stdin"))
    return Source.from_file(file)


def _render_config(
    config_path: str | None, color: str | None, emphasize: bool | None,
) -> RenderConfig:
    """Load config from --config or locerr.toml, then apply CLI overrides."""
    if config_path is not None:
        config = load_config(Path(config_path))
    else:
        try:
            config = load_config(find_config())
        except FileNotFoundError:
            logger.debug("no config found, using defaults")
            config = RenderConfig()

    if color is not None:
        config.color = ColorMode(color)
    if emphasize is not None:
        config.emphasize = emphasize
    return config


@click.group()
@click.version_option(__version__, prog_name="locerr")
@click.option("-v", "--verbose", is_flag=True, help="Log source loading and config lookup.")
def main(verbose: bool) -> None:
    """Render compiler errors with source locations and snippets."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("file", type=_FILE)
@click.argument("message")
@click.option("--start", type=int, required=True, help="Offset where the error starts.")
@click.option("--end", type=int, default=None, help="Offset where the error ends (omit for a point).")
@click.option("--note", "notes", multiple=True, help="Stack a note on the error (repeatable).")
@click.option(
    "--color",
    type=click.Choice([m.value for m in ColorMode]),
    default=None,
    help="Override the configured color mode.",
)
@click.option("--emphasize/--no-emphasize", default=None, help="Emphasize quoted code.")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this locerr.toml instead of searching for one.",
)
def show(
    file: str,
    message: str,
    start: int,
    end: int | None,
    notes: tuple[str, ...],
    color: str | None,
    emphasize: bool | None,
    config_path: str | None,
) -> None:
    """Render MESSAGE as an error located in FILE ('-' for stdin)."""
    try:
        source = _load_source(file)
        config = _render_config(config_path, color, emphasize)
    except (OSError, ValueError) as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    first = source.pos_at(start)
    if end is None:
        err = error_at(first, message)
    else:
        err = error_in(first, source.pos_at(end), message)
    for note in notes:
        err.note(note)

    renderer = DiagnosticRenderer.from_config(config, click.get_text_stream("stdout"))
    text = renderer.render(err)
    click.echo(text, nl=not text.endswith("\n"), color=renderer.color)


@main.command()
@click.argument("file", type=_FILE)
@click.argument("offset", type=int)
def locate(file: str, offset: int) -> None:
    """Print FILE:LINE:COLUMN for a character offset."""
    try:
        source = _load_source(file)
    except (OSError, ValueError) as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)
    click.echo(source.pos_at(offset).format())
