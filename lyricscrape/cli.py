from __future__ import annotations

import json
from dataclasses import asdict

import typer

from lyricscrape.client import LyricsClient
from lyricscrape.config import load_config, save_config_default_source
from lyricscrape.errors import UnknownSourceError
from lyricscrape.logging_setup import setup_logging
from lyricscrape.sources.resolver import SourceResolver
from lyricscrape.sources.types import Found


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command()
def get(
    query: str = typer.Argument(..., help="Free-text search, e.g. 'ellie goulding lights'"),
    source: str | None = typer.Option(None, "--source", "-s", help="Source name (see `sources`)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Fetch lyrics for QUERY from one source.
    """
    setup_logging(debug)
    with LyricsClient(default_source=source) as client:
        try:
            result = client.lookup(query)
        except UnknownSourceError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=2)

    if not isinstance(result, Found):
        typer.echo("No lyrics found", err=True)
        raise typer.Exit(code=1)

    lyrics = result.lyrics
    if json_output:
        typer.echo(json.dumps(asdict(lyrics), indent=2, ensure_ascii=False))
        return
    typer.echo(lyrics.display)
    typer.echo(f"Source: {lyrics.source} ({lyrics.url})")
    typer.echo()
    typer.echo(lyrics.content)


@app.command()
def sources(
    check: bool = typer.Option(False, "--check", help="Validate every configured source"),
):
    """List configured sources."""
    cfg = load_config()
    resolver = SourceResolver(cfg.sources)
    if not check:
        for name in resolver.names():
            marker = " (default)" if name == cfg.default_source else ""
            typer.echo(f"{name}{marker}")
        return

    failed = 0
    for name, err in resolver.check_all().items():
        if err is None:
            typer.echo(f"✓ {name}")
        else:
            failed += 1
            typer.echo(f"✗ {name}: {err.reason or 'not configured'}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def default(source: str = typer.Argument(..., help="Source to use when --source is omitted")):
    """Save the default source to the user config."""
    cfg = load_config()
    try:
        SourceResolver(cfg.sources).resolve(source)
    except UnknownSourceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    save_config_default_source(source)
    typer.echo(f"Default source: {source}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
