"""rssgen command line.

    rssgen --input sites.txt [--output rss-feeds.txt] [--workers 4]
    rssgen --url https://example.com [--title]
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import config
from .batch import resolve_many
from .core import RssGenError
from .io import read_sites, write_feeds
from .resolvers import find_feed

app = typer.Typer(add_completion=False, help="Find the RSS/Atom feed for each site URL.")
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    log = logging.getLogger("rssgen")
    log.setLevel(logging.DEBUG if verbose else config.LOG_LEVEL)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_path=False))


def _err(message: str) -> None:
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)


def _fail(site: str, message: str) -> None:
    _err(f"Failed to generate RSS for: {site} ({message})")


@app.command()
def main(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="File with one site URL per line."),
    output: Path = typer.Option(Path(config.DEFAULT_OUTPUT), "--output", "-o", help="Where to write the feed list."),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Resolve a single site and print its feed."),
    workers: int = typer.Option(config.WORKERS, "--workers", "-w", min=1, help="Sites resolved concurrently."),
    title: bool = typer.Option(False, "--title", help="Also print the channel name when known."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    if url is None and input_file is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _setup_logging(verbose)

    if url is not None:
        res = find_feed(url, fetch_title=title)
        if not res.ok:
            _fail(url.strip(), res.error)
            raise typer.Exit(code=1)
        console.print(res.feed_url, markup=False, highlight=False, soft_wrap=True)
        if title and res.title:
            console.print(res.title, markup=False, highlight=False, soft_wrap=True)
        return

    try:
        lines = read_sites(input_file)
    except RssGenError as e:
        _err(f"Failed to read input file: {e}")
        raise typer.Exit(code=1)

    report = resolve_many(lines, workers=workers)
    for res in report.failures:
        _fail(res.input, res.error)

    feeds = report.unique_feeds()
    try:
        write_feeds(output, feeds)
    except RssGenError as e:
        _err(f"Failed to write output file: {e}")
        raise typer.Exit(code=1)
    _err(f"{len(feeds)} feeds written to {output}, {len(report.failures)} sites failed")


if __name__ == "__main__":
    app()
