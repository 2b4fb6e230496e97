"""Main CLI interface for findurls."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from .. import __version__
from ..config import ALLOW_ALL, ConfigError, load_config, merge_options
from ..core import extract_urls
from .config_commands import config

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    findurls - find and normalize URLs in text.

    Nothing is fetched: matching is purely syntactic.
    """
    pass


cli.add_command(config)


@cli.command()
@click.argument("files", nargs=-1, type=click.File("r", encoding="utf-8"))
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Options file (default: ~/.config/findurls/config.yml)")
@click.option("--require-protocol/--no-require-protocol", default=None,
              help="Only match URLs written with a protocol or as //host")
@click.option("--default-protocol", default=None, help="Protocol for bare domains ('' to disable)")
@click.option("--allow-protocol", "allowed_protocols", multiple=True, help="Allowed protocol (repeatable)")
@click.option("--allow-all-protocols", is_flag=True, help="Accept any protocol")
@click.option("--extension", "extensions", multiple=True,
              help="Extension that needs a protocol or path (repeatable, replaces the built-in list)")
@click.option("--bare-hostname", "bare_hostnames", multiple=True, help="Allowed dotless hostname (repeatable)")
@click.option("--dedupe/--no-dedupe", default=None, help="Drop repeated URLs")
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per match")
@click.option("-v", "--verbose", is_flag=True, help="Log why candidates are rejected")
def extract(files, config_path, require_protocol, default_protocol, allowed_protocols,
            allow_all_protocols, extensions, bare_hostnames, dedupe, as_json, verbose):
    """Extract URLs from FILES (or standard input)."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    try:
        base = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    overrides = {}
    if require_protocol is not None:
        overrides["require_protocol"] = require_protocol
    if default_protocol is not None:
        overrides["default_protocol"] = default_protocol
    if allow_all_protocols:
        overrides["allowed_protocols"] = ALLOW_ALL
    elif allowed_protocols:
        overrides["allowed_protocols"] = list(allowed_protocols)
    if extensions:
        overrides["extensions_requiring_protocol"] = list(extensions)
    if bare_hostnames:
        overrides["allowed_bare_hostnames"] = list(bare_hostnames)
    if dedupe is not None:
        overrides["deduplicate"] = dedupe

    options = merge_options(base, **overrides)

    if not files:
        files = (click.get_text_stream("stdin"),)

    results = []
    for f in files:
        source = getattr(f, "name", "<stdin>")
        for match in extract_urls(f.read(), options):
            results.append((source, match))

    if as_json:
        for source, match in results:
            click.echo(json.dumps({"source": source, **match.to_dict()}, ensure_ascii=False))
        return

    if not results:
        console.print("[yellow]No URLs found.[/yellow]")
        return

    table = Table(title=f"URLs ({len(results)})", box=box.ROUNDED)
    if len(files) > 1:
        table.add_column("Source", style="magenta")
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Raw", style="cyan")
    table.add_column("Normalized", style="green")

    for source, match in results:
        row = [str(match.index), escape(match.raw), escape(match.normalized)]
        if len(files) > 1:
            row.insert(0, escape(source))
        table.add_row(*row)

    console.print(table)


if __name__ == "__main__":
    cli()
