"""Configuration management CLI commands."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from ..config import DEFAULT_CONFIG, DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL, ConfigError, get_config_path, load_config

console = Console()


@click.group()
def config():
    """Manage findurls configuration."""
    pass


@config.command()
@click.option("--path", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Where to write the config file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(config_path, force):
    """Write a commented default config file."""
    config_path = config_path or get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        if not click.confirm("Overwrite?"):
            console.print("[green]Keeping existing config.[/green]")
            return

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG)

    console.print(f"[green]✓[/green] Created config at {config_path}")


@config.command()
@click.option("--path", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Config file to read")
def show(config_path):
    """Show the effective extraction options."""
    config_path = config_path or get_config_path()

    try:
        options = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    source = str(config_path) if config_path.exists() else "built-in defaults"
    console.print(Panel.fit(
        f"[bold cyan]findurls options[/bold cyan]\n"
        f"Source: {source}",
        border_style="cyan"
    ))

    table = Table(show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    if options.allows_any_protocol:
        protocols = "any"
    else:
        protocols = ", ".join(options.allowed_protocols) or "(none)"

    if options.extensions_requiring_protocol == DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL:
        extensions = f"built-in ({len(options.extensions_requiring_protocol)})"
    else:
        extensions = ", ".join(sorted(options.extensions_requiring_protocol)) or "(none)"

    table.add_row("Require Protocol", "✓" if options.require_protocol else "✗")
    table.add_row("Default Protocol", options.default_protocol or "(none)")
    table.add_row("Allowed Protocols", protocols)
    table.add_row("Bare Hostnames", ", ".join(options.allowed_bare_hostnames) or "(none)")
    table.add_row("Extensions Requiring Protocol", extensions)
    table.add_row("Deduplicate", "✓" if options.deduplicate else "✗")

    console.print(table)
