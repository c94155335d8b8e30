"""Configuration command for StockQuest CLI."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from stockquest.cli.display import error_panel, money
from stockquest.config import CONFIG_PATH, load_config
from stockquest.errors import ConfigError

console = Console()


@click.command()
@click.option(
    "-c", "--config-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help=f"Config file to read (default: {CONFIG_PATH}).",
)
def config(config_file: Optional[Path]) -> None:
    """Show the effective session configuration.
    
    \b
    Examples:
      stockquest config
      stockquest config -c ./stockquest.toml
    """
    path = config_file or CONFIG_PATH
    try:
        settings = load_config(path)
    except ConfigError as e:
        console.print(error_panel(str(e)))
        raise SystemExit(1)

    source = str(path) if path.exists() else "built-in defaults"
    table = Table(title="Configuration", show_header=True, header_style="bold")
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("initial_capital", money(settings.initial_capital))
    table.add_row("tick_interval", f"{settings.tick_interval:g}s")
    table.add_row("seed", "random" if settings.seed is None else str(settings.seed))
    table.add_row("buy_experience", str(settings.buy_experience))
    table.add_row("sell_experience", str(settings.sell_experience))
    table.add_row("history_limit", str(settings.history_limit))

    console.print(table)
    console.print(f"[dim]Source: {source}[/dim]")
