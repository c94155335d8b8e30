"""Achievement catalog command for StockQuest CLI."""

from decimal import Decimal

import click
from rich.console import Console

from stockquest.cli.display import catalog_table

console = Console()


@click.command()
@click.option(
    "--capital",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Starting cash the value milestones are based on.",
)
def achievements(capital: float | None) -> None:
    """List the achievements you can unlock.
    
    \b
    Examples:
      stockquest achievements
      stockquest achievements --capital 50000
    """
    from stockquest.achievements import default_catalog
    from stockquest.config import SessionConfig

    initial_capital = Decimal(str(capital)) if capital else SessionConfig().initial_capital
    console.print(catalog_table(default_catalog(initial_capital)))
