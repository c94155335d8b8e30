"""Market preview command for StockQuest CLI."""

import click
from rich.console import Console

from stockquest.cli.display import market_table

console = Console()


def simulate_market(ticks: int, seed: int | None = None) -> list:
    """Run the price engine over the starting market.

    Args:
        ticks: Number of ticks to run.
        seed: Random seed for a reproducible path.

    Returns:
        Instruments after the last tick.
    """
    import random

    from stockquest.market import PriceEngine, default_instruments

    engine = PriceEngine(random.Random(seed))
    instruments = default_instruments()
    for _ in range(ticks):
        instruments = engine.advance(instruments)
    return instruments


@click.command()
@click.option(
    "-n", "--ticks",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of price ticks to simulate before showing the market.",
)
@click.option(
    "-s", "--seed",
    type=int,
    default=None,
    help="Random seed for a reproducible price path.",
)
def market(ticks: int, seed: int | None) -> None:
    """Show simulated market prices.
    
    \b
    Examples:
      stockquest market                 # Starting prices
      stockquest market -n 20 -s 42     # Prices after 20 seeded ticks
    """
    instruments = simulate_market(ticks, seed)
    console.print(market_table(instruments))
    if ticks:
        console.print(f"[dim]After {ticks} tick(s).[/dim]")
