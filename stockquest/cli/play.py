"""Interactive trading session for StockQuest CLI.

Runs a single session in the terminal. The market ticks on a fixed
interval; owed ticks are applied before each command is handled.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from stockquest.cli.display import (
    achievements_table,
    error_panel,
    history_table,
    holdings_table,
    market_table,
    notification_panel,
    portfolio_panel,
    progression_text,
    result_panel,
)

console = Console()

HELP_TEXT = (
    "[dim]Commands:[/dim]\n"
    "• [cyan]market[/cyan] - Show prices\n"
    "• [cyan]buy SYMBOL QTY[/cyan] - Buy shares\n"
    "• [cyan]sell SYMBOL QTY[/cyan] - Sell shares\n"
    "• [cyan]portfolio[/cyan] - Cash, holdings and gain/loss\n"
    "• [cyan]history[/cyan] - Recent transactions\n"
    "• [cyan]awards[/cyan] - Achievements and progress\n"
    "• [cyan]level[/cyan] - Level and experience\n"
    "• [cyan]tick [N][/cyan] - Advance the market N steps\n"
    "• [cyan]reset[/cyan] - Start over\n"
    "• [cyan]quit[/cyan] - Leave the session"
)


def parse_order(args: list[str]) -> tuple[str, int]:
    """Parse ``SYMBOL QTY`` arguments of a buy or sell command.

    Raises:
        click.UsageError: If the arguments are missing or QTY is not a number.
    """
    if len(args) != 2:
        raise click.UsageError("Usage: buy|sell SYMBOL QTY")
    symbol, qty = args
    try:
        quantity = int(qty)
    except ValueError:
        raise click.UsageError(f"Quantity must be a whole number, got '{qty}'")
    return symbol.upper(), quantity


def parse_ticks(args: list[str]) -> int:
    """Parse the optional step count of the tick command."""
    if not args:
        return 1
    try:
        steps = int(args[0])
    except ValueError:
        raise click.UsageError(f"Tick count must be a whole number, got '{args[0]}'")
    if steps < 0:
        raise click.UsageError("Tick count cannot be negative")
    return steps


def show_notifications(session) -> None:
    """Display pending notifications one at a time."""
    queue = session.notifications
    notification = queue.current
    while notification is not None:
        console.print(notification_panel(notification))
        notification = queue.dismiss()


def handle_command(session, line: str) -> bool:
    """Run one command against the session.

    Args:
        session: The running Session.
        line: Raw command line typed by the player.

    Returns:
        False when the player asked to quit, True otherwise.
    """
    parts = line.split()
    if not parts:
        return True
    name, args = parts[0].lower(), parts[1:]

    if name in ("quit", "exit", "q"):
        return False

    try:
        if name == "help":
            console.print(Panel(HELP_TEXT, title="[bold]Quick Actions[/bold]", border_style="dim"))
        elif name == "market":
            console.print(market_table(session.instruments))
        elif name in ("buy", "sell"):
            symbol, quantity = parse_order(args)
            order = session.buy if name == "buy" else session.sell
            console.print(result_panel(order(symbol, quantity)))
        elif name == "portfolio":
            portfolio = session.portfolio()
            console.print(portfolio_panel(portfolio))
            if portfolio.holdings:
                console.print(holdings_table(portfolio, session.instruments))
            else:
                console.print("[dim]No open positions.[/dim]")
        elif name == "history":
            transactions = session.transactions[: session.config.history_limit]
            if transactions:
                console.print(history_table(transactions))
            else:
                console.print("[dim]No transactions yet.[/dim]")
        elif name == "awards":
            console.print(achievements_table(session.achievements))
        elif name == "level":
            console.print(progression_text(session.progression))
        elif name == "tick":
            steps = parse_ticks(args)
            for _ in range(steps):
                session.tick()
            console.print(f"[dim]Market advanced {steps} tick(s).[/dim]")
        elif name == "reset":
            session.reset()
            console.print("[green]Session reset.[/green]")
        else:
            console.print(error_panel(f"Unknown command '{name}'. Type 'help' for a list."))
    except click.UsageError as e:
        console.print(error_panel(e.message))

    show_notifications(session)
    return True


@click.command()
@click.option(
    "--capital",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Starting cash (overrides the config file).",
)
@click.option(
    "-s", "--seed",
    type=int,
    default=None,
    help="Random seed for a reproducible market.",
)
@click.option(
    "-i", "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between market ticks (overrides the config file).",
)
@click.option(
    "-c", "--config-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file to read instead of ~/.config/stockquest/config.toml.",
)
def play(
    capital: Optional[float],
    seed: Optional[int],
    interval: Optional[float],
    config_file: Optional[Path],
) -> None:
    """Start an interactive trading session.

    Prices move every few seconds while you trade. Type 'help' inside
    the session for the list of commands.

    \b
    Examples:
      stockquest play
      stockquest play --capital 25000 --seed 7
    """
    from stockquest.config import load_config
    from stockquest.errors import StockQuestError
    from stockquest.market import MarketClock
    from stockquest.session import Session

    try:
        settings = load_config(
            config_file,
            initial_capital=str(capital) if capital is not None else None,
            seed=seed,
            tick_interval=interval,
        )
        session = Session(settings)
    except StockQuestError as e:
        console.print(error_panel(str(e)))
        raise SystemExit(1)

    console.print(Panel(
        f"[bold]Welcome to StockQuest![/bold]\n\n"
        f"You have {settings.initial_capital:,.2f} in cash. Prices move every "
        f"{settings.tick_interval:g} seconds.\n"
        f"Type [cyan]help[/cyan] to see what you can do.",
        title="[bold cyan]StockQuest[/bold cyan]",
        border_style="cyan",
    ))

    market_clock = MarketClock(settings.tick_interval)
    market_clock.start()
    try:
        while True:
            try:
                line = click.prompt("stockquest", prompt_suffix="> ", default="", show_default=False)
            except click.Abort:
                break
            for _ in range(market_clock.due_ticks()):
                session.tick()
            if not handle_command(session, line):
                break
    finally:
        market_clock.stop()

    portfolio = session.portfolio()
    console.print(portfolio_panel(portfolio))
    console.print("[dim]Session ended.[/dim]")
