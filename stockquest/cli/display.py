"""Rich renderables shared by the StockQuest commands."""

from decimal import Decimal
from typing import Iterable, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stockquest.achievements import CatalogEntry
from stockquest.events import Notification
from stockquest.models import Achievement, Instrument, Portfolio, Progression, TradeResult, Transaction


def money(value) -> str:
    """Format an amount as dollars."""
    return f"${Decimal(str(value)):,.2f}"


def signed(value, suffix: str = "") -> str:
    """Format a gain/loss with sign and colour markup."""
    color = "green" if value >= 0 else "red"
    sign = "+" if value >= 0 else "-"
    if suffix:
        return f"[{color}]{sign}{abs(float(value)):.2f}{suffix}[/{color}]"
    return f"[{color}]{sign}{money(abs(value))}[/{color}]"


def error_panel(message: str) -> Panel:
    return Panel(
        f"[red]{escape(message)}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    )


def market_table(instruments: Iterable[Instrument]) -> Table:
    table = Table(title="Market", show_header=True, header_style="bold")

    table.add_column("Symbol", style="bold")
    table.add_column("Name")
    table.add_column("Sector")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("Change %", justify="right")

    for instrument in instruments:
        table.add_row(
            instrument.symbol,
            instrument.name,
            instrument.sector,
            money(instrument.price),
            signed(instrument.change),
            signed(instrument.change_percent, "%"),
        )
    return table


def portfolio_panel(portfolio: Portfolio) -> Panel:
    summary_text = (
        f"[bold]Account Summary[/bold]\n\n"
        f"Starting Cash:   {money(portfolio.initial_capital)}\n"
        f"Available Cash:  {money(portfolio.cash)}\n"
        f"Holdings Value:  {money(portfolio.holdings_value)}\n"
        f"Total Value:     {money(portfolio.total_value)}\n"
        f"{'─' * 35}\n"
        f"Gain/Loss:       {signed(portfolio.total_gain_loss)} "
        f"({signed(portfolio.gain_loss_percent, '%')})"
    )
    return Panel(summary_text, title="[bold]Portfolio[/bold]", border_style="cyan")


def holdings_table(portfolio: Portfolio, instruments: Sequence[Instrument]) -> Table:
    prices = {i.symbol: Decimal(str(i.price)) for i in instruments}

    table = Table(title="Holdings", show_header=True, header_style="bold")

    table.add_column("Symbol", style="bold")
    table.add_column("Qty", justify="right")
    table.add_column("Avg Price", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Gain/Loss", justify="right")

    for holding in portfolio.holdings:
        price = prices.get(holding.symbol, Decimal("0"))
        value = price * holding.quantity
        table.add_row(
            holding.symbol,
            str(holding.quantity),
            money(holding.average_price),
            money(price),
            money(value),
            signed(value - holding.cost_basis),
        )
    return table


def history_table(transactions: Sequence[Transaction]) -> Table:
    table = Table(title="Recent Transactions", show_header=True, header_style="bold")

    table.add_column("Time")
    table.add_column("Side", justify="center")
    table.add_column("Symbol", style="bold")
    table.add_column("Qty", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Total", justify="right")

    for txn in transactions:
        side = "[green]BUY[/green]" if txn.side == "buy" else "[red]SELL[/red]"
        table.add_row(
            txn.timestamp.strftime("%H:%M:%S"),
            side,
            txn.symbol,
            str(txn.quantity),
            money(txn.price),
            money(txn.total),
        )
    return table


def achievements_table(achievements: Iterable[Achievement]) -> Table:
    table = Table(title="Achievements", show_header=True, header_style="bold")

    table.add_column("", justify="center")
    table.add_column("Title", style="bold")
    table.add_column("Description")
    table.add_column("Status", justify="right")

    for achievement in achievements:
        if achievement.unlocked:
            status = "[green]Unlocked[/green]"
        elif achievement.target:
            status = f"[yellow]{achievement.progress or 0}/{achievement.target}[/yellow]"
        else:
            status = "[dim]Locked[/dim]"
        table.add_row(achievement.icon, achievement.title, achievement.description, status)
    return table


def catalog_table(catalog: Iterable[CatalogEntry]) -> Table:
    table = Table(title="Achievement Catalog", show_header=True, header_style="bold")

    table.add_column("", justify="center")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Description")

    for entry in catalog:
        table.add_row(entry.icon, entry.id, entry.title, entry.description)
    return table


def progression_text(progression: Progression) -> str:
    filled = progression.level_progress // 5
    bar = "█" * filled + "░" * (20 - filled)
    return (
        f"[bold]Level {progression.level}[/bold]  {bar}  "
        f"[dim]{progression.level_progress}/100 XP ({progression.experience} total)[/dim]"
    )


def result_panel(result: TradeResult) -> Panel:
    if result.success:
        return Panel(
            f"[green]{result.message}[/green]",
            title="[bold green]Success[/bold green]",
            border_style="green",
        )
    return error_panel(result.message)


def notification_panel(notification: Notification) -> Panel:
    return Panel(notification.text, title="[bold magenta]Congratulations![/bold magenta]", border_style="magenta")
