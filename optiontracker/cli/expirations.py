"""Expiration calendar command for OptionTracker CLI."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from optiontracker.analytics import expirations_by_day, risk_calendar, upcoming_expirations
from optiontracker.cli.common import as_of_option, console, load_snapshot, resolve_as_of, trades_argument
from optiontracker.models import RiskTier

RISK_STYLES = {
    RiskTier.CRITICAL: "red",
    RiskTier.WATCH: "yellow",
    RiskTier.SAFE: "green",
}


@click.command()
@trades_argument
@as_of_option
@click.option(
    "--open-only",
    is_flag=True,
    default=False,
    help="Only include open positions.",
)
def calendar(trades_file: Path, as_of: Optional[datetime], open_only: bool) -> None:
    """Display expiration dates colored by risk tier.

    A day is Critical if any trade expiring on it has 7 days or
    less left, Watch if any has 14 days or less, otherwise Safe.

    \b
    Examples:
      optiontracker calendar trades.json
      optiontracker calendar trades.json --open-only --as-of 2024-06-01
    """
    now = resolve_as_of(as_of)
    trades = load_snapshot(trades_file)
    if open_only:
        trades = [t for t in trades if not t.is_closed]

    if not trades:
        console.print(Panel(
            "[dim]No expirations[/dim]",
            title="[bold]Expiration Calendar[/bold]",
            border_style="dim",
        ))
        return

    tiers = risk_calendar(trades, now)
    by_day = expirations_by_day(trades)

    table = Table(
        title=f"Expiration Calendar (as of {now.isoformat()})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Expiry", style="bold")
    table.add_column("Days", justify="right")
    table.add_column("Risk", justify="center")
    table.add_column("Positions")

    for day, day_trades in by_day.items():
        tier = tiers[day]
        style = RISK_STYLES[tier]
        table.add_row(
            day.isoformat(),
            str((day - now).days),
            f"[{style}]{tier.value}[/{style}]",
            ", ".join(
                f"{t.ticker} {t.strategy_type.value}" + (" (closed)" if t.is_closed else "")
                for t in day_trades
            ),
        )

    console.print(table)

    next7 = upcoming_expirations(trades, now, 7)
    next30 = upcoming_expirations(trades, now, 30)
    console.print(
        f"\n[bold]Upcoming[/bold]\n"
        f"  This week:    {len(next7)} expirations\n"
        f"  Next 30 days: {len(next30)} expirations"
    )
