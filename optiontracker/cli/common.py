"""Shared helpers for OptionTracker commands."""

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from optiontracker.analytics.window import parse_window
from optiontracker.config import load_config
from optiontracker.loader import load_trades
from optiontracker.models import TimeWindow, Trade

console = Console()


def trades_argument(func):
    """Positional path to the JSON trade snapshot."""
    return click.argument(
        "trades_file",
        type=click.Path(dir_okay=False, path_type=Path),
    )(func)


def as_of_option(func):
    return click.option(
        "--as-of",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Reference date (YYYY-MM-DD). Defaults to today.",
    )(func)


def window_option(func):
    return click.option(
        "--window",
        "window_label",
        type=str,
        default=None,
        help="Trade-date window: 1W, 30D, 1M, 90D, 3M, YTD, 1Y, Max.",
    )(func)


def show_error(title: str, message: str) -> None:
    """Print an error panel."""
    console.print(Panel(
        message,
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def load_snapshot(trades_file: Path) -> list[Trade]:
    """Load trades, exiting with status 1 on failure."""
    try:
        return load_trades(trades_file)
    except FileNotFoundError:
        show_error("Error", f"[red]Trade file not found:[/red] {trades_file}")
        raise SystemExit(1)
    except ValueError as e:
        show_error("Error", f"[red]Failed to load trades from {trades_file}:[/red]\n\n{str(e)}")
        raise SystemExit(1)


def resolve_as_of(as_of: Optional[datetime]) -> date:
    """Reference date for a command; the only place the clock is read."""
    if as_of is None:
        return date.today()
    return as_of.date()


def resolve_window(window_label: Optional[str], config: dict) -> Optional[TimeWindow]:
    label = window_label or config.get("analytics", {}).get("default_window", "Max")
    try:
        return parse_window(label)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--window")


def get_config() -> dict:
    """Lazily load configuration."""
    return load_config()


def format_money(value: Decimal, symbol: str, signed: bool = False) -> str:
    """Format an amount like -$1,234.50 (or +$12.00 when signed)."""
    if value < 0:
        sign = "-"
    elif signed:
        sign = "+"
    else:
        sign = ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def colored_money(value: Decimal, symbol: str, signed: bool = True) -> str:
    color = "green" if value >= 0 else "red"
    return f"[{color}]{format_money(value, symbol, signed)}[/{color}]"


def window_title(window_label: Optional[str], config: dict) -> str:
    return window_label or config.get("analytics", {}).get("default_window", "Max")
