"""Performance commands for OptionTracker CLI.

Handles the performance overview, grouped breakdowns, the equity
curve, monthly buckets and best/worst trades.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from optiontracker.analytics import (
    MIN_CURVE_POINTS,
    aggregate,
    build_equity_curve,
    by_month,
    by_strategy,
    by_ticker,
    by_ticker_strategy,
    by_weekday,
    calculate_performance,
    filter_by_window,
    max_drawdown,
    monthly_performance,
    overall_stats,
    rank_trades,
    realized_trades,
    sorted_by_key,
    sorted_by_total_pl,
)
from optiontracker.cli.common import (
    as_of_option,
    colored_money,
    console,
    format_money,
    get_config,
    load_snapshot,
    resolve_as_of,
    resolve_window,
    trades_argument,
    window_option,
    window_title,
)
from optiontracker.config import currency_symbol
from optiontracker.models import MonthTier, WinRateHeat

HEAT_STYLES = {
    WinRateHeat.STRONG: "green",
    WinRateHeat.MODERATE: "yellow",
    WinRateHeat.WEAK: "red",
    WinRateHeat.NONE: "dim",
}

GROUPINGS = {
    "ticker-strategy": (by_ticker_strategy, "Ticker & Strategy", lambda k: f"{k.ticker} {k.strategy.value}"),
    "strategy": (by_strategy, "Strategy", lambda k: k.value),
    "weekday": (by_weekday, "Day of Week", lambda k: k.label),
    "ticker": (by_ticker, "Ticker", str),
    "month": (by_month, "Month", lambda k: f"{k[0]:04d}-{k[1]:02d}"),
}


def _closed_in_window(trades_file: Path, window_label: Optional[str], as_of: Optional[datetime]):
    """Load the snapshot and return (config, reference date, realized trades in window)."""
    config = get_config()
    window = resolve_window(window_label, config)
    now = resolve_as_of(as_of)
    trades = load_snapshot(trades_file)
    return config, now, realized_trades(filter_by_window(trades, window, now))


def _no_trades(title: str) -> None:
    console.print(Panel(
        "[dim]No closed trades in this window[/dim]\n\n"
        "[dim]Close some trades to see analytics[/dim]",
        title=f"[bold]{title}[/bold]",
        border_style="dim",
    ))


@click.command()
@trades_argument
@window_option
@as_of_option
def stats(trades_file: Path, window_label: Optional[str], as_of: Optional[datetime]) -> None:
    """Display the performance overview for closed trades.

    Shows total P&L, win rate, average win/loss, expectancy,
    risk metrics and holding-time analysis.

    \b
    Examples:
      optiontracker stats trades.json               # All closed trades
      optiontracker stats trades.json --window 90D  # Last 90 days
    """
    config, now, closed = _closed_in_window(trades_file, window_label, as_of)
    symbol = currency_symbol(config)
    title = f"Performance ({window_title(window_label, config)})"

    if not closed:
        _no_trades(title)
        return

    perf = calculate_performance(closed, now)

    lines = [
        f"[bold]Performance Overview[/bold] (as of {now.isoformat()})\n",
        f"Total P&L:     {colored_money(perf.total_pl, symbol)}",
        f"Win Rate:      {perf.win_rate * 100:.1f}% ({perf.wins}W / {perf.losses}L)",
        f"Avg Win:       [green]{format_money(perf.avg_win, symbol)}[/green]",
        f"Avg Loss:      [red]{format_money(perf.avg_loss, symbol)}[/red]",
        f"Total Trades:  {perf.total_trades}",
        f"Expectancy:    {colored_money(perf.expectancy, symbol)}",
        f"{'─' * 30}",
        "[bold]Risk Metrics[/bold]",
        f"Max Drawdown:  {format_money(perf.max_drawdown, symbol)}",
        f"Profit Factor: {perf.profit_factor:.2f}",
        f"Largest Win:   {format_money(perf.largest_win, symbol)}",
        f"Largest Loss:  {format_money(perf.largest_loss, symbol)}",
        f"{'─' * 30}",
        "[bold]Time Analysis[/bold]",
        f"Avg Days Held:    {perf.avg_days_held}",
        f"Avg DTE at Entry: {perf.avg_dte}",
    ]

    console.print(Panel(
        "\n".join(lines),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
    ))

    table = Table(title="Strategy Performance", show_header=True, header_style="bold cyan")
    table.add_column("Strategy", style="bold")
    table.add_column("Wins", justify="right")
    table.add_column("Win Rate", justify="right")
    table.add_column("P&L", justify="right")

    for strategy, strategy_stats in sorted(perf.strategy_stats.items(), key=lambda item: item[0].value):
        table.add_row(
            strategy.value,
            f"{strategy_stats.wins}/{strategy_stats.total_trades}",
            f"{strategy_stats.win_rate * 100:.0f}%",
            colored_money(strategy_stats.total_pl, symbol),
        )

    console.print(table)


@click.command()
@trades_argument
@window_option
@as_of_option
@click.option(
    "--by",
    "group_by",
    type=click.Choice(list(GROUPINGS.keys())),
    default="ticker-strategy",
    show_default=True,
    help="Grouping key.",
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["key", "pl"]),
    default="key",
    show_default=True,
    help="Order rows by group key or by total P&L.",
)
def breakdown(
    trades_file: Path,
    window_label: Optional[str],
    as_of: Optional[datetime],
    group_by: str,
    sort_by: str,
) -> None:
    """Display win/loss breakdown by ticker, strategy, weekday or month.

    Break-even trades count as wins in this view.

    \b
    Examples:
      optiontracker breakdown trades.json
      optiontracker breakdown trades.json --by weekday
      optiontracker breakdown trades.json --by strategy --sort pl
    """
    config, _, closed = _closed_in_window(trades_file, window_label, as_of)
    symbol = currency_symbol(config)
    key_func, heading, label = GROUPINGS[group_by]
    title = f"By {heading} ({window_title(window_label, config)})"

    groups = aggregate(closed, key_func)
    if not groups:
        _no_trades(title)
        return

    rows = sorted_by_total_pl(groups) if sort_by == "pl" else sorted_by_key(groups)

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(heading, style="bold")
    table.add_column("Wins", justify="right")
    table.add_column("Losses", justify="right")
    table.add_column("Win Rate", justify="right")
    table.add_column("P&L", justify="right")

    for key, group in rows:
        heat = HEAT_STYLES[group.heat]
        table.add_row(
            label(key),
            str(group.wins),
            str(group.losses),
            f"[{heat}]{group.win_rate * 100:.0f}%[/{heat}]",
            colored_money(group.total_pl, symbol),
        )

    console.print(table)

    summary = overall_stats(closed)
    console.print(
        f"\n[bold]Closed Trades:[/bold] {summary.total} | "
        f"[bold]Win Rate:[/bold] {summary.win_rate * 100:.0f}% | "
        f"[bold]Total P&L:[/bold] {colored_money(summary.total_pl, symbol)}"
    )


@click.command()
@trades_argument
@window_option
@as_of_option
def equity(trades_file: Path, window_label: Optional[str], as_of: Optional[datetime]) -> None:
    """Display the equity curve and maximum drawdown.

    \b
    Examples:
      optiontracker equity trades.json
      optiontracker equity trades.json --window YTD
    """
    config, _, closed = _closed_in_window(trades_file, window_label, as_of)
    symbol = currency_symbol(config)
    title = f"Equity Curve ({window_title(window_label, config)})"

    curve = build_equity_curve(closed)
    if len(curve) < MIN_CURVE_POINTS:
        console.print(Panel(
            f"[dim]Need at least {MIN_CURVE_POINTS} trades to show equity curve[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Cumulative P&L", justify="right")

    for point in curve:
        table.add_row(point.date.isoformat(), colored_money(point.cumulative_pl, symbol))

    console.print(table)
    console.print(f"\n[bold]Max Drawdown:[/bold] [red]{format_money(max_drawdown(closed), symbol)}[/red]")


@click.command()
@trades_argument
@window_option
@as_of_option
def monthly(trades_file: Path, window_label: Optional[str], as_of: Optional[datetime]) -> None:
    """Display realized P&L per calendar month, most recent first.

    \b
    Examples:
      optiontracker monthly trades.json
    """
    config, _, closed = _closed_in_window(trades_file, window_label, as_of)
    symbol = currency_symbol(config)
    title = f"Monthly Performance ({window_title(window_label, config)})"

    buckets = monthly_performance(closed)
    if not buckets:
        console.print(Panel(
            "[dim]No monthly data available[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Month", style="bold")
    table.add_column("P&L", justify="right")

    for bucket in buckets:
        color = "green" if bucket.tier == MonthTier.PROFIT else "red"
        table.add_row(bucket.label, f"[{color}]{format_money(bucket.pl, symbol, signed=True)}[/{color}]")

    console.print(table)


@click.command()
@trades_argument
@window_option
@as_of_option
@click.option(
    "--count",
    type=int,
    default=None,
    help="Number of best and worst trades to show (default from config).",
)
def top(
    trades_file: Path,
    window_label: Optional[str],
    as_of: Optional[datetime],
    count: Optional[int],
) -> None:
    """Display the best and worst closed trades.

    \b
    Examples:
      optiontracker top trades.json
      optiontracker top trades.json --count 5
    """
    config, _, closed = _closed_in_window(trades_file, window_label, as_of)
    symbol = currency_symbol(config)
    if count is None:
        count = int(config.get("analytics", {}).get("top_count", 3))
    if count < 1:
        raise click.BadParameter("must be at least 1", param_hint="--count")

    title = f"Top Trades ({window_title(window_label, config)})"
    if not closed:
        _no_trades(title)
        return

    best, worst = rank_trades(closed, count)

    for heading, trades in (("Best Trades", best), ("Worst Trades", worst)):
        table = Table(title=heading, show_header=True, header_style="bold cyan")
        table.add_column("Date", style="dim")
        table.add_column("Ticker", style="bold")
        table.add_column("Strategy")
        table.add_column("P&L", justify="right")

        for trade in trades:
            table.add_row(
                trade.trade_date.isoformat(),
                trade.ticker,
                trade.strategy_type.value,
                colored_money(trade.realized_pl, symbol),
            )

        console.print(table)
