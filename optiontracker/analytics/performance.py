"""Portfolio-level performance metrics.

A trade is a win only when its realized P&L is strictly positive; a
break-even trade is counted as a loss. Ratios whose denominator is zero
are reported as 0.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Union

from optiontracker.analytics.equity import max_drawdown
from optiontracker.analytics.window import as_date, realized_trades
from optiontracker.models import PerformanceStats, StrategyStats, StrategyType, Trade

ZERO = Decimal("0")


def _truncating_mean(values: list[int]) -> int:
    """Integer mean rounded toward zero; 0 for an empty list."""
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def _mean(values: list[Decimal]) -> Decimal:
    if not values:
        return ZERO
    return sum(values, ZERO) / len(values)


def calculate_performance(
    trades: Iterable[Trade],
    now: Union[date, datetime],
) -> PerformanceStats:
    """Calculate performance metrics from a list of trades.

    Args:
        trades: Closed trades. Trades without a realized P&L are skipped.
        now: Reference date. Days held are measured from the trade date
            to this date, even for closed trades, since trades carry no
            close date.

    Returns:
        PerformanceStats. Empty input gives all-zero metrics.
    """
    today = as_date(now)
    realized = realized_trades(trades)

    total_pl = ZERO
    wins: list[Decimal] = []
    losses: list[Decimal] = []  # absolute values
    largest_win = ZERO
    largest_loss = ZERO
    strategy_stats: dict[StrategyType, StrategyStats] = {}
    days_held: list[int] = []
    days_to_expiration: list[int] = []

    for trade in realized:
        pl = trade.realized_pl
        total_pl += pl

        if pl > 0:
            wins.append(pl)
            largest_win = max(largest_win, pl)
        else:
            losses.append(abs(pl))
            largest_loss = min(largest_loss, pl)

        current = strategy_stats.get(trade.strategy_type, StrategyStats())
        strategy_stats[trade.strategy_type] = StrategyStats(
            total_trades=current.total_trades + 1,
            wins=current.wins + (1 if pl > 0 else 0),
            total_pl=current.total_pl + pl,
        )

        days_held.append((today - trade.trade_date).days)
        days_to_expiration.append((trade.expiration_date - trade.trade_date).days)

    total_trades = len(realized)
    win_rate = Decimal(len(wins)) / Decimal(total_trades) if total_trades > 0 else ZERO
    avg_win = _mean(wins)
    avg_loss = ZERO - _mean(losses)

    expectancy = ZERO
    if total_trades > 0:
        expectancy = win_rate * avg_win + (1 - win_rate) * avg_loss

    gross_profit = sum(wins, ZERO)
    gross_loss = sum(losses, ZERO)
    profit_factor = gross_profit / gross_loss if gross_loss > 0 else ZERO

    return PerformanceStats(
        total_trades=total_trades,
        wins=len(wins),
        losses=len(losses),
        total_pl=total_pl,
        win_rate=win_rate,
        avg_win=avg_win,
        avg_loss=avg_loss,
        expectancy=expectancy,
        profit_factor=profit_factor,
        max_drawdown=max_drawdown(realized),
        largest_win=largest_win,
        largest_loss=largest_loss,
        avg_days_held=_truncating_mean(days_held),
        avg_dte=_truncating_mean(days_to_expiration),
        strategy_stats=strategy_stats,
    )


def rank_trades(trades: Iterable[Trade], count: int = 3) -> tuple[list[Trade], list[Trade]]:
    """Pick the best and worst realized trades.

    Returns:
        Tuple of (best, worst): the first ``count`` trades by descending
        P&L, and the last ``count`` of that ordering, worst first.
    """
    if count <= 0:
        return [], []
    ordered = sorted(realized_trades(trades), key=lambda t: t.realized_pl, reverse=True)
    best = ordered[:count]
    worst = list(reversed(ordered[-count:]))
    return best, worst
