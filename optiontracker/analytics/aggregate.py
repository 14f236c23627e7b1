"""Grouped win/loss aggregation.

Trades are grouped by an arbitrary key function and each group is reduced
to a GroupStats. A break-even trade (P&L of exactly zero) counts as a win
here, unlike the performance overview which requires a strictly positive
P&L.
"""

from typing import Callable, Hashable, Iterable, TypeVar

from optiontracker.analytics.window import realized_trades
from optiontracker.models import GroupStats, StrategyType, TickerStrategyKey, Trade, WeekdayKey

K = TypeVar("K", bound=Hashable)

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def by_ticker(trade: Trade) -> str:
    return trade.ticker


def by_strategy(trade: Trade) -> StrategyType:
    return trade.strategy_type


def by_ticker_strategy(trade: Trade) -> TickerStrategyKey:
    return TickerStrategyKey(trade.ticker, trade.strategy_type)


def by_weekday(trade: Trade) -> WeekdayKey:
    # isoweekday: Monday=1 .. Sunday=7
    index = trade.trade_date.isoweekday() % 7
    return WeekdayKey(index, WEEKDAY_LABELS[index])


def by_month(trade: Trade) -> tuple[int, int]:
    return (trade.trade_date.year, trade.trade_date.month)


def aggregate(trades: Iterable[Trade], key: Callable[[Trade], K]) -> dict[K, GroupStats]:
    """Group realized trades by ``key`` and total wins, losses and P&L.

    Args:
        trades: Trades to aggregate. Trades without a realized P&L are skipped.
        key: Function mapping a trade to its group key.

    Returns:
        Mapping of group key to GroupStats. Empty input gives an empty dict.
    """
    groups: dict[K, GroupStats] = {}
    for trade in realized_trades(trades):
        group_key = key(trade)
        stats = groups.get(group_key, GroupStats())
        groups[group_key] = stats.add(trade.realized_pl)
    return groups


def overall_stats(trades: Iterable[Trade]) -> GroupStats:
    """Win/loss totals over every realized trade, using the same rule as aggregate()."""
    return aggregate(trades, lambda _: None).get(None, GroupStats())


def sorted_by_key(groups: dict[K, GroupStats]) -> list[tuple[K, GroupStats]]:
    """Order groups by their key, ascending."""
    return sorted(groups.items(), key=lambda item: item[0])


def sorted_by_total_pl(groups: dict[K, GroupStats]) -> list[tuple[K, GroupStats]]:
    """Order groups by total P&L, highest first; ties fall back to the key."""
    return sorted(sorted_by_key(groups), key=lambda item: item[1].total_pl, reverse=True)
