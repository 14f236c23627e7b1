"""One-call analytics report for a trade snapshot.

Runs the window filter, then feeds the realized subset to every
calculator. The risk calendar uses the unfiltered input, open trades
included.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict

from optiontracker.analytics.aggregate import (
    aggregate,
    by_strategy,
    by_ticker_strategy,
    by_weekday,
    overall_stats,
    sorted_by_key,
)
from optiontracker.analytics.equity import build_equity_curve
from optiontracker.analytics.monthly import monthly_performance
from optiontracker.analytics.performance import calculate_performance, rank_trades
from optiontracker.analytics.risk import risk_calendar
from optiontracker.analytics.window import as_date, filter_by_window, realized_trades
from optiontracker.models import (
    EquityPoint,
    GroupStats,
    MonthlyBucket,
    PerformanceStats,
    RiskTier,
    StrategyType,
    TickerStrategyKey,
    TimeWindow,
    Trade,
    WeekdayKey,
)


class AnalyticsReport(BaseModel):
    """Every derived view of a trade snapshot."""

    as_of: date
    window: Optional[TimeWindow]
    summary: GroupStats
    performance: PerformanceStats
    by_strategy: list[tuple[StrategyType, GroupStats]]
    by_ticker_strategy: list[tuple[TickerStrategyKey, GroupStats]]
    by_weekday: list[tuple[WeekdayKey, GroupStats]]
    equity_curve: list[EquityPoint]
    max_drawdown: Decimal
    monthly: list[MonthlyBucket]
    best_trades: list[Trade]
    worst_trades: list[Trade]
    risk_calendar: dict[date, RiskTier]

    model_config = ConfigDict(frozen=True)


def build_report(
    trades: Iterable[Trade],
    now: Union[date, datetime],
    window: Optional[TimeWindow] = None,
    top_count: int = 3,
) -> AnalyticsReport:
    """Build the full analytics report.

    Args:
        trades: All trades, open and closed.
        now: Reference date used for windows, days held and risk tiers.
        window: Trade-date window, or None for all trades.
        top_count: Number of best and worst trades to list.
    """
    snapshot = list(trades)
    closed = realized_trades(filter_by_window(snapshot, window, now))
    performance = calculate_performance(closed, now)
    best, worst = rank_trades(closed, top_count)

    return AnalyticsReport(
        as_of=as_date(now),
        window=window,
        summary=overall_stats(closed),
        performance=performance,
        by_strategy=sorted_by_key(aggregate(closed, by_strategy)),
        by_ticker_strategy=sorted_by_key(aggregate(closed, by_ticker_strategy)),
        by_weekday=sorted_by_key(aggregate(closed, by_weekday)),
        equity_curve=build_equity_curve(closed),
        max_drawdown=performance.max_drawdown,
        monthly=monthly_performance(closed),
        best_trades=best,
        worst_trades=worst,
        risk_calendar=risk_calendar(snapshot, now),
    )
