"""Trade performance analytics engine.

Pure functions over immutable trade snapshots. The reference date is
always passed in; nothing here reads the clock.
"""

from optiontracker.analytics.aggregate import (
    aggregate,
    by_month,
    by_strategy,
    by_ticker,
    by_ticker_strategy,
    by_weekday,
    overall_stats,
    sorted_by_key,
    sorted_by_total_pl,
)
from optiontracker.analytics.equity import MIN_CURVE_POINTS, build_equity_curve, max_drawdown
from optiontracker.analytics.monthly import monthly_performance
from optiontracker.analytics.performance import calculate_performance, rank_trades
from optiontracker.analytics.report import AnalyticsReport, build_report
from optiontracker.analytics.risk import (
    classify_risk,
    dominant_tier,
    expirations_by_day,
    risk_calendar,
    upcoming_expirations,
)
from optiontracker.analytics.window import (
    PRESET_WINDOWS,
    filter_by_window,
    parse_window,
    realized_trades,
)

__all__ = [
    "AnalyticsReport",
    "MIN_CURVE_POINTS",
    "PRESET_WINDOWS",
    "aggregate",
    "build_equity_curve",
    "build_report",
    "by_month",
    "by_strategy",
    "by_ticker",
    "by_ticker_strategy",
    "by_weekday",
    "calculate_performance",
    "classify_risk",
    "dominant_tier",
    "expirations_by_day",
    "filter_by_window",
    "max_drawdown",
    "monthly_performance",
    "overall_stats",
    "parse_window",
    "rank_trades",
    "realized_trades",
    "risk_calendar",
    "sorted_by_key",
    "sorted_by_total_pl",
    "upcoming_expirations",
]
