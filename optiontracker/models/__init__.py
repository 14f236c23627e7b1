"""Data models for OptionTracker."""

from optiontracker.models.trade import StrategyType, Trade
from optiontracker.models.window import TimeWindow
from optiontracker.models.stats import (
    EquityPoint,
    GroupStats,
    MonthlyBucket,
    MonthTier,
    PerformanceStats,
    RiskTier,
    StrategyStats,
    TickerStrategyKey,
    WeekdayKey,
    WinRateHeat,
)

__all__ = [
    "EquityPoint",
    "GroupStats",
    "MonthlyBucket",
    "MonthTier",
    "PerformanceStats",
    "RiskTier",
    "StrategyStats",
    "StrategyType",
    "TickerStrategyKey",
    "TimeWindow",
    "Trade",
    "WeekdayKey",
    "WinRateHeat",
]
