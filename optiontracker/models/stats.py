"""Result models produced by the analytics engine.

All results are frozen value objects that carry no reference back to
the trades they were computed from.
"""

from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from optiontracker.models.trade import StrategyType

ZERO = Decimal("0")


class RiskTier(str, Enum):
    """How soon a position expires."""

    SAFE = "Safe"
    WATCH = "Watch"
    CRITICAL = "Critical"


class MonthTier(str, Enum):
    """Color tier of a monthly bucket."""

    PROFIT = "profit"
    LOSS = "loss"


class WinRateHeat(str, Enum):
    """Heat level of a group's win rate."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NONE = "none"


class TickerStrategyKey(NamedTuple):
    ticker: str
    strategy: StrategyType


class WeekdayKey(NamedTuple):
    """Day of week, Sunday first (index 0) through Saturday (index 6)."""

    index: int
    label: str


class GroupStats(BaseModel):
    """Win/loss totals of one group of realized trades."""

    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    total_pl: Decimal = Field(default=ZERO)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def total(self) -> int:
        return self.wins + self.losses

    @computed_field
    @property
    def win_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.wins / self.total

    @computed_field
    @property
    def heat(self) -> WinRateHeat:
        rate = self.win_rate
        if rate >= 0.7:
            return WinRateHeat.STRONG
        if rate >= 0.5:
            return WinRateHeat.MODERATE
        if rate >= 0.01:
            return WinRateHeat.WEAK
        return WinRateHeat.NONE

    def add(self, pl: Decimal) -> "GroupStats":
        """Return a copy with one more trade counted; break-even is a win."""
        if pl >= 0:
            return GroupStats(wins=self.wins + 1, losses=self.losses, total_pl=self.total_pl + pl)
        return GroupStats(wins=self.wins, losses=self.losses + 1, total_pl=self.total_pl + pl)


class StrategyStats(BaseModel):
    """Per-strategy slice of the performance overview."""

    total_trades: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    total_pl: Decimal = Field(default=ZERO)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def win_rate(self) -> float:
        if self.total_trades == 0:
            return 0.0
        return self.wins / self.total_trades


class PerformanceStats(BaseModel):
    """Scalar portfolio metrics over a set of realized trades."""

    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    total_pl: Decimal = ZERO
    win_rate: Decimal = ZERO
    avg_win: Decimal = ZERO
    avg_loss: Decimal = ZERO
    expectancy: Decimal = ZERO
    profit_factor: Decimal = ZERO
    max_drawdown: Decimal = ZERO
    largest_win: Decimal = ZERO
    largest_loss: Decimal = ZERO
    avg_days_held: int = 0
    avg_dte: int = 0
    strategy_stats: dict[StrategyType, StrategyStats] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class EquityPoint(BaseModel):
    """Cumulative realized P&L after one trade."""

    date: date_type
    cumulative_pl: Decimal

    model_config = ConfigDict(frozen=True)


class MonthlyBucket(BaseModel):
    """Realized P&L of one calendar month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    pl: Decimal
    tier: MonthTier

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def year_month(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.month:02d}/{self.year % 100:02d}"
