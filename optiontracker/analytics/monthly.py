"""Monthly realized P&L buckets."""

from decimal import Decimal
from typing import Iterable

from optiontracker.analytics.window import realized_trades
from optiontracker.models import MonthlyBucket, MonthTier, Trade


def month_tier(pl: Decimal) -> MonthTier:
    """Break-even months count as profit."""
    return MonthTier.PROFIT if pl >= 0 else MonthTier.LOSS


def monthly_performance(trades: Iterable[Trade]) -> list[MonthlyBucket]:
    """Sum realized P&L per calendar month of the trade date.

    Returns:
        One bucket per month that has realized trades, most recent first.
    """
    totals: dict[tuple[int, int], Decimal] = {}
    for trade in realized_trades(trades):
        key = (trade.trade_date.year, trade.trade_date.month)
        totals[key] = totals.get(key, Decimal("0")) + trade.realized_pl

    return [
        MonthlyBucket(year=year, month=month, pl=pl, tier=month_tier(pl))
        for (year, month), pl in sorted(totals.items(), reverse=True)
    ]
