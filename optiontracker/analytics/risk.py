"""Expiration risk tiers for calendar coloring.

Risk is based purely on days until expiration, so open and closed
trades can both be classified.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Union

from optiontracker.analytics.window import as_date
from optiontracker.models import RiskTier, Trade

CRITICAL_DAYS = 7
WATCH_DAYS = 14

# Highest priority first.
_TIER_PRIORITY = (RiskTier.CRITICAL, RiskTier.WATCH, RiskTier.SAFE)


def days_to_expiry(trade: Trade, now: Union[date, datetime]) -> int:
    return (trade.expiration_date - as_date(now)).days


def classify_risk(trade: Trade, now: Union[date, datetime]) -> RiskTier:
    """Classify a trade as Critical (<= 7 days), Watch (<= 14 days) or Safe."""
    remaining = days_to_expiry(trade, now)
    if remaining <= CRITICAL_DAYS:
        return RiskTier.CRITICAL
    if remaining <= WATCH_DAYS:
        return RiskTier.WATCH
    return RiskTier.SAFE


def dominant_tier(tiers: Iterable[RiskTier]) -> RiskTier:
    """Reduce tiers to the most urgent one.

    Raises:
        ValueError: If no tiers are given.
    """
    seen = set(tiers)
    if not seen:
        raise ValueError("Cannot reduce an empty set of risk tiers")
    for tier in _TIER_PRIORITY:
        if tier in seen:
            return tier
    raise ValueError(f"Unknown risk tiers: {seen}")


def expirations_by_day(trades: Iterable[Trade]) -> dict[date, list[Trade]]:
    """Group trades by expiration date, earliest date first."""
    days: dict[date, list[Trade]] = {}
    for trade in trades:
        days.setdefault(trade.expiration_date, []).append(trade)
    return dict(sorted(days.items()))


def risk_calendar(trades: Iterable[Trade], now: Union[date, datetime]) -> dict[date, RiskTier]:
    """Map each expiration date to the dominant tier of the trades expiring that day."""
    return {
        day: dominant_tier(classify_risk(t, now) for t in day_trades)
        for day, day_trades in expirations_by_day(trades).items()
    }


def upcoming_expirations(
    trades: Iterable[Trade],
    now: Union[date, datetime],
    days: int,
) -> list[Trade]:
    """Trades expiring between ``now`` and ``now + days``, both inclusive."""
    today = as_date(now)
    horizon = today + timedelta(days=days)
    return [t for t in trades if today <= t.expiration_date <= horizon]
