"""Tests for expiration risk tiers and the expiration calendar.

**Feature: trade-analytics**
"""

from datetime import date, datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from optiontracker.analytics.risk import (
    classify_risk,
    dominant_tier,
    expirations_by_day,
    risk_calendar,
    upcoming_expirations,
)
from optiontracker.models import RiskTier
from trade_factory import make_trade

NOW = date(2024, 6, 1)


def expiring_in(days: int, **kwargs):
    return make_trade(
        kwargs.pop("pl", None),
        trade_date=NOW - timedelta(days=60),
        expiration_date=NOW + timedelta(days=days),
        **kwargs,
    )


class TestRiskTierBoundaries:
    """
    **Feature: trade-analytics, Property: Risk Tier Boundaries**

    7 days is Critical, 8 and 14 are Watch, 15 is Safe.
    """

    @pytest.mark.parametrize(
        "days,tier",
        [
            (-3, RiskTier.CRITICAL),
            (0, RiskTier.CRITICAL),
            (7, RiskTier.CRITICAL),
            (8, RiskTier.WATCH),
            (14, RiskTier.WATCH),
            (15, RiskTier.SAFE),
            (90, RiskTier.SAFE),
        ],
    )
    def test_boundaries(self, days, tier):
        assert classify_risk(expiring_in(days), NOW) == tier

    def test_closed_trades_are_classified(self):
        assert classify_risk(expiring_in(3, pl=50), NOW) == RiskTier.CRITICAL

    def test_datetime_reference(self):
        assert classify_risk(expiring_in(7), datetime(2024, 6, 1, 18, 30)) == RiskTier.CRITICAL

    @given(days=st.integers(min_value=-30, max_value=365))
    @settings(max_examples=100)
    def test_tier_is_monotonic_in_days(self, days):
        """*For any* expiry, more days left never means a more urgent tier."""
        order = [RiskTier.CRITICAL, RiskTier.WATCH, RiskTier.SAFE]

        earlier = order.index(classify_risk(expiring_in(days), NOW))
        later = order.index(classify_risk(expiring_in(days + 1), NOW))

        assert later >= earlier


class TestDominantTier:
    """Critical outranks Watch, which outranks Safe."""

    def test_priority(self):
        assert dominant_tier([RiskTier.SAFE, RiskTier.CRITICAL, RiskTier.WATCH]) == RiskTier.CRITICAL
        assert dominant_tier([RiskTier.SAFE, RiskTier.WATCH]) == RiskTier.WATCH
        assert dominant_tier([RiskTier.SAFE, RiskTier.SAFE]) == RiskTier.SAFE

    def test_accepts_generator(self):
        assert dominant_tier(t for t in [RiskTier.WATCH]) == RiskTier.WATCH

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            dominant_tier([])


class TestExpirationCalendar:
    """Expiration days grouped and colored for the calendar view."""

    def test_group_by_expiration_day(self):
        a = expiring_in(20, ticker="AAPL")
        b = expiring_in(3, ticker="TSLA")
        c = expiring_in(20, ticker="NVDA")

        days = expirations_by_day([a, b, c])

        assert list(days.keys()) == [NOW + timedelta(days=3), NOW + timedelta(days=20)]
        assert days[NOW + timedelta(days=20)] == [a, c]

    def test_risk_calendar_includes_open_trades(self):
        trades = [expiring_in(5), expiring_in(10, pl=20), expiring_in(30)]

        assert risk_calendar(trades, NOW) == {
            NOW + timedelta(days=5): RiskTier.CRITICAL,
            NOW + timedelta(days=10): RiskTier.WATCH,
            NOW + timedelta(days=30): RiskTier.SAFE,
        }

    def test_empty_calendar(self):
        assert risk_calendar([], NOW) == {}

    def test_upcoming_window_is_inclusive(self):
        trades = [expiring_in(d) for d in (-1, 0, 7, 8, 30, 31)]

        assert len(upcoming_expirations(trades, NOW, 7)) == 2
        assert len(upcoming_expirations(trades, NOW, 30)) == 4
