"""Equity curve and drawdown over the chronological realized P&L sequence."""

from decimal import Decimal
from typing import Iterable

from optiontracker.analytics.window import realized_trades
from optiontracker.models import EquityPoint, Trade

# Renderers need at least this many points to draw a line.
MIN_CURVE_POINTS = 2


def chronological(trades: Iterable[Trade]) -> list[Trade]:
    """Realized trades sorted by trade date; same-day trades keep their input order."""
    return sorted(realized_trades(trades), key=lambda t: t.trade_date)


def build_equity_curve(trades: Iterable[Trade]) -> list[EquityPoint]:
    """Calculate the cumulative realized P&L after each trade.

    Emits one point per realized trade, including trades sharing a date.
    """
    cumulative = Decimal("0")
    points = []
    for trade in chronological(trades):
        cumulative += trade.realized_pl
        points.append(EquityPoint(date=trade.trade_date, cumulative_pl=cumulative))
    return points


def max_drawdown(trades: Iterable[Trade]) -> Decimal:
    """Calculate the largest peak-to-trough decline of cumulative P&L.

    The peak starts at zero, so a curve that opens with losses draws down
    from the starting equity. The result is reported as a non-positive
    number to match P&L sign conventions.

    Returns:
        The negated maximum drawdown, or 0 if the curve never declines.
    """
    running_total = Decimal("0")
    peak = Decimal("0")
    max_dd = Decimal("0")

    for trade in chronological(trades):
        running_total += trade.realized_pl
        peak = max(peak, running_total)
        max_dd = max(max_dd, peak - running_total)

    # Subtract rather than negate so no drawdown is 0, not -0.
    return Decimal("0") - max_dd
