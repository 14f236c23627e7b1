"""Trade-date window filtering.

Selects the trades whose trade date falls within a lookback window
measured from an injected reference date. The clock is never read here.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from optiontracker.models import TimeWindow, Trade

logger = logging.getLogger(__name__)

# Labels offered by the timeframe pickers; None means unbounded.
PRESET_WINDOWS: dict[str, Optional[TimeWindow]] = {
    "1W": TimeWindow.last(7),
    "30D": TimeWindow.last(30),
    "1M": TimeWindow.last(30),
    "90D": TimeWindow.last(90),
    "3M": TimeWindow.last(90),
    "YTD": TimeWindow.year_to_date(),
    "1Y": TimeWindow.last(365),
    "Max": None,
    "All": None,
}


def as_date(now: Union[date, datetime]) -> date:
    """Reduce a reference instant to its calendar date."""
    if isinstance(now, datetime):
        return now.date()
    return now


def parse_window(label: str) -> Optional[TimeWindow]:
    """Look up a preset window by label (case-insensitive).

    Raises:
        ValueError: If the label is not a known preset.
    """
    for name, window in PRESET_WINDOWS.items():
        if name.lower() == label.strip().lower():
            return window
    raise ValueError(f"Unknown window: {label}. Must be one of {list(PRESET_WINDOWS.keys())}")


def window_cutoff(window: Optional[TimeWindow], now: Union[date, datetime]) -> Optional[date]:
    """Earliest trade date kept by the window, or None when unbounded."""
    if window is None:
        return None
    today = as_date(now)
    if window.ytd:
        return date(today.year, 1, 1)
    return today - timedelta(days=window.days)


def filter_by_window(
    trades: Iterable[Trade],
    window: Optional[TimeWindow],
    now: Union[date, datetime],
) -> list[Trade]:
    """Return the trades with ``trade_date >= cutoff`` in their original order.

    Open and closed trades are both kept; callers decide what to do with
    unrealized ones.
    """
    cutoff = window_cutoff(window, now)
    if cutoff is None:
        return list(trades)
    return [t for t in trades if t.trade_date >= cutoff]


def realized_trades(trades: Iterable[Trade]) -> list[Trade]:
    """Return the closed trades that carry a realized P&L."""
    result = []
    for trade in trades:
        if trade.is_realized:
            result.append(trade)
        elif trade.is_closed:
            logger.debug("Skipping closed trade %s without realized P&L", trade.id)
    return result
