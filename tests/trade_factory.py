"""Trade builders shared by the test modules."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from hypothesis import strategies as st

from optiontracker.models import StrategyType, Trade

AS_OF = date(2024, 6, 30)


def make_trade(
    pl: Optional[str | int | Decimal] = None,
    trade_date: date = date(2024, 6, 3),
    expiration_date: Optional[date] = None,
    ticker: str = "AAPL",
    strategy: StrategyType = StrategyType.COVERED_CALL,
    closed: Optional[bool] = None,
) -> Trade:
    """Build a trade; closed defaults to whether a P&L was given."""
    return Trade(
        ticker=ticker,
        strategy_type=strategy,
        trade_date=trade_date,
        expiration_date=expiration_date or trade_date + timedelta(days=30),
        premium_per_contract=Decimal("1.50"),
        quantity=1,
        is_closed=(pl is not None) if closed is None else closed,
        realized_pl=None if pl is None else Decimal(str(pl)),
    )


def sequence(pls: list, start: date = date(2024, 1, 2)) -> list[Trade]:
    """One closed trade per P&L, on consecutive days."""
    return [make_trade(pl, trade_date=start + timedelta(days=i)) for i, pl in enumerate(pls)]


pl_strategy = st.decimals(
    min_value=Decimal("-10000"),
    max_value=Decimal("10000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)


@st.composite
def trade_strategy(draw, realized: Optional[bool] = None):
    """Generate valid Trade objects for testing.

    Args:
        realized: Force a realized (True) or unrealized (False) trade;
            None draws open, closed and closed-without-P&L trades.
    """
    trade_date = draw(st.dates(min_value=date(2020, 1, 1), max_value=date(2025, 12, 31)))
    if realized is None:
        is_closed = draw(st.booleans())
        pl = draw(st.one_of(st.none(), pl_strategy)) if is_closed else None
    elif realized:
        is_closed, pl = True, draw(pl_strategy)
    else:
        is_closed, pl = draw(st.booleans()), None

    return Trade(
        ticker=draw(st.sampled_from(["AAPL", "TSLA", "NVDA", "SPY", "MSFT"])),
        strategy_type=draw(st.sampled_from(list(StrategyType))),
        trade_date=trade_date,
        expiration_date=trade_date + timedelta(days=draw(st.integers(min_value=1, max_value=120))),
        premium_per_contract=draw(
            st.decimals(min_value=Decimal("0.01"), max_value=Decimal("50"), places=2)
        ),
        quantity=draw(st.integers(min_value=1, max_value=20)),
        is_closed=is_closed,
        realized_pl=pl,
    )
