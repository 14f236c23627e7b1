"""Trade data model."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CONTRACT_MULTIPLIER = 100


class StrategyType(str, Enum):
    """Option strategy of a trade."""

    CALL = "Call"
    PUT = "Put"
    COVERED_CALL = "Covered Call"
    CASH_SECURED_PUT = "Cash-Secured Put"


class Trade(BaseModel):
    """Represents an option trade as recorded in a client's journal."""

    id: str = Field(default_factory=lambda: uuid4().hex, description="Opaque trade ID")
    ticker: str = Field(..., min_length=1, description="Underlying symbol")
    strategy_type: StrategyType = Field(..., alias="strategyType", description="Option strategy")
    trade_date: date = Field(..., alias="tradeDate", description="Date the position was opened")
    expiration_date: date = Field(..., alias="expirationDate", description="Option expiration date")
    premium_per_contract: Decimal = Field(
        ..., gt=0, alias="premiumPerContract", description="Premium per contract"
    )
    quantity: int = Field(..., gt=0, description="Number of contracts")
    total_premium: Optional[Decimal] = Field(
        default=None, alias="totalPremium", description="Premium * 100 * quantity"
    )
    is_closed: bool = Field(default=False, alias="isClosed", description="Position closed flag")
    realized_pl: Optional[Decimal] = Field(
        default=None, alias="realizedPL", description="Realized P&L, set once closed"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("ticker")
    @classmethod
    def _upper_ticker(cls, value: str) -> str:
        return value.strip().upper()

    @model_validator(mode="after")
    def _default_total_premium(self) -> "Trade":
        if self.total_premium is None:
            total = self.premium_per_contract * CONTRACT_MULTIPLIER * self.quantity
            # Frozen model, so assign through object.__setattr__.
            object.__setattr__(self, "total_premium", total)
        return self

    @property
    def is_realized(self) -> bool:
        """True when the trade is closed and carries a realized P&L."""
        return self.is_closed and self.realized_pl is not None
