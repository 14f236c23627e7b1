"""TimeWindow data model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TimeWindow(BaseModel):
    """A trade-date lookback: a fixed number of days or year-to-date.

    Unbounded windows are represented by ``None`` rather than an instance.
    """

    days: Optional[int] = Field(default=None, ge=0, description="Lookback in days")
    ytd: bool = Field(default=False, description="Year-to-date window")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _exactly_one(self) -> "TimeWindow":
        if (self.days is None) == (not self.ytd):
            raise ValueError("TimeWindow needs exactly one of days or ytd")
        return self

    @classmethod
    def last(cls, days: int) -> "TimeWindow":
        return cls(days=days)

    @classmethod
    def year_to_date(cls) -> "TimeWindow":
        return cls(ytd=True)
