"""Pydantic models for Little Hotelier rates and the lodge rates we serve."""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Little Hotelier (upstream) schema
# =============================================================================


class RatePlanDate(BaseModel):
    """Price and availability of a rate plan on one calendar date."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(default=None, ge=0)
    date: str  # YYYY-MM-DD
    rate: int = Field(ge=0, le=65535)
    min_stay: int = Field(ge=0, le=255)
    stop_online_sell: bool
    close_to_arrival: bool
    close_to_departure: bool
    max_stay: int | None = Field(default=None, ge=0, le=255)
    available: int = Field(ge=0, le=255)


class RatePlan(BaseModel):
    """A priced accommodation offering with one entry per date it is sold."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(ge=0)
    name: str
    rate_plan_dates: list[RatePlanDate]


class LittleHotelierRates(BaseModel):
    """Rates for one property, as returned by the rates.json endpoint."""

    model_config = ConfigDict(extra="ignore")

    name: str
    rate_plans: list[RatePlan]


# =============================================================================
# Lodge (served) schema
# =============================================================================


class LodgeRate(BaseModel):
    """Today's rate for one accommodation type."""

    accommodation_type: str
    rate: int
    num_available: int


class LodgeRates(BaseModel):
    """Response body of GET /rates."""

    rates: list[LodgeRate] = Field(default_factory=list)
