"""Project Little Hotelier rates onto the lodge rates schema."""

from src.models.rates import LittleHotelierRates, LodgeRate, LodgeRates, RatePlan


class RateMappingError(Exception):
    """A rate plan had no date entry for the queried day."""

    def __init__(self, message: str, rate_plan_id: int | None = None, rate_plan_name: str | None = None):
        super().__init__(message)
        self.rate_plan_id = rate_plan_id
        self.rate_plan_name = rate_plan_name


def map_rate_plan(rate_plan: RatePlan) -> LodgeRate:
    """
    Build a lodge rate from the first date entry of a rate plan.

    Queries cover a single day, so the first entry is the queried date.
    Whether the API can return more than one entry per plan for such a
    query is unverified; only the first is used.

    Raises:
        RateMappingError: The plan has no date entries
    """
    if not rate_plan.rate_plan_dates:
        raise RateMappingError(
            f"Rate plan '{rate_plan.name}' (id={rate_plan.id}) has no dates",
            rate_plan_id=rate_plan.id,
            rate_plan_name=rate_plan.name,
        )

    rate_plan_date = rate_plan.rate_plan_dates[0]
    return LodgeRate(
        accommodation_type=rate_plan.name,
        rate=rate_plan_date.rate,
        num_available=rate_plan_date.available,
    )


def map_rates(little_hotelier_rates: LittleHotelierRates) -> LodgeRates:
    """Map every rate plan of a property, keeping the upstream order."""
    return LodgeRates(
        rates=[map_rate_plan(rate_plan) for rate_plan in little_hotelier_rates.rate_plans]
    )
