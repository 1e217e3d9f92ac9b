"""Rates service - today's lodge rates from Little Hotelier."""

from typing import Callable

from src.models.rates import LodgeRates
from src.services.little_hotelier_client import LittleHotelierClient
from src.services.rate_mapper import map_rates
from src.utils.dates import today
from src.utils.logger import get_logger

logger = get_logger(__name__)


class RatesService:
    """
    Fetches today's rates for the configured property and maps them.

    Errors from the client (LittleHotelierError) and the mapper
    (RateMappingError) propagate unchanged; no partial result is returned.
    """

    def __init__(
        self,
        client: LittleHotelierClient,
        date_provider: Callable[[], str] = today,
    ):
        self.client = client
        self.date_provider = date_provider

    async def get_lodge_rates(self) -> LodgeRates:
        """Get today's rate and availability for each accommodation type."""
        logger.info("rates_request_started")

        todays_date = self.date_provider()
        logger.info("rates_date_computed", date=todays_date)

        little_hotelier_rates = await self.client.fetch_rates(todays_date)
        lodge_rates = map_rates(little_hotelier_rates)

        logger.info("rates_mapped", count=len(lodge_rates.rates))
        return lodge_rates
