"""Little Hotelier rates API client."""

import httpx
from pydantic import TypeAdapter, ValidationError

from src.models.rates import LittleHotelierRates
from src.utils.logger import get_logger

logger = get_logger(__name__)

_RATES_ADAPTER = TypeAdapter(list[LittleHotelierRates])


# =============================================================================
# Exceptions
# =============================================================================


class LittleHotelierError(Exception):
    """Base exception for Little Hotelier API errors."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class UpstreamTransportError(LittleHotelierError):
    """Network failure or non-success HTTP status."""

    pass


class UpstreamSchemaError(LittleHotelierError):
    """Response body is not the expected JSON shape."""

    pass


class UpstreamEmptyError(LittleHotelierError):
    """Response array held no property."""

    pass


# =============================================================================
# Little Hotelier Client
# =============================================================================


class LittleHotelierClient:
    """
    Async client for the Little Hotelier public rates endpoint.

    Usage:
        async with LittleHotelierClient(base_url) as client:
            rates = await client.fetch_rates("2024-01-01")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Little Hotelier client.

        Args:
            base_url: Property rates URL (e.g., https://apac.littlehotelier.com/api/v1/properties/<slug>/rates.json)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to fake the API in tests
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "LittleHotelierClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client, raise if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with LittleHotelierClient(...)' context."
            )
        return self._client

    def build_url(self, date: str) -> str:
        """Build the single-day rates URL for ``date``."""
        return f"{self.base_url}?start_date={date}&end_date={date}"

    async def fetch_rates(self, date: str) -> LittleHotelierRates:
        """
        Get the property's rates for a single day.

        Args:
            date: Day to query (YYYY-MM-DD), used as both start and end date

        Returns:
            First property in the response

        Raises:
            UpstreamTransportError: Request failed or returned non-2xx
            UpstreamSchemaError: Body is not a list of property rates
            UpstreamEmptyError: Body is an empty list
        """
        url = self.build_url(date)
        logger.info("little_hotelier_request", url=url)

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("little_hotelier_http_error", url=url, status=e.response.status_code)
            raise UpstreamTransportError(
                f"Little Hotelier returned HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error("little_hotelier_transport_error", url=url, error=str(e))
            raise UpstreamTransportError(f"Request to Little Hotelier failed: {e}", url=url) from e

        properties = self._parse(response, url)
        if not properties:
            logger.error("little_hotelier_empty_response", url=url)
            raise UpstreamEmptyError("Little Hotelier returned no properties", url=url)

        rates = properties[0]
        logger.info(
            "little_hotelier_response_received",
            property=rates.name,
            rate_plan_count=len(rates.rate_plans),
        )
        return rates

    def _parse(self, response: httpx.Response, url: str) -> list[LittleHotelierRates]:
        """Validate the response body as a list of property rates."""
        try:
            # Strict: no string-to-int or int-to-bool coercion of upstream values
            return _RATES_ADAPTER.validate_json(response.content, strict=True)
        except ValidationError as e:
            logger.error("little_hotelier_schema_error", url=url, error_count=e.error_count())
            raise UpstreamSchemaError(
                f"Unexpected Little Hotelier response: {e.error_count()} validation error(s)",
                url=url,
                status_code=response.status_code,
            ) from e
