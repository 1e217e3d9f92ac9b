"""Lodge rates API routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from src.models.rates import LodgeRates
from src.services.little_hotelier_client import LittleHotelierError
from src.services.rate_mapper import RateMappingError
from src.services.rates_service import RatesService
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

# Service will be injected from main.py
_rates_service: Optional[RatesService] = None


def set_rates_service(service: Optional[RatesService]):
    """Set rates service instance."""
    global _rates_service
    _rates_service = service


def get_rates_service() -> RatesService:
    """Get rates service."""
    if _rates_service is None:
        raise HTTPException(500, "Rates service not initialized")
    return _rates_service


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/hello", response_class=PlainTextResponse, tags=["Health"])
async def hello(name: str = Query("world", description="Who to greet")):
    """Greeting smoke-test route."""
    return f"Hello, {name or 'world'}!"


@router.get("/rates", response_model=LodgeRates, tags=["Rates"])
async def rates():
    """
    Today's rate and availability per accommodation type.

    Returns 502 when Little Hotelier fails or sends an unexpected payload,
    500 when a rate plan has no entry for today.
    """
    service = get_rates_service()

    try:
        return await service.get_lodge_rates()
    except LittleHotelierError as e:
        logger.error("rates_upstream_failed", error_type=type(e).__name__, error=str(e))
        raise HTTPException(502, "Rates are unavailable from the booking system") from e
    except RateMappingError as e:
        logger.error(
            "rates_mapping_failed",
            rate_plan_id=e.rate_plan_id,
            rate_plan_name=e.rate_plan_name,
        )
        raise HTTPException(500, "Rates could not be built for today") from e
