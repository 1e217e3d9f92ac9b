"""Lodge rates API module."""

from .routes import router, set_rates_service, get_rates_service

__all__ = [
    "router",
    "set_rates_service",
    "get_rates_service",
]
