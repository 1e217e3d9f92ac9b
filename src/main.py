"""FastAPI entry point for the Kakapo Lodge rates service."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import router as rates_router, set_rates_service
from src.config import Settings, get_settings
from src.services.little_hotelier_client import LittleHotelierClient
from src.services.rates_service import RatesService
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

VERSION = "1.0.0"


def create_app(
    settings: Settings | None = None,
    client: LittleHotelierClient | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the cached environment settings
        client: Little Hotelier client to use instead of one built from settings

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the Little Hotelier client for the app lifetime."""
        little_hotelier = client or LittleHotelierClient(
            base_url=settings.little_hotelier_base_url,
            timeout=settings.little_hotelier_timeout,
        )
        async with little_hotelier:
            set_rates_service(RatesService(little_hotelier))
            logger.info("rates_service_initialized", base_url=little_hotelier.base_url)
            yield
        set_rates_service(None)
        logger.info("rates_service_closed")

    app = FastAPI(
        title="Kakapo Lodge Rates API",
        description="Today's accommodation rates from Little Hotelier.",
        version=VERSION,
        lifespan=lifespan,
    )

    # CORS for the lodge websites
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness probe; does not call Little Hotelier."""
        return {"status": "ok", "version": VERSION}

    app.include_router(rates_router)
    return app


def run() -> None:
    """Serve the app with uvicorn on the configured address."""
    settings = get_settings()
    setup_logging(level=settings.app.log_level, format_type=settings.app.log_format)

    logger.info("starting_server", host=settings.app.host, port=settings.app.port)
    uvicorn.run(
        create_app(settings),
        host=settings.app.host,
        port=settings.app.port,
        log_level=settings.app.log_level.lower(),
        log_config=None,  # keep the handlers set up by setup_logging
    )


if __name__ == "__main__":
    run()
