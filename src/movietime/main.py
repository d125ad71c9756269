"""Composition root: one HTTP client, one catalog client, one favorites store."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from movietime import __version__
from movietime.config import Settings, get_settings
from movietime.database import create_engine, create_session_factory, init_db
from movietime.services.favorites import FavoritesStore
from movietime.services.storage import SQLKeyValueStore
from movietime.services.tmdb import TMDBClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )


@dataclass
class MovieTimeServices:
    """Services shared by the consuming UI code."""

    settings: Settings
    http_client: httpx.AsyncClient
    catalog: TMDBClient
    favorites: FavoritesStore


@asynccontextmanager
async def open_services(settings: Settings | None = None) -> AsyncIterator[MovieTimeServices]:
    """Build the shared services and release them on exit."""
    settings = settings or get_settings()
    configure_logging(settings.debug)

    connection = settings.catalog_connection()

    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info(
        "TMDB API: %s (%s)",
        "direct, authenticated" if connection.authenticated else "via proxy",
        connection.base_url,
    )

    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    engine = create_engine(settings.database_url, echo=settings.debug)
    http_client: httpx.AsyncClient | None = None
    try:
        await init_db(engine)

        http_client = httpx.AsyncClient(
            base_url=connection.base_url,
            timeout=settings.request_timeout,
            headers=connection.headers,
        )
        services = MovieTimeServices(
            settings=settings,
            http_client=http_client,
            catalog=TMDBClient(
                connection=connection, timeout=settings.request_timeout, http_client=http_client
            ),
            favorites=FavoritesStore(
                SQLKeyValueStore(create_session_factory(engine)),
                key=settings.favorites_key,
            ),
        )
        logger.info("Services ready")

        yield services
    finally:
        # Shutdown, also reached when setup fails
        logger.info("Shutting down")
        if http_client is not None:
            await http_client.aclose()
        await engine.dispose()
