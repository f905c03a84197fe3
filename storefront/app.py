"""
Storefront application wiring

Loads configuration, sets up logging and yields a ready shopping session.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .state.session import StorefrontSession

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the storefront"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def storefront_session(
    settings: Optional[Settings] = None,
) -> AsyncIterator[StorefrontSession]:
    """Session lifespan: start with empty state, close the API client on exit"""
    if settings is None:
        load_dotenv()
        get_settings.cache_clear()
        settings = get_settings()

    configure_logging(settings.log_level)
    session = StorefrontSession.create(settings)
    logger.info(f"{settings.app_name} session starting up...")
    try:
        yield session
    finally:
        await session.close()
        logger.info(f"{settings.app_name} session shutting down...")
