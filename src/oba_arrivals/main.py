"""Main entry point for the OBA arrivals proxy."""

import asyncio
import logging
import sys

import aiohttp

from oba_arrivals.adapters.config import AppConfig
from oba_arrivals.adapters.oba_api import ObaArrivalsRepository
from oba_arrivals.adapters.web import ArrivalsWebAdapter
from oba_arrivals.adapters.web.formatters import LocaleTimeFormatter
from oba_arrivals.application.services import ArrivalsPollService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValueError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)

    if not config.oba_api_key:
        logger.warning("OBA_API_KEY is not set; requests must supply apiKey")

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        arrivals_repo = ObaArrivalsRepository(
            session=session,
            base_url=config.oba_api_base_url,
            timeout_seconds=config.oba_api_timeout,
        )
        poll_service = ArrivalsPollService(arrivals_repo, LocaleTimeFormatter())
        web_adapter = ArrivalsWebAdapter(poll_service, config)

        try:
            await web_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
