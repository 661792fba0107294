"""Main entry point - runs the API server."""

import logging

import uvicorn

from notus_dx.config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_server(settings: Settings) -> None:
    """Run the webhook API with uvicorn."""
    logger.info("Starting notus-dx...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Notus API: {settings.notus_api_url}")

    uvicorn.run(
        "notus_dx.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings)
    run_server(settings)


if __name__ == "__main__":
    main()
