"""Process entry point: applies settings to logging before any use case runs."""

import structlog

from cargo.config import Settings, configure_logging, get_settings

logger = structlog.get_logger(__name__)


def setup_application() -> Settings:
    """
    Configure the process from settings.

    Host applications call this once at startup, before wiring use cases
    to their repositories.

    Returns:
        The settings that were applied
    """
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, log_level=settings.LOG_LEVEL)

    logger.info(
        "application_configured",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )
    return settings


if __name__ == "__main__":
    setup_application()
