"""structlog configuration."""

import logging

import structlog

from .config import CheckoutSettings


def configure_logging(settings: CheckoutSettings | None = None) -> None:
    """Install the structlog processor chain for the given settings."""
    settings = settings or CheckoutSettings.from_env()

    level = logging.getLevelName(settings.log_level)

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
