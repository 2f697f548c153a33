"""Logging configuration shared by stdlib logging and structlog."""

import logging

import structlog

from champion_catalog.config import Config


def configure_logging(config: Config) -> None:
    """Route stdlib and structlog output through one handler.

    ``LOG_FORMAT=json`` renders one JSON object per line; ``text`` renders
    human readable console output.
    """
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Set boto and access loggers to WARNING to reduce noise
    for name in ("botocore", "boto3", "urllib3", "s3transfer"):
        logging.getLogger(name).setLevel(logging.WARNING)
    if config.is_production():
        logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
