#!/usr/bin/env python3
"""
Champion Catalog Service - Main entry point

This service exposes a REST API for managing game champions, storing their
images in S3 and their records in PostgreSQL.
"""
import asyncio
import logging
import signal
import sys

from champion_catalog.config import Environment, init_config
from champion_catalog.logging_setup import configure_logging
from champion_catalog.service import ChampionCatalogService


logger = logging.getLogger(__name__)


def run_service():
    """Run the service (called by hupper in worker process)."""
    asyncio.run(main())


def start_with_reloader():
    """Start the service with hot reload using hupper."""
    import hupper

    # hupper.start_reloader returns a reloader object in the monitor process
    # and returns None in the worker process
    reloader = hupper.start_reloader('champion_catalog.main.run_service')

    if reloader:
        logger.info("Hot reload enabled, monitoring file changes...")


async def main():
    """Main entry point for the Champion Catalog service."""
    config = init_config()
    configure_logging(config)

    logger.info("Starting Champion Catalog service")

    service = ChampionCatalogService(config)

    loop = asyncio.get_running_loop()

    def handle_signal(sig):
        logger.info(f"Received signal {sig.name}, shutting down gracefully...")
        service.request_stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle_signal, sig)

    try:
        await service.start()
    except Exception as e:
        logger.error(f"Service failed with error: {e}")
        sys.exit(1)
    finally:
        await service.stop()


def cli():
    """Console script entry point."""
    config = init_config()

    # Enable hot reload in development
    if config.environment == Environment.DEVELOPMENT:
        start_with_reloader()
    else:
        asyncio.run(main())


if __name__ == "__main__":
    cli()
