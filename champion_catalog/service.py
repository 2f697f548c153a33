"""Main service class for the Champion Catalog."""

import asyncio
import logging
from typing import Optional

from aiohttp import web

from champion_catalog.config import Config
from champion_catalog.adapters.database import (
    ChampionRepository,
    DatabaseManager,
    UserRepository,
)
from champion_catalog.adapters.http import ChampionCatalogAPI
from champion_catalog.adapters.security import AccessTokenIssuer, PasswordHasher
from champion_catalog.adapters.storage import S3BlobStore
from champion_catalog.application import AuthService, ChampionService


logger = logging.getLogger(__name__)


class ChampionCatalogService:
    """Owns the process-wide clients and the HTTP server.

    The database manager and S3 client are created once at startup and
    passed explicitly into the application services.
    """

    def __init__(
        self,
        config: Config,
        database_manager: Optional[DatabaseManager] = None,
        blob_store: Optional[S3BlobStore] = None,
    ):
        """Initialize the Champion Catalog service.

        Args:
            config: Service configuration
            database_manager: Optional database manager for dependency injection.
                              If not provided, will create one from config.
            blob_store: Optional blob store for dependency injection.
                        If not provided, will create an S3BlobStore from config.
        """
        self.config = config
        self._stopped = asyncio.Event()

        self._database_manager = database_manager
        self._blob_store = blob_store
        self._runner: Optional[web.AppRunner] = None
        self.api: Optional[ChampionCatalogAPI] = None

    async def _initialize_infrastructure(self) -> None:
        if self._database_manager is None:
            self._database_manager = DatabaseManager.from_config(self.config)
        await self._database_manager.initialize()

        if self._blob_store is None:
            self._blob_store = S3BlobStore.from_config(self.config)
        logger.info(f"Using bucket {self._blob_store.bucket} in {self._blob_store.region}")

    def build_api(self) -> ChampionCatalogAPI:
        """Wire the services onto the initialized infrastructure."""
        champion_service = ChampionService(
            ChampionRepository(self._database_manager), self._blob_store
        )
        auth_service = AuthService(
            UserRepository(self._database_manager),
            AccessTokenIssuer(
                self.config.access_token_secret, self.config.access_token_ttl_seconds
            ),
            PasswordHasher(),
        )
        return ChampionCatalogAPI(
            champion_service,
            auth_service,
            client_max_size=self.config.http_client_max_size,
        )

    async def start(self) -> None:
        """Start serving and block until ``request_stop`` or ``stop`` is called."""
        logger.info("Starting Champion Catalog service")

        await self._initialize_infrastructure()
        self.api = self.build_api()

        self._runner = web.AppRunner(self.api.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.config.http_host, self.config.http_port)
        await site.start()

        logger.info(f"HTTP server listening on {self.config.http_host}:{self.config.http_port}")

        await self._stopped.wait()

    def request_stop(self) -> None:
        """Make a running ``start`` return. Safe to call from a signal handler."""
        self._stopped.set()

    async def stop(self) -> None:
        """Stop the HTTP server and release the database engine. Safe to call twice."""
        self._stopped.set()

        runner, self._runner = self._runner, None
        if runner is not None:
            await runner.cleanup()

        if self._database_manager is not None:
            await self._database_manager.close()

        logger.info("Champion Catalog service stopped")
