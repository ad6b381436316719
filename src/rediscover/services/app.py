# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Application container owning the process-lifetime handles."""

import logging
from collections.abc import AsyncIterable

from sqlalchemy.exc import SQLAlchemyError

from rediscover.catalog.base import BaseCatalogClient
from rediscover.catalog.factory import CatalogClientFactory
from rediscover.config.user import UserConfig
from rediscover.models.album import Album
from rediscover.models.db_manager import DatabaseManager
from rediscover.models.enums import AuthorizationStatus
from rediscover.models.recent_albums import RecentAlbumsRepository
from rediscover.services.album_detail import AlbumDetailSession
from rediscover.services.browse import BrowseSession
from rediscover.services.details import DetailAggregator
from rediscover.services.playback import BasePlayer, PlaybackQueueController
from rediscover.services.recents import RecentItemsStore
from rediscover.services.search import SearchCoordinator
from rediscover.services.subscription import PollingSubscriptionMonitor

logger = logging.getLogger(__name__)


class RediscoverApp:
    """Wire configuration, catalog, persistence and player together.

    The recent albums store is created once here and handed to every
    session, so all screens share the same history.
    """

    def __init__(
        self,
        config: UserConfig | None = None,
        player: BasePlayer | None = None,
        catalog: BaseCatalogClient | None = None,
        db_manager: DatabaseManager | None = None,
    ) -> None:
        self.config = config or UserConfig()
        self.player = player
        self.catalog = catalog or CatalogClientFactory.from_config(self.config)

        self.db_manager: DatabaseManager | None = None
        repository = None
        if self.config.recents.enabled:
            self.db_manager = db_manager or DatabaseManager(
                self.config.recents.database_path
            )
            repository = RecentAlbumsRepository(self.db_manager)

        self.recents = RecentItemsStore(
            capacity=self.config.recents.capacity, repository=repository
        )
        self.search = SearchCoordinator(
            self.catalog, result_limit=self.config.search.result_limit
        )

    async def start(self) -> bool:
        """Open the history database, load recents, and authenticate.

        Returns whether the catalog accepted the configured credentials.
        """
        if self.db_manager is not None and not self.db_manager.is_initialized:
            try:
                self.db_manager.initialize()
            except (SQLAlchemyError, OSError) as e:
                logger.warning("Recent albums database unavailable: %s", e)
        self.recents.load()

        authenticated = await self.catalog.authenticate()
        if not authenticated:
            logger.warning("Could not authenticate with %s", self.catalog.service_name)
        return authenticated

    def browse(self) -> BrowseSession:
        """Create the browse screen session."""
        return BrowseSession(self.search, self.recents)

    def subscription_monitor(self) -> PollingSubscriptionMonitor:
        """Create a fresh entitlement feed for one detail session."""
        return PollingSubscriptionMonitor(
            self.catalog.fetch_subscription_status,
            interval_seconds=self.config.subscription.poll_interval_seconds,
        )

    def album_detail(self, album: Album) -> AlbumDetailSession:
        """Create the detail screen session for `album`."""
        if self.player is None:
            msg = "A player is required to open album details"
            raise RuntimeError(msg)
        return AlbumDetailSession(
            album,
            recents=self.recents,
            details=DetailAggregator(self.catalog),
            controller=PlaybackQueueController(self.player, album),
            monitor=self.subscription_monitor(),
        )

    async def observe_authorization(
        self, statuses: AsyncIterable[AuthorizationStatus]
    ) -> None:
        """Refresh recent albums whenever the user becomes authorized."""
        await self.recents.observe_authorization(statuses, self.catalog)

    async def aclose(self) -> None:
        """Release catalog sessions and the history database."""
        await self.search.wait_idle()
        await self.catalog.cleanup()
        if self.db_manager is not None:
            self.db_manager.close()

    async def __aenter__(self) -> "RediscoverApp":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
