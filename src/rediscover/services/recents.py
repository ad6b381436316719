# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Bounded, persisted history of recently viewed albums."""

import logging
import threading
from collections.abc import AsyncIterable

from PyQt6.QtCore import QObject, pyqtSignal

from rediscover.catalog.base import BaseCatalogClient
from rediscover.core.exceptions import PersistenceError, TransportError
from rediscover.models.album import Album
from rediscover.models.enums import AuthorizationStatus
from rediscover.models.recent_albums import RecentAlbumsRepository

logger = logging.getLogger(__name__)


class RecentItemsStore(QObject):
    """Recently viewed albums, most recent first.

    One store is shared by every screen for the lifetime of the process.
    Each mutation builds a new tuple and swaps it in under a lock, so readers
    only ever see a complete order. Persistence failures are logged and the
    in-memory list stays authoritative.
    """

    DEFAULT_CAPACITY = 10

    albums_changed = pyqtSignal(object)  # tuple[Album, ...]

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        repository: RecentAlbumsRepository | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if capacity <= 0:
            msg = "Capacity must be positive"
            raise ValueError(msg)
        self.capacity = capacity
        self._repository = repository
        self._albums: tuple[Album, ...] = ()
        self._lock = threading.RLock()

    @property
    def albums(self) -> tuple[Album, ...]:
        """Get the current albums, most recent first."""
        return self._albums

    def load(self) -> None:
        """Replace the in-memory list with the persisted one."""
        if self._repository is None:
            return
        try:
            albums = self._repository.load()
        except PersistenceError as e:
            logger.warning("Starting with empty recent albums: %s", e)
            albums = []
        with self._lock:
            self._swap(tuple(albums[: self.capacity]))
        logger.debug("Loaded %d recent albums", len(self._albums))

    def update(self, album: Album) -> None:
        """Move `album` to the front, evicting the oldest beyond capacity."""
        with self._lock:
            others = tuple(a for a in self._albums if a.key != album.key)
            self._commit((album, *others)[: self.capacity])

    def reset(self) -> None:
        """Forget every recently viewed album."""
        with self._lock:
            self._commit(())

    async def refresh(self, catalog: BaseCatalogClient) -> None:
        """Re-fetch the stored albums from `catalog`, keeping their order.

        Albums the catalog no longer returns are dropped. Albums from other
        catalogs, and albums recorded while the fetch was pending, are left
        alone. On a transport failure nothing changes.
        """
        source = catalog.catalog_source
        with self._lock:
            stored = [a for a in self._albums if a.source == source]
        if not stored:
            return
        try:
            fetched = await catalog.fetch_albums([a.id for a in stored])
        except TransportError as e:
            logger.warning("Could not refresh recent albums: %s", e)
            return

        by_id = {album.id: album for album in fetched}
        stored_ids = {id(album) for album in stored}
        with self._lock:
            refreshed = []
            for album in self._albums:
                if id(album) not in stored_ids:
                    refreshed.append(album)
                elif album.id in by_id:
                    refreshed.append(by_id[album.id])
                else:
                    logger.debug("Dropping recent album %s", album.id)
            self._commit(tuple(refreshed))

    async def observe_authorization(
        self,
        statuses: AsyncIterable[AuthorizationStatus],
        catalog: BaseCatalogClient,
    ) -> None:
        """Refresh from `catalog` each time the user becomes authorized."""
        previous: AuthorizationStatus | None = None
        async for status in statuses:
            if status == AuthorizationStatus.AUTHORIZED and previous != status:
                await self.refresh(catalog)
            previous = status

    def _commit(self, albums: tuple[Album, ...]) -> None:
        """Swap in `albums`, persist, and notify. Caller holds the lock."""
        if albums == self._albums:
            return
        self._swap(albums)
        if self._repository is None:
            return
        try:
            self._repository.replace(albums)
        except PersistenceError as e:
            logger.warning("Recent albums not persisted: %s", e)

    def _swap(self, albums: tuple[Album, ...]) -> None:
        self._albums = albums
        self.albums_changed.emit(albums)
