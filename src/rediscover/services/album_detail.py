# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Album detail screen state."""

import asyncio
import contextlib
import logging

from rediscover.models.album import Album
from rediscover.models.track import Track
from rediscover.services.details import AlbumDetails, DetailAggregator
from rediscover.services.playback import PlaybackQueueController
from rediscover.services.recents import RecentItemsStore
from rediscover.services.subscription import BaseSubscriptionMonitor

logger = logging.getLogger(__name__)


class AlbumDetailSession:
    """Everything an album's detail screen observes and drives.

    Opening the session records the album as recently viewed, follows the
    subscription feed in the background, and loads the album's details.
    """

    def __init__(
        self,
        album: Album,
        recents: RecentItemsStore,
        details: DetailAggregator,
        controller: PlaybackQueueController,
        monitor: BaseSubscriptionMonitor | None = None,
    ) -> None:
        self.album = album
        self.recents = recents
        self.details = details
        self.controller = controller
        self._monitor = monitor
        self._subscription_task: asyncio.Task[None] | None = None

    @property
    def is_open(self) -> bool:
        """Check whether the subscription feed is being followed."""
        return self._subscription_task is not None

    async def open(self) -> AlbumDetails:
        """Record the album, start following entitlement, and load details."""
        self.recents.update(self.album)
        if self._monitor is not None and self._subscription_task is None:
            self._subscription_task = asyncio.create_task(
                self.controller.observe_subscription(self._monitor),
                name=f"subscription:{self.album.id}",
            )
        return await self.details.load_details(self.album)

    async def close(self) -> None:
        """Stop following the subscription feed."""
        task, self._subscription_task = self._subscription_task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Closed detail session for album %s", self.album.id)

    async def toggle_playback(self) -> None:
        """Forward a play/pause tap to the controller."""
        await self.controller.toggle()

    async def select_track(self, track: Track) -> None:
        """Play the loaded tracks starting at `track`."""
        await self.controller.select_track(track, self.details.details.tracks)

    async def __aenter__(self) -> "AlbumDetailSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
