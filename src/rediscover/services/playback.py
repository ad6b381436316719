# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Playback queue control over an external player."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from rediscover.core.exceptions import PlaybackError
from rediscover.models.album import Album
from rediscover.models.enums import QueueAssignment, TransportStatus
from rediscover.models.playback import PlaybackQueue, PlaybackQueueState
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track
from rediscover.services.subscription import BaseSubscriptionMonitor

logger = logging.getLogger(__name__)


class BasePlayer(ABC):
    """External player the application hands queues to."""

    @property
    @abstractmethod
    def status(self) -> TransportStatus:
        """Get the player's authoritative transport status."""

    @abstractmethod
    def set_queue(self, queue: PlaybackQueue) -> None:
        """Replace the player's queue."""

    @abstractmethod
    async def play(self) -> None:
        """Start or resume playback.

        Raises:
            PlaybackError: If the player could not start playing.
        """

    @abstractmethod
    def pause(self) -> None:
        """Pause playback."""


class PlaybackQueueController(QObject):
    """Play/pause state machine for one album's detail screen.

    The first play in a session assigns a queue holding the album. Later
    plays resume whatever queue the player has. Selecting a track always
    assigns a new queue of the album's tracks starting at that track.
    """

    state_changed = pyqtSignal(object)  # PlaybackQueueState

    def __init__(
        self, player: BasePlayer, album: Album, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._player = player
        self.album = album
        self._queue: PlaybackQueue | None = None
        self._assignment = QueueAssignment.NONE
        self._subscription: SubscriptionSnapshot | None = None
        self._lock = asyncio.Lock()

    # --------------------
    # Intents
    # --------------------
    async def toggle(self) -> None:
        """Pause if playing; otherwise start or resume playback."""
        async with self._lock:
            if self._player.status == TransportStatus.PLAYING:
                self._player.pause()
                self._publish()
                return

            if self._assignment == QueueAssignment.NONE:
                self._assign(PlaybackQueue.for_album(self.album), QueueAssignment.ALBUM)
            await self._request_play()

    async def select_track(self, track: Track, tracks: Sequence[Track]) -> None:
        """Play `tracks` starting at `track`, replacing any earlier queue."""
        async with self._lock:
            self._assign(
                PlaybackQueue.for_tracks(tracks, starting_at=track),
                QueueAssignment.TRACKS,
            )
            await self._request_play()

    def apply_subscription(self, snapshot: SubscriptionSnapshot) -> None:
        """Replace the latest entitlement snapshot."""
        if snapshot == self._subscription:
            return
        self._subscription = snapshot
        self._publish()

    async def observe_subscription(self, monitor: BaseSubscriptionMonitor) -> None:
        """Apply every snapshot `monitor` yields until it ends or is cancelled."""
        async for snapshot in monitor.updates():
            self.apply_subscription(snapshot)

    def handle_player_status(self, status: TransportStatus) -> None:
        """Republish state after the player reports a status change."""
        logger.debug("Player status changed to %s", status)
        self._publish()

    # --------------------
    # Projections
    # --------------------
    @property
    def is_playing(self) -> bool:
        """Check whether the player is currently playing."""
        return self._player.status == TransportStatus.PLAYING

    @property
    def queue_set(self) -> bool:
        """Check whether a queue was assigned in this session."""
        return self._assignment != QueueAssignment.NONE

    @property
    def subscription(self) -> SubscriptionSnapshot | None:
        """Get the latest entitlement snapshot."""
        return self._subscription

    @property
    def is_play_button_disabled(self) -> bool:
        """Check whether the user cannot play catalog content."""
        snapshot = self._subscription
        return snapshot is None or not snapshot.can_play_catalog_content

    @property
    def should_offer_subscription(self) -> bool:
        """Check whether a subscription offer should be shown."""
        snapshot = self._subscription
        return snapshot is not None and snapshot.can_become_subscriber

    @property
    def play_button_title(self) -> str:
        """Get the play/pause control title."""
        return "Pause" if self.is_playing else "Play"

    @property
    def state(self) -> PlaybackQueueState:
        """Get a snapshot of the controller and player state."""
        return PlaybackQueueState(
            queue=self._queue,
            queue_assignment=self._assignment,
            transport_status=self._player.status,
            subscription=self._subscription,
        )

    # --------------------
    # Internal helpers
    # --------------------
    def _assign(self, queue: PlaybackQueue, assignment: QueueAssignment) -> None:
        self._player.set_queue(queue)
        self._queue = queue
        self._assignment = assignment
        logger.debug(
            "Assigned %s queue with %d entries", assignment, len(queue.entries)
        )

    async def _request_play(self) -> None:
        try:
            await self._player.play()
        except PlaybackError as e:
            logger.warning("Player failed to start playback: %s", e)
        self._publish()

    def _publish(self) -> None:
        self.state_changed.emit(self.state)
