# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Subscription entitlement feeds."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Awaitable, Callable

from rediscover.core.exceptions import TransportError
from rediscover.models.subscription import SubscriptionSnapshot

logger = logging.getLogger(__name__)

SubscriptionCheck = Callable[[], Awaitable[SubscriptionSnapshot]]


class BaseSubscriptionMonitor(ABC):
    """An unbounded sequence of entitlement snapshots that can be iterated once."""

    def __init__(self) -> None:
        self._consumed = False

    def updates(self) -> AsyncIterator[SubscriptionSnapshot]:
        """Start the snapshot sequence.

        Raises:
            RuntimeError: If the sequence was already started.
        """
        if self._consumed:
            msg = "Subscription updates can only be iterated once"
            raise RuntimeError(msg)
        self._consumed = True
        return self._updates()

    @abstractmethod
    def _updates(self) -> AsyncIterator[SubscriptionSnapshot]:
        """Yield snapshots in the order they were observed."""


class PollingSubscriptionMonitor(BaseSubscriptionMonitor):
    """Poll an entitlement check and yield each change."""

    def __init__(self, check: SubscriptionCheck, interval_seconds: float = 60.0):
        super().__init__()
        if interval_seconds <= 0:
            msg = "Poll interval must be positive"
            raise ValueError(msg)
        self._check = check
        self.interval_seconds = interval_seconds

    async def _updates(self) -> AsyncIterator[SubscriptionSnapshot]:
        previous: SubscriptionSnapshot | None = None
        while True:
            try:
                snapshot = await self._check()
            except TransportError as e:
                logger.warning("Subscription check failed: %s", e)
            else:
                if snapshot != previous:
                    previous = snapshot
                    yield snapshot
            await asyncio.sleep(self.interval_seconds)
