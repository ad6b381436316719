# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Browse screen state: search results, or recent albums when there are none."""

import asyncio

from PyQt6.QtCore import QObject, pyqtSignal

from rediscover.models.album import Album
from rediscover.services.recents import RecentItemsStore
from rediscover.services.search import SearchCoordinator


class BrowseSession(QObject):
    """Combine live search results with the recent albums history."""

    visible_albums_changed = pyqtSignal(object)  # tuple[Album, ...]

    def __init__(
        self,
        search: SearchCoordinator,
        recents: RecentItemsStore,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.search = search
        self.recents = recents
        search.results_changed.connect(self._republish)
        recents.albums_changed.connect(self._republish)

    @property
    def visible_albums(self) -> tuple[Album, ...]:
        """Get the albums the browse screen should list."""
        return self.search.results or self.recents.albums

    @property
    def is_showing_recents(self) -> bool:
        """Check whether the listed albums come from the history."""
        return not self.search.results

    def set_search_term(self, term: str) -> asyncio.Task[None] | None:
        """Forward a new search term to the coordinator."""
        return self.search.search(term.strip())

    def _republish(self, _albums: object = None) -> None:
        self.visible_albums_changed.emit(self.visible_albums)
