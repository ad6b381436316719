# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Live album search keyed by the current search term."""

import asyncio
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from rediscover.catalog.base import BaseCatalogClient
from rediscover.core.exceptions import TransportError
from rediscover.models.album import Album

logger = logging.getLogger(__name__)


class SearchCoordinator(QObject):
    """Issue catalog searches as the search term changes.

    Queries are never cancelled. Each one is tagged with the term that issued
    it, and its outcome is applied only if that term is still the active
    term when the query completes. Whatever order responses arrive in, only
    the response for the current term can reach `results`. A failed query
    clears the results whatever its term.
    """

    DEFAULT_RESULT_LIMIT = 5

    results_changed = pyqtSignal(object)  # tuple[Album, ...]

    def __init__(
        self,
        catalog: BaseCatalogClient,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._catalog = catalog
        self.result_limit = result_limit
        self._active_term = ""
        self._results: tuple[Album, ...] = ()
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def active_term(self) -> str:
        """Get the most recently requested search term."""
        return self._active_term

    @property
    def results(self) -> tuple[Album, ...]:
        """Get the albums currently visible for the active term."""
        return self._results

    @property
    def in_flight(self) -> int:
        """Get the number of queries still awaiting a response."""
        return len(self._in_flight)

    def search(self, term: str) -> asyncio.Task[None] | None:
        """Make `term` the active term and request matching albums.

        An empty term clears the results immediately and issues no query.
        Must be called from the running event loop.
        """
        self._active_term = term
        if not term:
            self._set_results(())
            return None

        task = asyncio.get_running_loop().create_task(
            self._run_query(term), name=f"search:{term}"
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait until every query issued so far has completed."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight))

    async def _run_query(self, term: str) -> None:
        try:
            albums = await self._catalog.search_albums(term, self.result_limit)
        except TransportError as e:
            logger.warning("Search request for %r failed: %s", term, e)
            self._set_results(())
            return
        self._apply(term, tuple(albums[: self.result_limit]))

    def _apply(self, term: str, albums: tuple[Album, ...]) -> None:
        if term != self._active_term:
            logger.debug(
                "Dropping results for stale term %r (active term is %r)",
                term,
                self._active_term,
            )
            return
        self._set_results(albums)

    def _set_results(self, albums: tuple[Album, ...]) -> None:
        if albums == self._results:
            return
        self._results = albums
        self.results_changed.emit(albums)
