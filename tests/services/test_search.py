# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the search coordinator."""

import asyncio

import pytest

from rediscover.core.exceptions import TransportError
from rediscover.services.search import SearchCoordinator


@pytest.fixture
def coordinator(fake_catalog):
    """Create a coordinator over the fake catalog."""
    return SearchCoordinator(fake_catalog, result_limit=5)


class TestSearchResults:
    """Test results are applied for the active term."""

    @pytest.mark.asyncio
    async def test_results_in_catalog_order(
        self, coordinator, fake_catalog, make_album
    ):
        """Searching applies the catalog's albums in response order."""
        albums = [make_album(f"abbey{i}") for i in range(5)]
        fake_catalog.search_responses["Abbey"] = albums
        emitted = []
        coordinator.results_changed.connect(emitted.append)

        await coordinator.search("Abbey")

        assert coordinator.results == tuple(albums)
        assert emitted == [tuple(albums)]
        assert fake_catalog.calls == [("search_albums", "Abbey", 5)]

    @pytest.mark.asyncio
    async def test_results_truncated_to_limit(self, fake_catalog, make_album):
        """No more than the configured limit of albums becomes visible."""
        fake_catalog.search_responses["a"] = [make_album(str(i)) for i in range(8)]
        coordinator = SearchCoordinator(fake_catalog, result_limit=3)

        await coordinator.search("a")

        assert [a.id for a in coordinator.results] == ["0", "1", "2"]

    def test_empty_term_clears_synchronously(self, coordinator):
        """An empty term clears results without issuing a query."""
        assert coordinator.search("") is None
        assert coordinator.results == ()
        assert coordinator.active_term == ""
        assert coordinator.in_flight == 0


class TestStaleResponses:
    """Test responses for superseded terms are dropped."""

    @pytest.mark.asyncio
    async def test_late_response_for_old_term_is_dropped(
        self, coordinator, fake_catalog, make_album
    ):
        """A slow query for "ab" cannot overwrite results for "abb"."""
        old, new = make_album("old"), make_album("new")
        fake_catalog.search_responses.update({"ab": [old], "abb": [new]})
        gate = asyncio.Event()
        fake_catalog.search_gates["ab"] = gate

        slow = coordinator.search("ab")
        fast = coordinator.search("abb")
        await fast
        assert coordinator.results == (new,)

        gate.set()
        await slow
        assert coordinator.results == (new,)
        assert coordinator.active_term == "abb"

    @pytest.mark.asyncio
    async def test_clearing_term_discards_pending_query(
        self, coordinator, fake_catalog, make_album
    ):
        """A query still in flight when the term is cleared never applies."""
        fake_catalog.search_responses["ab"] = [make_album()]
        gate = asyncio.Event()
        fake_catalog.search_gates["ab"] = gate

        pending = coordinator.search("ab")
        assert coordinator.in_flight == 1
        coordinator.search("")
        gate.set()
        await pending

        assert coordinator.results == ()
        assert coordinator.in_flight == 0

    @pytest.mark.asyncio
    async def test_wait_idle_settles_all_queries(
        self, coordinator, fake_catalog, make_album
    ):
        """wait_idle returns once every issued query has completed."""
        fake_catalog.search_responses["b"] = [make_album("b")]
        coordinator.search("a")
        coordinator.search("b")

        await coordinator.wait_idle()

        assert coordinator.in_flight == 0
        assert [a.id for a in coordinator.results] == ["b"]


class TestSearchFailures:
    """Test transport failures reset the visible results."""

    @pytest.mark.asyncio
    async def test_failure_resets_results(self, coordinator, fake_catalog, make_album):
        """A failed search for the active term empties the results."""
        fake_catalog.search_responses["good"] = [make_album()]
        fake_catalog.search_responses["bad"] = TransportError("boom")

        await coordinator.search("good")
        assert len(coordinator.results) == 1
        await coordinator.search("bad")

        assert coordinator.results == ()

    @pytest.mark.asyncio
    async def test_stale_failure_also_resets_results(
        self, coordinator, fake_catalog, make_album
    ):
        """Any failed query empties the results, even one for an older term."""
        fake_catalog.search_responses["bad"] = TransportError("boom")
        fake_catalog.search_responses["good"] = [make_album("current")]
        gate = asyncio.Event()
        fake_catalog.search_gates["bad"] = gate
        emitted = []
        coordinator.results_changed.connect(emitted.append)

        failing = coordinator.search("bad")
        await coordinator.search("good")
        assert len(coordinator.results) == 1
        gate.set()
        await failing

        assert coordinator.results == ()
        assert emitted[-1] == ()
        assert coordinator.active_term == "good"
