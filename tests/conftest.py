# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Global pytest configuration and shared fakes for rediscover tests."""

import asyncio
import tempfile
from collections.abc import AsyncIterator, Collection, Sequence
from pathlib import Path

import pytest

from rediscover.catalog.base import BaseCatalogClient
from rediscover.core.exceptions import PlaybackError, TransportError
from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.db_manager import DatabaseManager
from rediscover.models.enums import CatalogSource, Relationship, TransportStatus
from rediscover.models.playback import PlaybackQueue
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track
from rediscover.services.playback import BasePlayer
from rediscover.services.subscription import BaseSubscriptionMonitor

# Configure pytest-asyncio for all async tests
pytest_plugins = ["pytest_asyncio"]


def pytest_configure(config):
    """Configure pytest with asyncio markers."""
    config.addinivalue_line("markers", "asyncio: mark test as async")


# Note: Async tests should be manually marked with @pytest.mark.asyncio


class FakeCatalogClient(BaseCatalogClient):
    """In-memory catalog whose responses are set up by each test.

    A search for a term listed in `search_gates` (or an album fetch for an id
    in `album_gates`) waits until the gate is set, so tests control the order
    in which concurrent requests complete.
    """

    def __init__(self, source: CatalogSource = CatalogSource.APPLE_MUSIC):
        super().__init__()
        self._source = source
        self.search_responses: dict[str, list[Album] | Exception] = {}
        self.search_gates: dict[str, asyncio.Event] = {}
        self.album_gates: dict[str, asyncio.Event] = {}
        self.fetch_albums_gate: asyncio.Event | None = None
        self.albums: dict[str, Album] = {}
        self.artists: dict[str, Artist] = {}
        self.failing: set[str] = set()
        self.subscription = SubscriptionSnapshot(
            can_play_catalog_content=True, can_become_subscriber=False
        )
        self.calls: list[tuple] = []
        self.cleaned_up = False

    @property
    def service_name(self) -> str:
        return "Fake"

    @property
    def catalog_source(self) -> CatalogSource:
        return self._source

    async def authenticate(self) -> bool:
        self._authenticated = "authenticate" not in self.failing
        return self._authenticated

    async def search_albums(self, term: str, limit: int) -> list[Album]:
        self.calls.append(("search_albums", term, limit))
        gate = self.search_gates.get(term)
        if gate is not None:
            await gate.wait()
        response = self.search_responses.get(term, [])
        if isinstance(response, Exception):
            raise response
        return list(response)[:limit]

    async def fetch_album(
        self, album: Album, relationships: Collection[Relationship]
    ) -> Album:
        self.calls.append(("fetch_album", album.id, frozenset(relationships)))
        gate = self.album_gates.get(album.id)
        if gate is not None:
            await gate.wait()
        self._maybe_fail("fetch_album")
        return self.albums.get(album.id, album)

    async def fetch_artist(
        self, artist: Artist, relationships: Collection[Relationship]
    ) -> Artist:
        self.calls.append(("fetch_artist", artist.id, frozenset(relationships)))
        self._maybe_fail("fetch_artist")
        return self.artists.get(artist.id, artist)

    async def fetch_albums(self, album_ids: Sequence[str]) -> list[Album]:
        self.calls.append(("fetch_albums", tuple(album_ids)))
        if self.fetch_albums_gate is not None:
            await self.fetch_albums_gate.wait()
        self._maybe_fail("fetch_albums")
        return [self.albums[i] for i in album_ids if i in self.albums]

    async def fetch_subscription_status(self) -> SubscriptionSnapshot:
        self._maybe_fail("fetch_subscription_status")
        return self.subscription

    async def cleanup(self) -> None:
        self.cleaned_up = True

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            msg = f"{operation} failed"
            raise TransportError(msg, status_code=500)


class FakePlayer(BasePlayer):
    """Player that records queue assignments and play/pause requests."""

    def __init__(self) -> None:
        self._status = TransportStatus.IDLE
        self.queues: list[PlaybackQueue] = []
        self.play_calls = 0
        self.pause_calls = 0
        self.fail_play = False

    @property
    def status(self) -> TransportStatus:
        return self._status

    def set_queue(self, queue: PlaybackQueue) -> None:
        self.queues.append(queue)

    async def play(self) -> None:
        self.play_calls += 1
        if self.fail_play:
            msg = "Playback refused"
            raise PlaybackError(msg)
        self._status = TransportStatus.PLAYING

    def pause(self) -> None:
        self.pause_calls += 1
        self._status = TransportStatus.PAUSED


class FakeSubscriptionMonitor(BaseSubscriptionMonitor):
    """Yield a fixed list of snapshots, then wait until cancelled."""

    def __init__(self, snapshots: Sequence[SubscriptionSnapshot]) -> None:
        super().__init__()
        self.snapshots = list(snapshots)

    async def _updates(self) -> AsyncIterator[SubscriptionSnapshot]:
        for snapshot in self.snapshots:
            yield snapshot
        await asyncio.Event().wait()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db_manager = DatabaseManager(db_path)
    db_manager.initialize()

    yield db_manager

    db_manager.close()
    db_path.unlink(missing_ok=True)


@pytest.fixture
def fake_catalog() -> FakeCatalogClient:
    """Provide an empty in-memory catalog."""
    return FakeCatalogClient()


@pytest.fixture
def fake_player() -> FakePlayer:
    """Provide an idle player."""
    return FakePlayer()


@pytest.fixture
def make_monitor():
    """Build a subscription monitor yielding the given snapshots."""
    return FakeSubscriptionMonitor


@pytest.fixture
def make_album():
    """Build albums with sensible defaults."""

    def _make(
        album_id: str = "album1",
        source: CatalogSource = CatalogSource.APPLE_MUSIC,
        **kwargs,
    ) -> Album:
        kwargs.setdefault("title", f"Album {album_id}")
        kwargs.setdefault("artist_name", "The Artist")
        return Album(id=album_id, source=source, **kwargs)

    return _make


@pytest.fixture
def make_track():
    """Build tracks belonging to one album."""

    def _make(track_id: str, track_number: int = 1, album_id: str = "album1") -> Track:
        return Track(
            id=track_id,
            source=CatalogSource.APPLE_MUSIC,
            title=f"Track {track_id}",
            album_id=album_id,
            track_number=track_number,
        )

    return _make


@pytest.fixture
def make_artist():
    """Build artists with sensible defaults."""

    def _make(artist_id: str = "artist1", name: str = "The Artist") -> Artist:
        return Artist(id=artist_id, source=CatalogSource.APPLE_MUSIC, name=name)

    return _make


@pytest.fixture
def make_catalog():
    """Build an empty in-memory catalog for a given source."""
    return FakeCatalogClient
