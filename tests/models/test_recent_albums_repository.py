# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the recently viewed albums repository."""

from unittest.mock import patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from rediscover.core.exceptions import PersistenceError
from rediscover.models.artwork import Artwork
from rediscover.models.database import RecentAlbumRecord
from rediscover.models.db_manager import DatabaseManager
from rediscover.models.enums import CatalogSource
from rediscover.models.recent_albums import RecentAlbumsRepository


@pytest.fixture
def repository(temp_db):
    """Create a repository over the temporary database."""
    return RecentAlbumsRepository(temp_db)


class TestRecentAlbumsRepository:
    """Test persisting the recent albums list."""

    def test_load_empty(self, repository):
        """A new database holds no albums."""
        assert repository.load() == []

    def test_replace_and_load_preserve_order_and_fields(
        self, repository, make_album
    ):
        """Rows reload in position order with denormalized fields."""
        artwork = Artwork(url="https://img/{w}x{h}.jpg", width=1200, height=1200)
        albums = [
            make_album("b", title="Let It Be", artwork=artwork),
            make_album("a", source=CatalogSource.DEEZER, url="https://deezer/a"),
        ]

        repository.replace(albums)
        loaded = repository.load()

        assert [(a.source, a.id) for a in loaded] == [
            ("apple_music", "b"),
            ("deezer", "a"),
        ]
        assert loaded[0].title == "Let It Be"
        assert loaded[0].artwork == artwork
        assert loaded[1].url == "https://deezer/a"

    def test_replace_overwrites_previous_list(self, repository, temp_db, make_album):
        """Each replace writes the whole list."""
        repository.replace([make_album("a"), make_album("b")])
        repository.replace([make_album("c")])

        with temp_db.get_session() as session:
            records = session.execute(select(RecentAlbumRecord)).scalars().all()
            assert [(r.position, r.album_id) for r in records] == [(0, "c")]

    def test_uninitialized_database_is_a_no_op(self, tmp_path, make_album):
        """Without an initialized database nothing is read or written."""
        repository = RecentAlbumsRepository(DatabaseManager(tmp_path / "x.db"))

        repository.replace([make_album()])
        assert repository.load() == []

    def test_write_failure_raises_persistence_error(self, repository, make_album):
        """SQLAlchemy failures surface as PersistenceError."""
        with (
            patch(
                "sqlalchemy.orm.Session.commit",
                side_effect=OperationalError("commit", {}, Exception("locked")),
            ),
            pytest.raises(PersistenceError, match="Failed to save"),
        ):
            repository.replace([make_album()])
