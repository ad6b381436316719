# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Persistence for the recently viewed albums list."""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from rediscover.core.exceptions import PersistenceError
from rediscover.models.album import Album
from rediscover.models.artwork import Artwork
from rediscover.models.database import RecentAlbumRecord
from rediscover.models.db_manager import DatabaseManager
from rediscover.models.enums import CatalogSource

logger = logging.getLogger(__name__)


class RecentAlbumsRepository:
    """Read and replace the persisted recently viewed albums list.

    The list is always written whole, inside one transaction, so a reader
    never sees a partially written order.
    """

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager

    def load(self) -> list[Album]:
        """Load the persisted albums, most recent first."""
        if not self._db_manager.is_initialized:
            return []
        try:
            with self._db_manager.get_session() as session:
                records = (
                    session.execute(
                        select(RecentAlbumRecord).order_by(RecentAlbumRecord.position)
                    )
                    .scalars()
                    .all()
                )
                return [_album_from_record(record) for record in records]
        except (SQLAlchemyError, LookupError, ValueError) as e:
            msg = f"Failed to load recent albums: {e}"
            raise PersistenceError(
                msg, path=str(self._db_manager.database_path)
            ) from e

    def replace(self, albums: Sequence[Album]) -> None:
        """Replace the persisted list with `albums` in order."""
        if not self._db_manager.is_initialized:
            return
        try:
            with self._db_manager.get_session() as session:
                session.execute(delete(RecentAlbumRecord))
                session.add_all(
                    _record_from_album(position, album)
                    for position, album in enumerate(albums)
                )
                session.commit()
        except SQLAlchemyError as e:
            msg = f"Failed to save recent albums: {e}"
            raise PersistenceError(
                msg, path=str(self._db_manager.database_path)
            ) from e
        logger.debug("Persisted %d recent albums", len(albums))


def _record_from_album(position: int, album: Album) -> RecentAlbumRecord:
    artwork = album.artwork
    return RecentAlbumRecord(
        position=position,
        source=CatalogSource(album.source),
        album_id=album.id,
        title=album.title,
        artist_name=album.artist_name,
        artwork_url=artwork.url if artwork else None,
        artwork_width=artwork.width if artwork else None,
        artwork_height=artwork.height if artwork else None,
        url=album.url,
    )


def _album_from_record(record: RecentAlbumRecord) -> Album:
    artwork = None
    if record.artwork_url:
        artwork = Artwork(
            url=record.artwork_url,
            width=record.artwork_width,
            height=record.artwork_height,
        )
    return Album(
        id=record.album_id,
        source=record.source,
        title=record.title,
        artist_name=record.artist_name,
        artwork=artwork,
        url=record.url,
    )
