# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Album detail loading: tracks and the first artist's other albums."""

import logging
from dataclasses import dataclass

from pydantic import Field
from PyQt6.QtCore import QObject, pyqtSignal

from rediscover.catalog.base import BaseCatalogClient
from rediscover.core.exceptions import TransportError
from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.base import RediscoverBaseModel
from rediscover.models.enums import Relationship
from rediscover.models.track import Track

logger = logging.getLogger(__name__)


class AlbumDetails(RediscoverBaseModel):
    """Tracks and related albums shown on an album's detail screen."""

    tracks: tuple[Track, ...] = Field(default=(), description="Album tracks")
    related_albums: tuple[Album, ...] = Field(
        default=(), description="Other albums by the album's first artist"
    )

    @property
    def is_empty(self) -> bool:
        """Check whether neither section has anything to show."""
        return not self.tracks and not self.related_albums


@dataclass(frozen=True)
class DetailedAlbum:
    """Result of the first detail stage."""

    album: Album
    artist: Artist | None


class DetailAggregator(QObject):
    """Load an album's details in two dependent stages.

    Stage one re-fetches the album with its artists and tracks. Stage two
    re-fetches the first artist with its albums. Both sections are published
    in a single emission once the pipeline finishes. Only the latest call to
    `load_details` publishes.
    """

    details_changed = pyqtSignal(object)  # AlbumDetails

    def __init__(self, catalog: BaseCatalogClient, parent: QObject | None = None):
        super().__init__(parent)
        self._catalog = catalog
        self._details = AlbumDetails()
        self._generation = 0

    @property
    def details(self) -> AlbumDetails:
        """Get the most recently published details."""
        return self._details

    async def load_details(self, album: Album) -> AlbumDetails:
        """Fetch and publish details for `album`."""
        self._generation += 1
        generation = self._generation

        try:
            detailed = await self._fetch_album(album)
            related = await self._fetch_related_albums(detailed.artist)
        except TransportError as e:
            logger.warning("Could not load details for album %s: %s", album.id, e)
            details = AlbumDetails()
        else:
            details = AlbumDetails(
                tracks=detailed.album.tracks or (), related_albums=related
            )

        if generation == self._generation:
            self._publish(details)
        else:
            logger.debug("Discarding superseded details for album %s", album.id)
        return details

    def clear(self) -> None:
        """Publish empty details and ignore any load still running."""
        self._generation += 1
        self._publish(AlbumDetails())

    async def _fetch_album(self, album: Album) -> DetailedAlbum:
        detailed = await self._catalog.fetch_album(
            album, {Relationship.ARTISTS, Relationship.TRACKS}
        )
        return DetailedAlbum(album=detailed, artist=detailed.first_artist)

    async def _fetch_related_albums(
        self, artist: Artist | None
    ) -> tuple[Album, ...]:
        if artist is None:
            return ()
        detailed = await self._catalog.fetch_artist(artist, {Relationship.ALBUMS})
        return detailed.albums or ()

    def _publish(self, details: AlbumDetails) -> None:
        self._details = details
        self.details_changed.emit(details)
