# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Album model with optional track and artist relationships."""

from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from rediscover.models.artwork import Artwork
from rediscover.models.base import MediaInfo
from rediscover.models.track import Track

if TYPE_CHECKING:
    from rediscover.models.artist import Artist


class Album(MediaInfo):
    """Album as returned by a catalog.

    `tracks` and `artists` are `None` until the album has been fetched with
    those relationships; an empty tuple means the catalog returned none.
    """

    title: str = Field(..., description="Album title")
    artist_name: str = Field(..., description="Display artist name")
    artwork: Artwork | None = Field(None, description="Album artwork")
    release_date: str | None = Field(None, description="Release date (YYYY-MM-DD)")
    genre_names: tuple[str, ...] = Field(default=(), description="Album genres")
    track_count: int | None = Field(None, description="Number of tracks")

    # Relationships
    tracks: tuple[Track, ...] | None = Field(None, description="Tracks in order")
    artists: "tuple[Artist, ...] | None" = Field(None, description="Album artists")

    @field_validator("track_count")
    @classmethod
    def validate_track_count(cls, v: int | None) -> int | None:
        """Validate the track count is non-negative."""
        if v is not None and v < 0:
            msg = "Track count must be non-negative"
            raise ValueError(msg)
        return v

    @property
    def release_year(self) -> int | None:
        """Get the release year parsed from the release date."""
        if self.release_date and len(self.release_date) >= 4:
            try:
                return int(self.release_date[:4])
            except ValueError:
                return None
        return None

    @property
    def first_artist(self) -> "Artist | None":
        """Get the first listed artist, if the artists relationship is loaded."""
        if not self.artists:
            return None
        return self.artists[0]

    def with_relationships(
        self,
        *,
        tracks: tuple[Track, ...] | list[Track] | None = None,
        artists: "tuple[Artist, ...] | list[Artist] | None" = None,
    ) -> "Album":
        """Return a copy of this album carrying the given relationships."""
        update: dict[str, Any] = {}
        if tracks is not None:
            update["tracks"] = tuple(tracks)
            update["track_count"] = len(update["tracks"])
        if artists is not None:
            update["artists"] = tuple(artists)
        return self.model_copy(update=update)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary for display."""
        return {
            "id": self.id,
            "source": self.source,
            "title": self.title,
            "artist": self.artist_name,
            "year": self.release_year,
            "track_count": self.track_count,
            "genres": list(self.genre_names),
            "artwork_url": self.artwork.url_for(300) if self.artwork else None,
        }
