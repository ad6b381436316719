# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Artist model with an optional albums relationship."""

from typing import Any

from pydantic import Field

from rediscover.models.album import Album
from rediscover.models.artwork import Artwork
from rediscover.models.base import MediaInfo


class Artist(MediaInfo):
    """Artist as returned by a catalog."""

    name: str = Field(..., description="Artist name")
    artwork: Artwork | None = Field(None, description="Artist picture")
    genre_names: tuple[str, ...] = Field(default=(), description="Artist genres")

    # Relationships
    albums: tuple[Album, ...] | None = Field(None, description="Artist albums")

    def with_albums(self, albums: tuple[Album, ...] | list[Album]) -> "Artist":
        """Return a copy of this artist carrying the given albums."""
        return self.model_copy(update={"albums": tuple(albums)})

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary for display."""
        return {
            "id": self.id,
            "source": self.source,
            "name": self.name,
            "album_count": len(self.albums) if self.albums is not None else None,
            "artwork_url": self.artwork.url_for(300) if self.artwork else None,
        }


# Album refers to Artist by name
Album.model_rebuild()
