# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Enums for catalog sources, relationships, and playback state."""

from enum import StrEnum


class CatalogSource(StrEnum):
    """Supported music catalogs."""

    APPLE_MUSIC = "apple_music"
    DEEZER = "deezer"


class Relationship(StrEnum):
    """Catalog relationships that can be fetched alongside a resource."""

    ARTISTS = "artists"
    TRACKS = "tracks"
    ALBUMS = "albums"


class TransportStatus(StrEnum):
    """Transport status reported by a player."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class QueueAssignment(StrEnum):
    """How the player's queue was last assigned in this session."""

    NONE = "none"
    ALBUM = "album"
    TRACKS = "tracks"


class AuthorizationStatus(StrEnum):
    """User authorization for catalog access."""

    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    RESTRICTED = "restricted"
    AUTHORIZED = "authorized"
