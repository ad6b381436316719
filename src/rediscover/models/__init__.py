# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Rediscover models package with catalog entities and persistence."""

from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.artwork import Artwork
from rediscover.models.base import MediaInfo, RediscoverBaseModel
from rediscover.models.database import RecentAlbumRecord
from rediscover.models.db_manager import DatabaseManager
from rediscover.models.enums import (
    AuthorizationStatus,
    CatalogSource,
    QueueAssignment,
    Relationship,
    TransportStatus,
)
from rediscover.models.playback import PlaybackQueue, PlaybackQueueState
from rediscover.models.recent_albums import RecentAlbumsRepository
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track

__all__ = [
    "Album",
    "Artist",
    "Artwork",
    "AuthorizationStatus",
    "CatalogSource",
    "DatabaseManager",
    "MediaInfo",
    "PlaybackQueue",
    "PlaybackQueueState",
    "QueueAssignment",
    "RecentAlbumRecord",
    "RecentAlbumsRepository",
    "RediscoverBaseModel",
    "Relationship",
    "SubscriptionSnapshot",
    "Track",
    "TransportStatus",
]
