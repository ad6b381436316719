# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Catalog clients for the supported music services."""

from .apple_music import AppleMusicCatalogClient
from .base import BaseCatalogClient
from .deezer import DeezerCatalogClient
from .factory import CatalogClientFactory
from .session import SessionManager

__all__ = [
    "AppleMusicCatalogClient",
    "BaseCatalogClient",
    "CatalogClientFactory",
    "DeezerCatalogClient",
    "SessionManager",
]
