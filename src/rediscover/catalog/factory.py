# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Factory for creating catalog clients based on catalog source."""

import logging
from typing import Any, ClassVar

from rediscover.catalog.apple_music import AppleMusicCatalogClient
from rediscover.catalog.base import BaseCatalogClient
from rediscover.catalog.deezer import DeezerCatalogClient
from rediscover.config.user import UserConfig
from rediscover.models.enums import CatalogSource

logger = logging.getLogger(__name__)


class CatalogClientFactory:
    """Factory for creating source-specific catalog clients."""

    _clients: ClassVar[dict[CatalogSource, type[BaseCatalogClient]]] = {
        CatalogSource.APPLE_MUSIC: AppleMusicCatalogClient,
        CatalogSource.DEEZER: DeezerCatalogClient,
    }

    @classmethod
    def create_client(
        cls,
        source: CatalogSource,
        credentials: dict[str, Any] | None = None,
    ) -> BaseCatalogClient:
        """Create a catalog client for the specified source."""
        source = CatalogSource(source)
        if source not in cls._clients:
            supported = ", ".join(s.value for s in cls._clients)
            msg = (
                f"Unsupported catalog: {source.value}. "
                f"Supported catalogs: {supported}"
            )
            raise ValueError(msg)

        client_class = cls._clients[source]
        logger.info("Creating catalog client for: %s", source.value)
        return client_class(credentials)

    @classmethod
    def from_config(cls, config: UserConfig) -> BaseCatalogClient:
        """Create the catalog client selected in the user configuration."""
        source = CatalogSource(config.catalog.source)
        service_config = config.get_service_config(source.value)
        return cls.create_client(source, service_config.get_decoded_credentials())

    @classmethod
    def get_supported_sources(cls) -> list[CatalogSource]:
        """Get list of supported catalogs."""
        return list(cls._clients.keys())

    @classmethod
    def register_client(
        cls,
        source: CatalogSource,
        client_class: type[BaseCatalogClient],
    ) -> None:
        """Register a new catalog client for a source."""
        if not issubclass(client_class, BaseCatalogClient):
            msg = "Client class must inherit from BaseCatalogClient"
            raise TypeError(msg)

        logger.info("Registering catalog client for: %s", source.value)
        cls._clients[source] = client_class
