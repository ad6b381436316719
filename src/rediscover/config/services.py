# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Service-specific configuration classes."""

from typing import Any

from pydantic import Field

from rediscover.config.base import CatalogServiceConfig, TokenBasedServiceConfig


class AppleMusicConfig(TokenBasedServiceConfig):
    """Configuration for the Apple Music catalog API."""

    base_url: str = Field(
        default="https://api.music.apple.com/v1",
        description="Apple Music API root (should not be changed by users)",
    )


class DeezerConfig(CatalogServiceConfig):
    """Configuration for the Deezer catalog API."""

    arl: str = Field(
        default="",
        description="Authentication cookie for Deezer account",
    )

    def get_decoded_credentials(self) -> dict[str, Any]:
        """Get decoded credentials for this service."""
        from rediscover.core.utils import decode_secret

        credentials = {
            "arl": decode_secret(self.arl),
        }

        for field_name in self.__class__.model_fields:
            if field_name != "arl":
                credentials[field_name] = getattr(self, field_name)

        return credentials
