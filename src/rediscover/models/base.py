# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base model classes with common functionality."""

from pydantic import BaseModel, ConfigDict, Field

from rediscover.models.enums import CatalogSource


class RediscoverBaseModel(BaseModel):
    """Base model for all rediscover models.

    Catalog models are immutable: fetching a resource again with more
    relationships produces a new instance instead of mutating the old one.
    """

    model_config = ConfigDict(
        frozen=True,
        # Use enum values instead of enum objects in serialization
        use_enum_values=True,
        # Catalog payloads carry many fields we do not model
        extra="ignore",
        validate_default=True,
    )


class MediaInfo(RediscoverBaseModel):
    """Identity shared by every catalog resource."""

    id: str = Field(..., description="Unique identifier from the catalog")
    source: CatalogSource = Field(..., description="Catalog the resource came from")
    url: str | None = Field(None, description="Catalog web URL if available")

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the resource across catalogs."""
        return (str(self.source), self.id)
