# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base configuration classes with common functionality."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseConfig(BaseModel):
    """Base configuration class with common settings."""

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Use enum values instead of enum objects in serialization
        use_enum_values=True,
        extra="forbid",
        validate_default=True,
    )


class CatalogServiceConfig(BaseConfig):
    """Base configuration for music catalog services."""

    storefront: str = Field(
        default="us", description="Two-letter storefront (country) code"
    )

    @field_validator("storefront")
    @classmethod
    def validate_storefront(cls, v: str) -> str:
        """Normalize storefront codes to lowercase two-letter strings."""
        v = str(v).strip().lower()
        if len(v) != 2 or not v.isalpha():
            msg = f"Invalid storefront code: {v!r}"
            raise ValueError(msg)
        return v

    def get_decoded_credentials(self) -> dict[str, Any]:
        """Get decoded credentials for this service."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__class__.model_fields
        }


class TokenBasedServiceConfig(CatalogServiceConfig):
    """Base configuration for catalog services using bearer tokens."""

    developer_token: str = Field(
        default="", description="Base64-encoded developer token for the API"
    )
    user_token: str = Field(
        default="", description="Base64-encoded user token for account endpoints"
    )

    @field_validator("developer_token", "user_token")
    @classmethod
    def validate_token_fields(cls, v: str) -> str:
        """Validate token fields are strings."""
        return str(v).strip()

    def get_decoded_credentials(self) -> dict[str, Any]:
        """Get decoded credentials for this service."""
        from rediscover.core.utils import decode_secret

        credentials = {
            "developer_token": decode_secret(self.developer_token),
            "user_token": decode_secret(self.user_token),
        }

        # Add any additional fields that don't need decoding
        for field_name in self.__class__.model_fields:
            if field_name not in ["developer_token", "user_token"]:
                credentials[field_name] = getattr(self, field_name)

        return credentials
