# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""User configuration classes for general settings."""

from pathlib import Path

from pydantic import Field, field_validator

from rediscover.config.base import BaseConfig
from rediscover.config.services import AppleMusicConfig, DeezerConfig
from rediscover.models.enums import CatalogSource


class CatalogConfig(BaseConfig):
    """Configuration for the catalog backing search and album details."""

    source: CatalogSource = Field(
        default=CatalogSource.APPLE_MUSIC,
        description="Catalog service used for search, details and entitlement",
    )


class SearchConfig(BaseConfig):
    """Configuration for live album search."""

    result_limit: int = Field(
        default=5, description="Maximum number of albums returned per search"
    )

    @field_validator("result_limit")
    @classmethod
    def validate_result_limit(cls, v: int) -> int:
        """Validate the result limit is positive."""
        if v <= 0:
            msg = "Search result limit must be positive"
            raise ValueError(msg)
        return v


class RecentsConfig(BaseConfig):
    """Configuration for the recently viewed albums history."""

    enabled: bool = Field(
        default=True, description="Persist recently viewed albums between runs"
    )
    capacity: int = Field(
        default=10, description="Maximum number of recently viewed albums kept"
    )
    database_path: Path = Field(
        default=Path("~/.config/rediscover/recents.db"),
        description="Path to the recently viewed albums database",
    )

    @field_validator("capacity")
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        """Validate capacity is positive."""
        if v <= 0:
            msg = "Recent albums capacity must be positive"
            raise ValueError(msg)
        return v

    @field_validator("database_path", mode="before")
    @classmethod
    def validate_db_path(cls, v) -> Path:
        """Convert string paths to Path objects and expand user."""
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class SubscriptionConfig(BaseConfig):
    """Configuration for subscription entitlement polling."""

    poll_interval_seconds: float = Field(
        default=60.0, description="Seconds between entitlement checks"
    )

    @field_validator("poll_interval_seconds")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        """Validate the poll interval is positive."""
        if v <= 0:
            msg = "Poll interval must be positive"
            raise ValueError(msg)
        return float(v)


class NetworkConfig(BaseConfig):
    """Configuration for catalog HTTP sessions."""

    timeout_seconds: float = Field(
        default=30.0, description="Request timeout in seconds"
    )
    verify_ssl: bool = Field(
        default=True, description="Verify SSL certificates for API connections"
    )
    user_agent: str = Field(
        default="rediscover/0.1.0", description="User-Agent header sent to catalogs"
    )

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout_seconds(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            msg = "Timeout must be positive"
            raise ValueError(msg)
        return float(v)


class UserConfig(BaseConfig):
    """Main user configuration containing all sections."""

    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalog selection"
    )
    search: SearchConfig = Field(
        default_factory=SearchConfig, description="Search settings"
    )
    recents: RecentsConfig = Field(
        default_factory=RecentsConfig, description="Recently viewed albums settings"
    )
    subscription: SubscriptionConfig = Field(
        default_factory=SubscriptionConfig, description="Entitlement polling settings"
    )
    network: NetworkConfig = Field(
        default_factory=NetworkConfig, description="HTTP session settings"
    )

    # Service configurations
    apple_music: AppleMusicConfig = Field(
        default_factory=AppleMusicConfig, description="Apple Music configuration"
    )
    deezer: DeezerConfig = Field(
        default_factory=DeezerConfig, description="Deezer configuration"
    )

    @classmethod
    def from_toml_file(cls, file_path: Path | str) -> "UserConfig":
        """Load configuration from a TOML file."""
        import tomllib

        if isinstance(file_path, str):
            file_path = Path(file_path)

        with file_path.open("rb") as f:
            data = tomllib.load(f)

        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, file_path: Path | str) -> "UserConfig":
        """Load configuration from a JSON file."""
        import json

        if isinstance(file_path, str):
            file_path = Path(file_path)

        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization."""
        return self.model_dump(mode="json")

    def to_json_file(self, file_path: Path | str) -> None:
        """Save configuration to a JSON file."""
        import json

        if isinstance(file_path, str):
            file_path = Path(file_path)

        file_path.parent.mkdir(parents=True, exist_ok=True)

        with file_path.open("w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)

    def get_service_config(self, service_name: str):
        """Get configuration for a specific catalog service."""
        service_map = {
            CatalogSource.APPLE_MUSIC.value: self.apple_music,
            CatalogSource.DEEZER.value: self.deezer,
        }

        if service_name.lower() not in service_map:
            msg = f"Unknown service: {service_name}"
            raise ValueError(msg)

        return service_map[service_name.lower()]
