# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base abstract class for music catalog clients."""

from abc import ABC, abstractmethod
from collections.abc import Collection, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError

from rediscover.core.exceptions import TransportError
from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.enums import CatalogSource, Relationship
from rediscover.models.subscription import SubscriptionSnapshot


class BaseCatalogClient(ABC):
    """Abstract base class for all catalog clients.

    Every request either returns models or raises a `TransportError`
    subclass; callers never see provider-specific exceptions.
    """

    def __init__(self, credentials: dict[str, Any] | None = None):
        """Initialize the catalog client with optional credentials."""
        self.credentials = credentials or {}
        self._authenticated = False

    @property
    @abstractmethod
    def service_name(self) -> str:
        """Get the display name of the catalog service."""
        ...

    @property
    @abstractmethod
    def catalog_source(self) -> CatalogSource:
        """Get the CatalogSource enum value."""
        ...

    @abstractmethod
    async def authenticate(self) -> bool:
        """Prepare the client for requests."""
        ...

    @abstractmethod
    async def search_albums(self, term: str, limit: int) -> list[Album]:
        """Search albums matching `term`, at most `limit`, in catalog order."""
        ...

    @abstractmethod
    async def fetch_album(
        self, album: Album, relationships: Collection[Relationship]
    ) -> Album:
        """
        Fetch an album again with the requested relationships.

        Supported relationships are `ARTISTS` and `TRACKS`. The result is a
        new Album instance; `album` is left unchanged.
        """
        ...

    @abstractmethod
    async def fetch_artist(
        self, artist: Artist, relationships: Collection[Relationship]
    ) -> Artist:
        """Fetch an artist again with the requested relationships (`ALBUMS`)."""
        ...

    @abstractmethod
    async def fetch_albums(self, album_ids: Sequence[str]) -> list[Album]:
        """Fetch albums by identity; ids the catalog does not know are omitted."""
        ...

    @abstractmethod
    async def fetch_subscription_status(self) -> SubscriptionSnapshot:
        """Read the user's current catalog entitlement."""
        ...

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up resources."""

    @property
    def is_authenticated(self) -> bool:
        """Check if the client is authenticated."""
        return self._authenticated


@contextmanager
def payload_errors(service_name: str) -> Iterator[None]:
    """Report catalog payloads that do not fit our models as transport errors."""
    try:
        yield
    except ValidationError as e:
        msg = f"Malformed {service_name} response: {e.error_count()} invalid fields"
        raise TransportError(msg, details={"errors": e.errors()}) from e
