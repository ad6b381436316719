# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Apple Music catalog client implementation."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import Any

from rediscover.catalog.base import BaseCatalogClient, payload_errors
from rediscover.catalog.session import SessionManager
from rediscover.core.exceptions import (
    AuthenticationError,
    ContentNotFoundError,
    RateLimitError,
    TransportError,
)
from rediscover.core.utils import raise_error
from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.artwork import Artwork
from rediscover.models.enums import CatalogSource, Relationship
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track

logger = logging.getLogger(__name__)

APPLE_MUSIC_BASE_URL = "https://api.music.apple.com/v1"

# Resource types that can appear in an album's tracks relationship
TRACK_RESOURCE_TYPES = {"songs", "music-videos"}


class AppleMusicCatalogClient(BaseCatalogClient):
    """Apple Music catalog client speaking the REST API over aiohttp."""

    def __init__(
        self,
        credentials: dict[str, Any] | None = None,
        session_manager: SessionManager | None = None,
    ) -> None:
        super().__init__(credentials)
        self.session_manager = session_manager or SessionManager()
        self._owns_session_manager = session_manager is None
        self.developer_token: str = self.credentials.get("developer_token", "")
        self.user_token: str = self.credentials.get("user_token", "")
        self.storefront: str = self.credentials.get("storefront", "us")
        self.base_url: str = self.credentials.get("base_url") or APPLE_MUSIC_BASE_URL

    @property
    def service_name(self) -> str:
        """Get the display name of the catalog service."""
        return "Apple Music"

    @property
    def catalog_source(self) -> CatalogSource:
        """Get the CatalogSource enum value."""
        return CatalogSource.APPLE_MUSIC

    async def authenticate(self) -> bool:
        """Check a developer token is configured.

        The token itself is validated by the first catalog request.
        """
        self._authenticated = bool(self.developer_token)
        if not self._authenticated:
            logger.warning("No Apple Music developer token configured")
        return self._authenticated

    async def search_albums(self, term: str, limit: int) -> list[Album]:
        """Search albums matching `term`."""
        resp = await self._get(
            f"catalog/{self.storefront}/search",
            {"term": term, "types": "albums", "limit": limit},
        )
        resources = resp.get("results", {}).get("albums", {}).get("data", [])
        with payload_errors(self.service_name):
            albums = [self._album_from_resource(r) for r in resources]
        logger.debug("Search %r returned %d albums", term, len(albums))
        return albums[:limit]

    async def fetch_album(
        self, album: Album, relationships: Collection[Relationship]
    ) -> Album:
        """Fetch an album again with the requested relationships."""
        params = _include_params(relationships)
        resp = await self._get(f"catalog/{self.storefront}/albums/{album.id}", params)
        data = resp.get("data") or []
        if not data:
            msg = f"Album {album.id} not found"
            raise ContentNotFoundError(
                msg, content_id=album.id, source=self.service_name
            )
        with payload_errors(self.service_name):
            return self._album_from_resource(data[0])

    async def fetch_artist(
        self, artist: Artist, relationships: Collection[Relationship]
    ) -> Artist:
        """Fetch an artist again with the requested relationships."""
        params = _include_params(relationships)
        resp = await self._get(
            f"catalog/{self.storefront}/artists/{artist.id}", params
        )
        data = resp.get("data") or []
        if not data:
            msg = f"Artist {artist.id} not found"
            raise ContentNotFoundError(
                msg, content_id=artist.id, source=self.service_name
            )
        with payload_errors(self.service_name):
            return self._artist_from_resource(data[0])

    async def fetch_albums(self, album_ids: Sequence[str]) -> list[Album]:
        """Fetch albums by identity."""
        if not album_ids:
            return []
        resp = await self._get(
            f"catalog/{self.storefront}/albums", {"ids": ",".join(album_ids)}
        )
        with payload_errors(self.service_name):
            return [self._album_from_resource(r) for r in resp.get("data") or []]

    async def fetch_subscription_status(self) -> SubscriptionSnapshot:
        """Read the user's entitlement from the account storefront endpoint."""
        if not self.user_token:
            return SubscriptionSnapshot(
                can_play_catalog_content=False, can_become_subscriber=True
            )

        status, resp = await self._api_request("me/storefront", {})
        if status == 200:
            return SubscriptionSnapshot(
                can_play_catalog_content=True, can_become_subscriber=False
            )
        if status in (401, 403):
            logger.info("Apple Music user token rejected with status %d", status)
            return SubscriptionSnapshot(
                can_play_catalog_content=False, can_become_subscriber=True
            )
        msg = f"Subscription check failed with status {status}: {_error_detail(resp)}"
        raise TransportError(msg, status_code=status)

    async def cleanup(self) -> None:
        """Close HTTP sessions this client created."""
        if self._owns_session_manager:
            await self.session_manager.close_all_sessions()
        self._authenticated = False

    # --------------------
    # Internal helpers
    # --------------------
    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """Make a catalog request and map failure statuses to exceptions."""
        status, resp = await self._api_request(path, params)

        if status == 200:
            return resp
        detail = _error_detail(resp)
        if status in (401, 403):
            msg = f"Apple Music rejected the developer token: {detail}"
            raise_error(
                AuthenticationError, msg, source=self.service_name, status_code=status
            )
        if status == 404:
            msg = f"Not found: {path}"
            raise_error(ContentNotFoundError, msg, source=self.service_name)
        if status == 429:
            msg = "Apple Music rate limit exceeded"
            raise_error(RateLimitError, msg)
        msg = f"Apple Music request {path} failed with status {status}: {detail}"
        raise TransportError(msg, status_code=status)

    async def _api_request(
        self, path: str, params: dict[str, Any]
    ) -> tuple[int, dict[str, Any]]:
        """Make a request to the Apple Music API."""
        url = f"{self.base_url}/{path}"

        session = await self.session_manager.get_session(self.catalog_source.value)

        headers = {}
        if self.developer_token:
            headers["Authorization"] = f"Bearer {self.developer_token}"
        if self.user_token:
            headers["Music-User-Token"] = self.user_token

        try:
            async with session.get(url, params=params, headers=headers) as response:
                if response.status == 204:
                    return response.status, {}
                return response.status, await response.json(content_type=None)
        except Exception as e:
            msg = f"API request failed: {e}"
            raise TransportError(msg) from e

    def _album_from_resource(self, resource: dict[str, Any]) -> Album:
        attrs = resource.get("attributes") or {}
        album_id = str(resource.get("id"))
        relationships = resource.get("relationships") or {}

        album = Album(
            id=album_id,
            source=self.catalog_source,
            url=attrs.get("url"),
            title=attrs.get("name") or "Unknown Album",
            artist_name=attrs.get("artistName") or "Unknown Artist",
            artwork=_artwork_from_attributes(attrs),
            release_date=attrs.get("releaseDate"),
            genre_names=tuple(attrs.get("genreNames") or ()),
            track_count=attrs.get("trackCount"),
        )

        tracks = None
        if "tracks" in relationships:
            tracks = [
                self._track_from_resource(r, album_id, position)
                for position, r in enumerate(
                    _relationship_data(relationships, "tracks"), 1
                )
                if r.get("type", "songs") in TRACK_RESOURCE_TYPES
            ]
        artists = None
        if "artists" in relationships:
            artists = [
                self._artist_from_resource(r)
                for r in _relationship_data(relationships, "artists")
            ]
        return album.with_relationships(tracks=tracks, artists=artists)

    def _artist_from_resource(self, resource: dict[str, Any]) -> Artist:
        attrs = resource.get("attributes") or {}
        relationships = resource.get("relationships") or {}

        artist = Artist(
            id=str(resource.get("id")),
            source=self.catalog_source,
            url=attrs.get("url"),
            name=attrs.get("name") or "Unknown Artist",
            artwork=_artwork_from_attributes(attrs),
            genre_names=tuple(attrs.get("genreNames") or ()),
        )
        if "albums" in relationships:
            artist = artist.with_albums([
                self._album_from_resource(r)
                for r in _relationship_data(relationships, "albums")
            ])
        return artist

    def _track_from_resource(
        self, resource: dict[str, Any], album_id: str, fallback_track_number: int
    ) -> Track:
        attrs = resource.get("attributes") or {}
        duration_ms = attrs.get("durationInMillis")
        previews = attrs.get("previews") or []
        return Track(
            id=str(resource.get("id")),
            source=self.catalog_source,
            url=attrs.get("url"),
            title=attrs.get("name") or "Unknown Track",
            album_id=album_id,
            track_number=int(attrs.get("trackNumber") or fallback_track_number),
            disc_number=int(attrs.get("discNumber") or 1),
            artist_name=attrs.get("artistName"),
            duration_seconds=duration_ms / 1000 if duration_ms is not None else None,
            preview_url=previews[0].get("url") if previews else None,
        )


def _include_params(relationships: Collection[Relationship]) -> dict[str, Any]:
    if not relationships:
        return {}
    return {"include": ",".join(sorted(str(r) for r in relationships))}


def _relationship_data(
    relationships: dict[str, Any], name: str
) -> list[dict[str, Any]]:
    return (relationships.get(name) or {}).get("data") or []


def _artwork_from_attributes(attrs: dict[str, Any]) -> Artwork | None:
    artwork = attrs.get("artwork")
    if not isinstance(artwork, dict) or not artwork.get("url"):
        return None
    return Artwork(
        url=artwork["url"],
        width=artwork.get("width") or None,
        height=artwork.get("height") or None,
    )


def _error_detail(resp: dict[str, Any]) -> str:
    errors = resp.get("errors") if isinstance(resp, dict) else None
    if errors and isinstance(errors, list):
        first = errors[0]
        return first.get("detail") or first.get("title") or "Unknown error"
    return "Unknown error"
