# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Deezer catalog client implementation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Collection, Sequence
from itertools import islice
from typing import Any, TypeVar

import deezer
from deezer.exceptions import DeezerErrorResponse, DeezerNotFoundError

from rediscover.catalog.base import BaseCatalogClient, payload_errors
from rediscover.core.exceptions import ContentNotFoundError, TransportError
from rediscover.models.album import Album
from rediscover.models.artist import Artist
from rediscover.models.artwork import Artwork
from rediscover.models.enums import CatalogSource, Relationship
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Error code Deezer returns in a 200 body when a resource does not exist
DEEZER_NO_DATA_CODE = 800


class DeezerCatalogClient(BaseCatalogClient):
    """Deezer catalog client backed by the deezer-python API.

    deezer-python is synchronous, so every call runs in a worker thread.
    """

    def __init__(self, credentials: dict[str, Any] | None = None):
        super().__init__(credentials)
        self.client: Any | None = None
        self._arl: str = self.credentials.get("arl", "")

    @property
    def service_name(self) -> str:
        """Get the display name of the catalog service."""
        return "Deezer"

    @property
    def catalog_source(self) -> CatalogSource:
        """Get the CatalogSource enum value."""
        return CatalogSource.DEEZER

    async def authenticate(self) -> bool:
        """Create the deezer.Client and apply the ARL cookie if configured."""
        try:
            if self.client is None:
                self.client = deezer.Client()
            if self._arl:
                cookies = getattr(self.client, "cookies", None)
                if hasattr(cookies, "update"):
                    cookies.update({"arl": self._arl})
        except Exception:
            logger.exception("Failed to instantiate deezer.Client")
            self._authenticated = False
            return False
        else:
            self._authenticated = True
            return True

    async def search_albums(self, term: str, limit: int) -> list[Album]:
        """Search albums matching `term`."""
        client = self._ensure_ready()

        def _search() -> list[dict[str, Any]]:
            results = client.search_albums(term)
            return [item.as_dict() for item in islice(results, limit)]

        items = await self._call(_search)
        with payload_errors(self.service_name):
            return [_album_from_dict(item) for item in items]

    async def fetch_album(
        self, album: Album, relationships: Collection[Relationship]
    ) -> Album:
        """Fetch an album again with the requested relationships."""
        client = self._ensure_ready()

        album_res = await self._call(client.get_album, album.id)
        album_dict = album_res.as_dict()
        track_dicts = None
        if Relationship.TRACKS in relationships:
            track_dicts = await self._call(
                lambda: [t.as_dict() for t in album_res.get_tracks()]
            )

        with payload_errors(self.service_name):
            detailed = _album_from_dict(album_dict)
            tracks = None
            if track_dicts is not None:
                tracks = [
                    _track_from_dict(t, detailed.id, position)
                    for position, t in enumerate(track_dicts, 1)
                ]
            artists = None
            if Relationship.ARTISTS in relationships:
                artists = _album_artists(album_dict)
            return detailed.with_relationships(tracks=tracks, artists=artists)

    async def fetch_artist(
        self, artist: Artist, relationships: Collection[Relationship]
    ) -> Artist:
        """Fetch an artist again with the requested relationships."""
        client = self._ensure_ready()

        artist_res = await self._call(client.get_artist, artist.id)
        artist_dict = artist_res.as_dict()
        album_dicts = None
        if Relationship.ALBUMS in relationships:
            album_dicts = await self._call(
                lambda: [a.as_dict() for a in artist_res.get_albums()]
            )

        with payload_errors(self.service_name):
            detailed = _artist_from_dict(artist_dict)
            if album_dicts is not None:
                detailed = detailed.with_albums([
                    _album_from_dict(a, fallback_artist=detailed.name)
                    for a in album_dicts
                ])
            return detailed

    async def fetch_albums(self, album_ids: Sequence[str]) -> list[Album]:
        """Fetch albums by identity, skipping ids Deezer no longer knows.

        Any other failure propagates, so callers never mistake a network
        problem for a removed album.
        """
        client = self._ensure_ready()

        albums: list[Album] = []
        for album_id in album_ids:
            try:
                album_res = await self._call(client.get_album, album_id)
            except ContentNotFoundError:
                logger.info("Deezer album %s no longer exists", album_id)
                continue
            with payload_errors(self.service_name):
                albums.append(_album_from_dict(album_res.as_dict()))
        return albums

    async def fetch_subscription_status(self) -> SubscriptionSnapshot:
        """Deezer previews play without an account; offer one when not logged in."""
        return SubscriptionSnapshot(
            can_play_catalog_content=True, can_become_subscriber=not self._arl
        )

    async def cleanup(self) -> None:
        """Clean up resources."""
        # No aiohttp sessions to close; `deezer.Client` manages its own HTTP client
        self._authenticated = False

    # --------------------
    # Internal helpers
    # --------------------
    def _ensure_ready(self) -> Any:
        if not self._authenticated or self.client is None:
            msg = "Not authenticated with Deezer or client not initialized"
            raise RuntimeError(msg)
        return self.client

    async def _call(self, func: Callable[..., T], *args: Any) -> T:
        """Run a blocking deezer-python call and wrap its failures."""
        content_id = str(args[0]) if args else None
        try:
            return await asyncio.to_thread(func, *args)
        except DeezerNotFoundError as e:
            msg = f"Deezer resource {content_id} not found"
            raise ContentNotFoundError(
                msg, content_id=content_id, source=self.service_name
            ) from e
        except DeezerErrorResponse as e:
            error = (e.json_data or {}).get("error") or {}
            if error.get("code") == DEEZER_NO_DATA_CODE:
                msg = f"Deezer resource {content_id} not found"
                raise ContentNotFoundError(
                    msg, content_id=content_id, source=self.service_name
                ) from e
            msg = f"Deezer rejected the request: {error.get('message', e)}"
            raise TransportError(msg, details={"error": error}) from e
        except Exception as e:
            msg = f"Deezer request failed: {e}"
            raise TransportError(msg) from e


def _get_cover(resp: dict[str, Any], prefix: str) -> Artwork | None:
    for size, pixels in (("xl", 1000), ("big", 500), ("medium", 250), ("small", 56)):
        url = resp.get(f"{prefix}_{size}")
        if url:
            return Artwork(url=url, width=pixels, height=pixels)
    return None


def _album_from_dict(
    resp: dict[str, Any], *, fallback_artist: str | None = None
) -> Album:
    artist = resp.get("artist")
    artist_name = artist.get("name") if isinstance(artist, dict) else None
    genres = (resp.get("genres") or {}).get("data") or []
    return Album(
        id=str(resp.get("id")),
        source=CatalogSource.DEEZER,
        url=resp.get("link"),
        title=resp.get("title") or "Unknown Album",
        artist_name=artist_name or fallback_artist or "Unknown Artist",
        artwork=_get_cover(resp, "cover"),
        release_date=resp.get("release_date"),
        genre_names=tuple(g.get("name") for g in genres if g.get("name")),
        track_count=resp.get("nb_tracks"),
    )


def _artist_from_dict(resp: dict[str, Any]) -> Artist:
    return Artist(
        id=str(resp.get("id")),
        source=CatalogSource.DEEZER,
        url=resp.get("link"),
        name=resp.get("name") or "Unknown Artist",
        artwork=_get_cover(resp, "picture"),
    )


def _album_artists(album_resp: dict[str, Any]) -> list[Artist]:
    """Main artist first, then other contributors."""
    artists: list[Artist] = []
    seen: set[str] = set()
    candidates = [album_resp.get("artist"), *(album_resp.get("contributors") or [])]
    for candidate in candidates:
        if not isinstance(candidate, dict) or candidate.get("id") is None:
            continue
        artist = _artist_from_dict(candidate)
        if artist.id not in seen:
            seen.add(artist.id)
            artists.append(artist)
    return artists


def _track_from_dict(
    track_resp: dict[str, Any], album_id: str, fallback_track_number: int
) -> Track:
    artist = track_resp.get("artist")
    duration = track_resp.get("duration")
    return Track(
        id=str(track_resp.get("id")),
        source=CatalogSource.DEEZER,
        url=track_resp.get("link"),
        title=track_resp.get("title") or "Unknown Track",
        album_id=album_id,
        track_number=int(track_resp.get("track_position") or fallback_track_number),
        disc_number=int(track_resp.get("disk_number") or 1),
        artist_name=artist.get("name") if isinstance(artist, dict) else None,
        duration_seconds=float(duration) if duration is not None else None,
        preview_url=track_resp.get("preview") or None,
    )
