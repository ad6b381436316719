# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Exceptions raised by catalog clients, players and the recent-albums store.

None of these reach the presentation layer: the services catch them where
they occur and fall back to an empty or unchanged state.
"""

from typing import Any


class RediscoverError(Exception):
    """Base exception for rediscover errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(RediscoverError):
    """Exception raised when a catalog request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class AuthenticationError(TransportError):
    """Exception raised when the catalog rejects our credentials."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, details)
        self.source = source


class ContentNotFoundError(TransportError):
    """Exception raised when catalog content does not exist."""

    def __init__(
        self,
        message: str,
        content_id: str | None = None,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, 404, details)
        self.content_id = content_id
        self.source = source


class RateLimitError(TransportError):
    """Exception raised when the catalog rate limit is exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, 429, details)
        self.retry_after = retry_after


class PlaybackError(RediscoverError):
    """Exception raised when the player rejects a play or resume request."""


class PersistenceError(RediscoverError):
    """Exception raised when the recent-albums store cannot be read or written."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path
