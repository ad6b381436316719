# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the exception hierarchy."""

from rediscover.core.exceptions import (
    AuthenticationError,
    ContentNotFoundError,
    PersistenceError,
    PlaybackError,
    RateLimitError,
    RediscoverError,
    TransportError,
)


def test_transport_errors_share_base():
    """Every catalog failure can be caught as a TransportError."""
    for error in (
        AuthenticationError("a"),
        ContentNotFoundError("b"),
        RateLimitError("c"),
    ):
        assert isinstance(error, TransportError)
        assert isinstance(error, RediscoverError)


def test_status_codes():
    """Specific errors carry their HTTP status."""
    assert ContentNotFoundError("missing", content_id="1").status_code == 404
    assert RateLimitError("slow down", retry_after=2.5).retry_after == 2.5
    assert RateLimitError("slow down").status_code == 429
    assert AuthenticationError("no", status_code=401).status_code == 401


def test_details_default_to_empty_dict():
    """Details are always a dictionary."""
    assert RediscoverError("x").details == {}
    assert PlaybackError("x", {"reason": "busy"}).details == {"reason": "busy"}
    assert PersistenceError("x", path="/tmp/db").path == "/tmp/db"
