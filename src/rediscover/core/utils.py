# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Core utility functions for rediscover."""

import base64


def encode_secret(value: str) -> str:
    """Encode a secret value using base64."""
    if not value:
        return ""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def decode_secret(encoded_value: str) -> str:
    """Decode a base64-encoded secret value."""
    if not encoded_value:
        return ""
    try:
        return base64.b64decode(encoded_value.encode("ascii")).decode("utf-8")
    except (ValueError, UnicodeDecodeError):
        return ""


def raise_error(
    error_type: type[Exception],
    msg: str,
    base_error: Exception | None = None,
    **kwargs: object,
) -> None:
    """
    Raise an error with the specified type and message.

    Args:
        error_type: The exception class to raise
        msg: The error message
        base_error: Optional base exception to chain from
        **kwargs: Additional keyword arguments to pass to the exception constructor
    """
    if base_error is not None:
        raise error_type(msg, **kwargs) from base_error
    raise error_type(msg, **kwargs)
