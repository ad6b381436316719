# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Subscription entitlement snapshot."""

from pydantic import Field

from rediscover.models.base import RediscoverBaseModel


class SubscriptionSnapshot(RediscoverBaseModel):
    """One reading of the user's catalog entitlement."""

    can_play_catalog_content: bool = Field(
        default=False, description="Whether full catalog playback is allowed"
    )
    can_become_subscriber: bool = Field(
        default=False, description="Whether a subscription can be offered"
    )
