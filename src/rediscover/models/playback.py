# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Playback queue and state models."""

from pydantic import Field, model_validator

from rediscover.models.album import Album
from rediscover.models.base import RediscoverBaseModel
from rediscover.models.enums import QueueAssignment, TransportStatus
from rediscover.models.subscription import SubscriptionSnapshot
from rediscover.models.track import Track


class PlaybackQueue(RediscoverBaseModel):
    """Items handed to the player, and the index playback starts from."""

    entries: tuple[Album | Track, ...] = Field(..., description="Queued items")
    start_index: int = Field(default=0, description="Index of the first item to play")

    @model_validator(mode="after")
    def validate_start_index(self) -> "PlaybackQueue":
        """Validate the start index points into the entries."""
        if not self.entries:
            msg = "A playback queue needs at least one entry"
            raise ValueError(msg)
        if not 0 <= self.start_index < len(self.entries):
            msg = f"Start index {self.start_index} out of range"
            raise ValueError(msg)
        return self

    @classmethod
    def for_album(cls, album: Album) -> "PlaybackQueue":
        """Build a queue holding exactly one album."""
        return cls(entries=(album,))

    @classmethod
    def for_tracks(
        cls, tracks: tuple[Track, ...] | list[Track], starting_at: Track
    ) -> "PlaybackQueue":
        """Build a queue of the full track list starting at one track."""
        tracks = tuple(tracks)
        for index, track in enumerate(tracks):
            if track.id == starting_at.id:
                return cls(entries=tracks, start_index=index)
        msg = f"Track {starting_at.id} is not in the track list"
        raise ValueError(msg)

    @property
    def current(self) -> Album | Track:
        """Get the entry playback starts from."""
        return self.entries[self.start_index]


class PlaybackQueueState(RediscoverBaseModel):
    """Published state of a playback queue controller."""

    queue: PlaybackQueue | None = Field(None, description="Last assigned queue")
    queue_assignment: QueueAssignment = Field(
        default=QueueAssignment.NONE, description="How the queue was assigned"
    )
    transport_status: TransportStatus = Field(
        default=TransportStatus.IDLE, description="Player transport status"
    )
    subscription: SubscriptionSnapshot | None = Field(
        None, description="Latest entitlement snapshot"
    )

    @property
    def queue_set(self) -> bool:
        """Check whether a queue has been assigned in this session."""
        return self.queue_assignment != QueueAssignment.NONE
