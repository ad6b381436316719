# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for playback queue models."""

import pytest
from pydantic import ValidationError

from rediscover.models.enums import QueueAssignment, TransportStatus
from rediscover.models.playback import PlaybackQueue, PlaybackQueueState


class TestPlaybackQueue:
    """Test queue construction."""

    def test_for_album(self, make_album):
        """An album queue holds exactly the album."""
        album = make_album()
        queue = PlaybackQueue.for_album(album)

        assert queue.entries == (album,)
        assert queue.current == album

    def test_for_tracks_starts_at_selection(self, make_track):
        """A track queue starts at the selected track."""
        tracks = [make_track(f"t{i}", i) for i in range(1, 4)]

        queue = PlaybackQueue.for_tracks(tracks, starting_at=tracks[2])

        assert queue.entries == tuple(tracks)
        assert queue.start_index == 2

    def test_for_tracks_rejects_unknown_track(self, make_track):
        """The selected track must be in the list."""
        with pytest.raises(ValueError, match="not in the track list"):
            PlaybackQueue.for_tracks([make_track("t1")], starting_at=make_track("x"))

    def test_empty_queue_rejected(self):
        """A queue needs at least one entry."""
        with pytest.raises(ValidationError, match="at least one entry"):
            PlaybackQueue(entries=())

    def test_start_index_in_range(self, make_album):
        """The start index must point into the entries."""
        with pytest.raises(ValidationError, match="out of range"):
            PlaybackQueue(entries=(make_album(),), start_index=1)


class TestPlaybackQueueState:
    """Test the published state."""

    def test_defaults(self):
        """A fresh state has no queue and an idle player."""
        state = PlaybackQueueState()

        assert not state.queue_set
        assert state.transport_status == TransportStatus.IDLE
        assert state.subscription is None

    def test_queue_set_follows_assignment(self):
        """Any assignment other than none counts as set."""
        assert PlaybackQueueState(queue_assignment=QueueAssignment.TRACKS).queue_set
