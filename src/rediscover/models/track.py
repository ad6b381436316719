# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Track model."""

from pydantic import Field, field_validator

from rediscover.models.base import MediaInfo


class Track(MediaInfo):
    """A single track belonging to exactly one album."""

    title: str = Field(..., description="Track title")
    album_id: str = Field(..., description="Identifier of the album the track is on")
    track_number: int = Field(default=1, description="Position within the album")
    disc_number: int = Field(default=1, description="Disc number for multi-disc albums")
    artist_name: str | None = Field(None, description="Track artist")
    duration_seconds: float | None = Field(None, description="Track duration")
    preview_url: str | None = Field(None, description="Preview audio URL")

    @field_validator("track_number", "disc_number")
    @classmethod
    def validate_positive_numbers(cls, v: int) -> int:
        """Validate track and disc numbers are positive."""
        if v < 1:
            msg = "Track and disc numbers must be positive"
            raise ValueError(msg)
        return v

    @property
    def duration_formatted(self) -> str | None:
        """Get duration in MM:SS format."""
        if self.duration_seconds is None:
            return None
        minutes = int(self.duration_seconds // 60)
        seconds = int(self.duration_seconds % 60)
        return f"{minutes}:{seconds:02d}"

    @property
    def position_string(self) -> str:
        """Get track position as string (e.g., '1.05' for disc 1, track 5)."""
        return f"{self.disc_number}.{self.track_number:02d}"
