# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Artwork reference model."""

from pydantic import Field, field_validator

from rediscover.models.base import RediscoverBaseModel


class Artwork(RediscoverBaseModel):
    """Artwork reference, optionally a URL template with `{w}` and `{h}`."""

    url: str = Field(..., description="Artwork URL or URL template")
    width: int | None = Field(None, description="Maximum width in pixels")
    height: int | None = Field(None, description="Maximum height in pixels")

    @field_validator("width", "height")
    @classmethod
    def validate_dimensions(cls, v: int | None) -> int | None:
        """Validate image dimensions are positive."""
        if v is not None and v <= 0:
            msg = "Image dimensions must be positive"
            raise ValueError(msg)
        return v

    @property
    def is_template(self) -> bool:
        """Check whether the URL needs dimensions substituted."""
        return "{w}" in self.url or "{h}" in self.url

    def url_for(self, width: int, height: int | None = None) -> str:
        """Resolve the artwork URL for the requested size.

        Sizes are clamped to the artwork's maximum dimensions when known.
        """
        if not self.is_template:
            return self.url
        height = width if height is None else height
        if self.width is not None:
            width = min(width, self.width)
        if self.height is not None:
            height = min(height, self.height)
        return self.url.replace("{w}", str(width)).replace("{h}", str(height))
