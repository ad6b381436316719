# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""SQLAlchemy ORM models for the recently viewed albums history."""

from sqlalchemy import Enum, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from rediscover.models.enums import CatalogSource


class Base(DeclarativeBase):
    """Base class for all database models."""


class RecentAlbumRecord(Base):
    """One entry of the recently viewed albums list.

    Rows are keyed by position (0 is the most recent) and carry enough
    denormalized album fields to render the list without a catalog fetch.
    """

    __tablename__ = "recent_albums"

    position: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Source identification
    source: Mapped[CatalogSource] = mapped_column(Enum(CatalogSource), nullable=False)
    album_id: Mapped[str] = mapped_column(String(100), nullable=False)

    # Denormalized display fields
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    artist_name: Mapped[str] = mapped_column(String(500), nullable=False)
    artwork_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    artwork_width: Mapped[int | None] = mapped_column(Integer, nullable=True)
    artwork_height: Mapped[int | None] = mapped_column(Integer, nullable=True)
    url: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    __table_args__ = (
        UniqueConstraint("source", "album_id", name="uq_recent_album_source_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<RecentAlbumRecord(position={self.position}, "
            f"album_id='{self.album_id}', title='{self.title}')>"
        )
