# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the application container."""

import pytest

from rediscover.catalog.apple_music import AppleMusicCatalogClient
from rediscover.config.user import RecentsConfig, UserConfig
from rediscover.services.app import RediscoverApp


@pytest.fixture
def config(tmp_path):
    """Configuration storing recents in a temporary directory."""
    return UserConfig(recents=RecentsConfig(database_path=tmp_path / "recents.db"))


class TestRediscoverApp:
    """Test wiring and lifetime of the application container."""

    @pytest.mark.asyncio
    async def test_start_initializes_database_and_authenticates(
        self, config, fake_catalog
    ):
        """Starting opens the history database and authenticates."""
        app = RediscoverApp(config, catalog=fake_catalog)

        assert await app.start()
        assert app.db_manager.is_initialized
        assert fake_catalog.is_authenticated

        await app.aclose()
        assert fake_catalog.cleaned_up
        assert not app.db_manager.is_initialized

    @pytest.mark.asyncio
    async def test_recents_survive_restart(
        self, config, fake_catalog, fake_player, make_album
    ):
        """Albums viewed in one run are listed in the next."""
        async with RediscoverApp(config, fake_player, fake_catalog) as app:
            for album_id in ("a", "b"):
                async with app.album_detail(make_album(album_id)):
                    pass

        async with RediscoverApp(config, fake_player, fake_catalog) as app:
            browse = app.browse()
            assert [a.id for a in browse.visible_albums] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_sessions_share_recent_store(
        self, config, fake_catalog, fake_player, make_album
    ):
        """Every session sees the same history."""
        async with RediscoverApp(config, fake_player, fake_catalog) as app:
            detail = app.album_detail(make_album("a"))
            await detail.open()
            await detail.close()

            assert detail.recents is app.recents
            assert app.browse().recents is app.recents

    def test_album_detail_requires_player(self, config, fake_catalog, make_album):
        """Detail sessions cannot be created without a player."""
        app = RediscoverApp(config, catalog=fake_catalog)

        with pytest.raises(RuntimeError, match="player is required"):
            app.album_detail(make_album())

    def test_recents_can_be_disabled(self, config, fake_catalog):
        """Without persistence no database is created."""
        config.recents.enabled = False

        app = RediscoverApp(config, catalog=fake_catalog)

        assert app.db_manager is None

    def test_catalog_built_from_config(self, config):
        """The configured catalog source selects the client."""
        app = RediscoverApp(config)

        assert isinstance(app.catalog, AppleMusicCatalogClient)
        assert app.search.result_limit == config.search.result_limit
