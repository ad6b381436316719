# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Main entry point for the rediscover application."""

import asyncio
import logging
import sys
from pathlib import Path

from rediscover.config.user import UserConfig
from rediscover.services.app import RediscoverApp

logging.basicConfig(format="%(levelname)s:%(message)s", level=logging.INFO)

CONFIG_PATH = Path("~/.config/rediscover/config.toml").expanduser()


def load_config() -> UserConfig:
    """Load the user configuration, falling back to defaults."""
    if CONFIG_PATH.exists():
        return UserConfig.from_toml_file(CONFIG_PATH)
    return UserConfig()


async def run(term: str) -> None:
    """Search once and print what the browse screen would list."""
    async with RediscoverApp(load_config()) as app:
        browse = app.browse()
        browse.set_search_term(term)
        await app.search.wait_idle()

        heading = "Recently viewed" if browse.is_showing_recents else "Results"
        print(f"{heading}:")
        for album in browse.visible_albums:
            year = f" ({album.release_year})" if album.release_year else ""
            print(f"  {album.title} - {album.artist_name}{year}")


def main() -> None:
    """Execute main function to run the rediscover application."""
    asyncio.run(run(" ".join(sys.argv[1:])))


if __name__ == "__main__":
    main()
