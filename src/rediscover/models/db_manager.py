# Copyright (c) 2025 rediscover and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""SQLite storage for the recently viewed albums history."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

from rediscover.models.database import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Own the engine and session factory of one history database.

    The application creates a single manager and hands it to the recent
    albums repository; nothing here is module-global. Until `initialize`
    succeeds the repository treats the history as unpersisted.
    """

    def __init__(self, database_path: Path | str) -> None:
        self.database_path = Path(database_path)
        self.engine: Engine | None = None
        self.session_factory: sessionmaker[Session] | None = None

    @property
    def database_url(self) -> str:
        """Get the SQLAlchemy URL of the history file."""
        return f"sqlite:///{self.database_path}"

    @property
    def is_initialized(self) -> bool:
        """Check whether sessions can be opened."""
        return self.session_factory is not None

    def initialize(self) -> None:
        """Open the history file, creating it and the `recent_albums` table."""
        self.database_path.parent.mkdir(parents=True, exist_ok=True)

        # Qt callers may touch the store from another thread
        self.engine = create_engine(
            self.database_url, connect_args={"check_same_thread": False}
        )
        self.session_factory = sessionmaker(bind=self.engine)
        self.create_tables()

        logger.info("Recent albums database opened at %s", self.database_path)

    def create_tables(self) -> None:
        """Create the `recent_albums` table if it does not exist yet."""
        if self.engine is None:
            msg = "Database engine not initialized"
            raise RuntimeError(msg)

        Base.metadata.create_all(self.engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Open a session, rolling it back if the block raises.

        Callers commit explicitly; the history is always rewritten whole
        inside one such session.
        """
        if self.session_factory is None:
            msg = "Database not initialized"
            raise RuntimeError(msg)

        session = self.session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Dispose of the engine; the manager can be initialized again later."""
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self.session_factory = None
        logger.info("Recent albums database closed")
