"""Database connection and session management."""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from todo_chat.db.models import Base


class Database:
    """Owned handle on the todo database.

    Created once at process start and passed to whatever needs storage.
    Use it as a context manager so the engine is disposed on every exit path.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}
        if url.startswith("sqlite"):
            # Tool calls may run on worker threads
            connect_args["check_same_thread"] = False

        self._engine: Optional[Engine] = create_engine(
            url,
            echo=echo,  # Set to True for SQL debugging
            connect_args=connect_args,
        )
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self._engine,
        )

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database has been closed")
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that is rolled back on error and always closed."""
        if self._engine is None:
            raise RuntimeError("Database has been closed")
        session = self._session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Create the todos table if it does not exist."""
        Base.metadata.create_all(bind=self.engine)

    def reset_db(self) -> None:
        """Drop all tables and recreate them (for testing)."""
        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        """Close the database connection."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    @property
    def closed(self) -> bool:
        return self._engine is None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
