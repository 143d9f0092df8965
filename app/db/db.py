import logging
import os
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from app.utils.errors import StoreUnavailableError

# register tables on SQLModel.metadata
from app.models import claim, item, loss_report, user  # noqa: F401

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lostfound.db")


class Database:
    """Explicit handle on the entity store.

    Nothing touches the engine until ``connect()`` succeeds; sessions
    requested before that (or after ``close()``) raise
    ``StoreUnavailableError`` instead of failing somewhere deeper.
    """

    def __init__(self, url: str = DATABASE_URL, **engine_kwargs):
        self.url = url
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[Engine] = None

        if url.startswith("sqlite"):
            self.engine_kwargs.setdefault("connect_args", {"check_same_thread": False})

    @property
    def connected(self) -> bool:
        return self.engine is not None

    def connect(self) -> None:
        try:
            engine = create_engine(self.url, **self.engine_kwargs)
        except (SQLAlchemyError, ImportError) as e:
            raise StoreUnavailableError(f"Invalid database configuration: {e}") from e

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            SQLModel.metadata.create_all(engine)
        except SQLAlchemyError as e:
            engine.dispose()
            raise StoreUnavailableError(f"Database unreachable: {e}") from e

        self.engine = engine
        logger.info("Database connected: %s", engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            logger.info("Database connection closed")

    def session(self) -> Iterator[Session]:
        if self.engine is None:
            raise StoreUnavailableError("Database not initialized")

        with Session(self.engine) as session:
            yield session


def get_session(request: Request) -> Iterator[Session]:
    db: Optional[Database] = getattr(request.app.state, "db", None)
    if db is None:
        raise StoreUnavailableError("Database not initialized")

    yield from db.session()
