"""Engine ownership and per-request sessions."""

from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.bookstore.runtime.config.config_data import DatabaseConfig
from src.bookstore.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        db_config = db_config or get_config().database

        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}
        if db_config.is_sqlite:
            # FastAPI runs sync routes in a threadpool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if db_config.is_in_memory:
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(pool_size=db_config.pool_size, pool_pre_ping=True)

        logger.info("Opening {} database engine", db_config.backend)
        self._engine = create_engine(db_config.url, **engine_kwargs)

    @property
    def engine(self):
        return self._engine

    def get_session(self) -> Session:
        return Session(self._engine, expire_on_commit=False)

    def health_check(self) -> bool:
        """Run ``SELECT 1``; any database error counts as unhealthy."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}", type(e).__name__)
            return False
        return True

    def dispose(self) -> None:
        self._engine.dispose()
