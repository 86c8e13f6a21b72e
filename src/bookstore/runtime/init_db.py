"""Database initialization script."""

from src.bookstore.core.services.database.db_manage import DbManageService
from src.bookstore.core.services.database.db_session import DbSessionService


def init_db() -> None:
    """Create all database tables."""
    db_session_service = DbSessionService()
    DbManageService(db_session_service.engine).create_all()


if __name__ == "__main__":
    init_db()
