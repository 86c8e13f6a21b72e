"""Book data-access layer."""

from datetime import UTC, datetime
from typing import Protocol

from sqlmodel import Session, select

from src.bookstore.entities.book.entity import MAX_BOOK_ID, Book
from src.bookstore.entities.book.table import BookTable

_DETAIL_FIELDS = {"title", "author", "isbn", "price"}


def _storable(book_id: int) -> bool:
    """Ids the INTEGER column cannot hold are never stored."""
    return -MAX_BOOK_ID - 1 <= book_id <= MAX_BOOK_ID


class BookRepository(Protocol):
    """Persistence capability the book service depends on."""

    def save(self, book: Book) -> Book: ...

    def find_all(self) -> list[Book]: ...

    def find_by_id(self, book_id: int) -> Book | None: ...

    def delete(self, book: Book) -> None: ...


class SqlBookRepository:
    """SQLModel-backed book repository.

    Changes are flushed so identifiers are assigned, but never committed;
    the owner of the session decides the transaction boundary.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, book: Book) -> Book:
        row = None
        if book.id is not None:
            row = self._session.get(BookTable, book.id)

        if row is None:
            row = BookTable.model_validate(book, from_attributes=True)
        else:
            row.sqlmodel_update(book.model_dump(include=_DETAIL_FIELDS))
            row.updated_at = datetime.now(UTC)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def find_all(self) -> list[Book]:
        statement = select(BookTable).order_by(BookTable.id)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, book_id: int) -> Book | None:
        if not _storable(book_id):
            return None
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book: Book) -> None:
        if book.id is None or not _storable(book.id):
            return
        row = self._session.get(BookTable, book.id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()
