"""Unit tests for the book service."""

from unittest.mock import Mock

import pytest

from src.bookstore.core.errors import BookNotFoundError
from src.bookstore.core.services import BookService
from src.bookstore.entities.book import Book, BookDetails, BookRepository


class TestBookService:
    """Test BookService against the SQL repository on an in-memory database."""

    def test_create_book_populates_identifier(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)

        assert created.id is not None
        assert created.title == dune.title
        assert created.author == dune.author
        assert created.isbn == dune.isbn
        assert created.price == dune.price
        assert book_service.get_book_by_id(created.id) == created

    def test_get_all_books_contains_created(self, book_service: BookService):
        created = {
            book_service.create_book(Book(title=t, author="A", isbn=t, price=1.0))
            for t in ("r1", "r2", "r3")
        }

        assert set(book_service.get_all_books()) == created

    def test_get_book_by_id_absent(self, book_service: BookService):
        assert book_service.get_book_by_id(12345) is None

    def test_update_book_overwrites_descriptive_fields(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)
        details = BookDetails(title="Dune: New Ed", author="F. Herbert", isbn="124", price=12.5)

        updated = book_service.update_book(created.id, details)

        assert updated.id == created.id
        assert updated.title == details.title
        assert updated.author == details.author
        assert updated.isbn == details.isbn
        assert updated.price == details.price
        assert book_service.get_book_by_id(created.id) == updated

    def test_update_ignores_identifier_of_details(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)
        details = Book(id=999, title="Other", author="B", isbn="9", price=1.0)

        updated = book_service.update_book(created.id, details)

        assert updated.id == created.id
        assert book_service.get_book_by_id(999) is None

    def test_update_missing_book_raises(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)
        details = BookDetails(title="X", author="Y", isbn="Z", price=0.0)

        with pytest.raises(BookNotFoundError) as exc_info:
            book_service.update_book(created.id + 1, details)

        assert exc_info.value.book_id == created.id + 1
        assert str(created.id + 1) in str(exc_info.value)
        # Storage unchanged
        assert book_service.get_all_books() == [created]

    def test_delete_book(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)

        assert book_service.delete_book(created.id) is None
        assert book_service.get_book_by_id(created.id) is None

    def test_delete_missing_book_raises(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)

        with pytest.raises(BookNotFoundError) as exc_info:
            book_service.delete_book(77)

        assert exc_info.value.book_id == 77
        assert book_service.get_all_books() == [created]

    def test_update_keeps_created_at(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)

        updated = book_service.update_book(
            created.id, BookDetails(title="Dune Messiah", author="Herbert", isbn="124", price=8.0)
        )

        assert updated.created_at == created.created_at
        assert book_service.get_book_by_id(created.id).created_at == created.created_at

    def test_ids_beyond_integer_column_are_absent(self, book_service: BookService, dune: Book):
        created = book_service.create_book(dune)
        details = BookDetails(title="X", author="Y", isbn="Z", price=0.0)

        assert book_service.get_book_by_id(2**63) is None
        with pytest.raises(BookNotFoundError) as exc_info:
            book_service.delete_book(2**63)
        assert exc_info.value.book_id == 2**63
        with pytest.raises(BookNotFoundError):
            book_service.update_book(2**63, details)
        assert book_service.get_all_books() == [created]

    def test_dune_lifecycle(self, book_service: BookService, dune: Book):
        """Create, read, update and delete a single record end to end."""
        created = book_service.create_book(dune)
        assert created.id == 1
        assert created == Book(id=1, title="Dune", author="Herbert", isbn="123", price=9.99)

        fetched = book_service.get_book_by_id(1)
        assert fetched == created

        updated = book_service.update_book(
            1, BookDetails(title="Dune: New Ed", author="Herbert", isbn="123", price=9.99)
        )
        assert updated.title == "Dune: New Ed"
        assert updated.id == 1

        book_service.delete_book(1)
        assert book_service.get_book_by_id(1) is None

        with pytest.raises(BookNotFoundError, match="Book not found with id: 1"):
            book_service.delete_book(1)


class TestBookServiceDelegation:
    """Test BookService against a mocked repository."""

    @pytest.fixture
    def repository(self) -> Mock:
        return Mock(spec=BookRepository)

    @pytest.fixture
    def service(self, repository: Mock) -> BookService:
        return BookService(repository)

    def test_create_book_returns_saved_record(self, service: BookService, repository: Mock):
        book = Book(title="Dune", author="Herbert", isbn="123", price=9.99)
        stored = book.model_copy(update={"id": 5})
        repository.save.return_value = stored

        assert service.create_book(book) is stored
        repository.save.assert_called_once_with(book)

    def test_get_all_books_delegates(self, service: BookService, repository: Mock):
        repository.find_all.return_value = []

        assert service.get_all_books() == []
        repository.find_all.assert_called_once_with()

    def test_update_missing_book_does_not_save(self, service: BookService, repository: Mock):
        repository.find_by_id.return_value = None

        with pytest.raises(BookNotFoundError):
            service.update_book(3, BookDetails(title="X", author="Y", isbn="Z", price=1.0))

        repository.save.assert_not_called()

    def test_delete_missing_book_does_not_delete(self, service: BookService, repository: Mock):
        repository.find_by_id.return_value = None

        with pytest.raises(BookNotFoundError):
            service.delete_book(3)

        repository.delete.assert_not_called()

    def test_delete_passes_stored_record(self, service: BookService, repository: Mock):
        stored = Book(id=3, title="Dune", author="Herbert", isbn="123", price=9.99)
        repository.find_by_id.return_value = stored

        service.delete_book(3)

        repository.find_by_id.assert_called_once_with(3)
        repository.delete.assert_called_once_with(stored)

    def test_persistence_errors_propagate(self, service: BookService, repository: Mock):
        repository.save.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            service.create_book(Book(title="Dune", author="Herbert", isbn="123", price=9.99))


class TestBookNotFoundError:
    def test_is_lookup_error(self):
        error = BookNotFoundError(4)

        assert isinstance(error, LookupError)
        assert error.book_id == 4
        assert str(error) == "Book not found with id: 4"
