from loguru import logger

from src.bookstore.core.errors import BookNotFoundError
from src.bookstore.entities.book.entity import Book, BookDetails
from src.bookstore.entities.book.repository import BookRepository


class BookService:
    """Facade over a book repository.

    The only rule enforced here is that updates and deletes target a stored
    book. The lookup and the write are separate repository calls, so a
    concurrent delete between them is not detected.
    """

    def __init__(self, book_repository: BookRepository):
        self._book_repo = book_repository

    def create_book(self, book: Book) -> Book:
        created = self._book_repo.save(book)
        logger.info("Created book {}", created.id)
        return created

    def get_all_books(self) -> list[Book]:
        return self._book_repo.find_all()

    def get_book_by_id(self, book_id: int) -> Book | None:
        return self._book_repo.find_by_id(book_id)

    def update_book(self, book_id: int, book_details: BookDetails) -> Book:
        """Overwrite title, author, isbn and price of a stored book.

        Raises:
            BookNotFoundError: If no book with ``book_id`` is stored.
        """
        book = self._require_book(book_id)

        book.title = book_details.title
        book.author = book_details.author
        book.isbn = book_details.isbn
        book.price = book_details.price

        updated = self._book_repo.save(book)
        logger.info("Updated book {}", book_id)
        return updated

    def delete_book(self, book_id: int) -> None:
        """Remove a stored book.

        Raises:
            BookNotFoundError: If no book with ``book_id`` is stored.
        """
        book = self._require_book(book_id)
        self._book_repo.delete(book)
        logger.info("Deleted book {}", book_id)

    def _require_book(self, book_id: int) -> Book:
        book = self._book_repo.find_by_id(book_id)
        if book is None:
            logger.warning("Book {} not found", book_id)
            raise BookNotFoundError(book_id)
        return book
