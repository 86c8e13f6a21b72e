"""Entity package: Book."""

from .entity import MAX_BOOK_ID, Book, BookDetails
from .repository import BookRepository, SqlBookRepository
from .table import BookTable

__all__ = ["MAX_BOOK_ID", "Book", "BookDetails", "BookRepository", "SqlBookRepository", "BookTable"]
