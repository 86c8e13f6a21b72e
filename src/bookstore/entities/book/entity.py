"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, Field

from src.bookstore.entities._base import Entity

# Largest value a 64-bit INTEGER primary key can hold
MAX_BOOK_ID = 2**63 - 1


class BookDetails(BaseModel):
    """Descriptive fields of a book, as supplied by callers."""

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    isbn: str = Field(description="ISBN")
    price: float = Field(description="Price", allow_inf_nan=False)


class Book(Entity, BookDetails):
    """Book entity representing a book in the system.

    This is the domain model handed to and returned by the service layer.
    The identifier stays ``None`` until the repository stores the book.
    """

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.isbn == other.isbn
            and self.price == other.price
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.isbn,
            self.price,
        ))
