"""Domain errors raised by the service layer."""


class BookNotFoundError(LookupError):
    """Raised when an operation needs a book that is not stored."""

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"Book not found with id: {book_id}")
