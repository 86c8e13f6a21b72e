"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlmodel import Session

from src.bookstore.api.http.deps import get_book_service, get_db_session
from src.bookstore.core.errors import BookNotFoundError
from src.bookstore.core.services import BookService
from src.bookstore.entities.book import MAX_BOOK_ID, Book, BookDetails

router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[int, Path(ge=1, le=MAX_BOOK_ID)]


@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book: BookDetails,
    service: BookService = Depends(get_book_service),
    session: Session = Depends(get_db_session),
) -> Book:
    """Create a new book."""
    created_book = service.create_book(Book(**book.model_dump()))
    session.commit()
    return created_book


@router.get("/", response_model=list[Book])
def list_books(
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return service.get_all_books()


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    book = service.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail=str(BookNotFoundError(book_id)))
    return book


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: BookId,
    book_details: BookDetails,
    service: BookService = Depends(get_book_service),
    session: Session = Depends(get_db_session),
) -> Book:
    """Update a book."""
    try:
        updated_book = service.update_book(book_id, book_details)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    session.commit()
    return updated_book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete a book."""
    try:
        service.delete_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
