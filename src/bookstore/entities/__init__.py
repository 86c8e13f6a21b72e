"""Entities organised by business concept.

Each entity package contains:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .book import Book, BookDetails, BookRepository, BookTable, SqlBookRepository

__all__ = [
    "Book",
    "BookDetails",
    "BookTable",
    "BookRepository",
    "SqlBookRepository",
]
