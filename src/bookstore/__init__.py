"""Bookstore service.

CRUD service layer for books, exposed over a FastAPI HTTP API and backed by
SQLModel persistence.
"""

__version__ = "0.1.0"
