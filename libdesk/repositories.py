from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .domain import Book


class DataStore(ABC):
    """Lookup and persistence of books keyed by ISBN."""

    @abstractmethod
    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        pass

    @abstractmethod
    def update_book(self, book: Book) -> None:
        pass


class DatabaseStore(DataStore):
    def __init__(self) -> None:
        self._database: Dict[str, Book] = {}

        # sample data
        self._database["111"] = Book("111", "Clean Code")
        self._database["222"] = Book("222", "Effective Java")

    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._database.get(isbn)

    def update_book(self, book: Book) -> None:
        self._database[book.isbn] = book

    def list_books(self) -> List[Book]:
        return list(self._database.values())


class StubDataStore(DataStore):
    """Empty in-memory store; tests seed it through ``add_book``."""

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}

    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def update_book(self, book: Book) -> None:
        self._books[book.isbn] = book

    def add_book(self, book: Book) -> None:
        self._books[book.isbn] = book

    def list_books(self) -> List[Book]:
        return list(self._books.values())
