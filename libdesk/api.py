from __future__ import annotations
from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

from .config import DEFAULT_LOAN_DAYS
from .domain import Book, User
from .notifications import NotificationService
from .repositories import DatabaseStore, StubDataStore
from .services import LibraryService


class LibrarySystem:
    """
    Front desk over one in-memory store. Circulation goes through
    LibraryService; the inventory and overdue reports read the store's
    full listing, so only the in-memory stores are accepted here.
    """

    def __init__(
        self,
        store: Optional[Union[DatabaseStore, StubDataStore]] = None,
        notifier: Optional[NotificationService] = None,
        loan_days: int = DEFAULT_LOAN_DAYS,
    ) -> None:
        self.store = store if store is not None else StubDataStore()
        self.notifier = notifier
        self.loan_days = loan_days
        self.service = LibraryService(self.store, self.notifier)

    # ---- catalog
    def add_book(self, isbn: str, title: str) -> Book:
        book = Book(isbn=isbn, title=title)
        self.store.update_book(book)
        return book

    # ---- circulation
    def checkout(self, user: User, isbn: str, due_date: Optional[date] = None) -> bool:
        due = due_date or date.today() + timedelta(days=self.loan_days)
        return self.service.issue_book_with_due_date(user, isbn, due)

    def return_book(self, user: User, isbn: str) -> bool:
        return self.service.return_book_enhanced(user, isbn)

    def reserve_notice(self, user: User, isbn: str) -> None:
        self.service.notify_reservation(user, isbn)

    # ---- reporting
    def report_inventory(self) -> List[Tuple[Book, bool]]:
        """
        Returns tuples of (Book, available)
        """
        return [(book, book.available) for book in self.store.list_books()]

    def report_overdue(self, current_date: Optional[date] = None) -> List[Book]:
        today = current_date or date.today()
        return [b for b in self.store.list_books() if b.is_overdue(today)]
