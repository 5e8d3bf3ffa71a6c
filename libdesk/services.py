from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from .domain import User
from .notifications import NotificationService
from .repositories import DataStore

logger = logging.getLogger(__name__)


class LibraryService:
    """
    Issue/return workflows over an injected store.

    The notifier is optional; without one the service never sends anything.
    Refusals (unknown ISBN, book already out) come back as False, never as
    exceptions.
    """

    def __init__(
        self,
        store: DataStore,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.store = store
        self.notification_service = notification_service

    def issue_book(self, user: User, isbn: str) -> bool:
        book = self.store.find_book_by_isbn(isbn)
        if book is None:
            logger.debug("issue: no book with isbn=%s", isbn)
            return False
        if not book.available:
            logger.debug("issue: isbn=%s already issued", isbn)
            return False

        book.available = False
        self.store.update_book(book)
        logger.info("issued isbn=%s to user=%s", isbn, user.id)
        return True

    def issue_book_with_due_date(self, user: User, isbn: str, due_date: date) -> bool:
        book = self.store.find_book_by_isbn(isbn)
        if book is None:
            logger.debug("issue: no book with isbn=%s", isbn)
            return False
        if not book.available:
            logger.debug("issue: isbn=%s already issued", isbn)
            return False

        book.borrow_by(user, due_date)
        self.store.update_book(book)
        logger.info("issued isbn=%s to user=%s due=%s", isbn, user.id, due_date)

        if self.notification_service is not None:
            self.notification_service.notify_book_borrowed(user, book)
        return True

    def return_book(self, user: User, isbn: str) -> bool:
        # no check that the book was actually out
        book = self.store.find_book_by_isbn(isbn)
        if book is None:
            logger.debug("return: no book with isbn=%s", isbn)
            return False

        book.available = True
        self.store.update_book(book)
        logger.info("returned isbn=%s by user=%s", isbn, user.id)
        return True

    def return_book_enhanced(self, user: User, isbn: str) -> bool:
        book = self.store.find_book_by_isbn(isbn)
        if book is None:
            logger.debug("return: no book with isbn=%s", isbn)
            return False

        book.return_book()
        self.store.update_book(book)
        logger.info("returned isbn=%s by user=%s, borrower cleared", isbn, user.id)
        return True

    def process_overdue_books(self, current_date: date) -> None:
        """Extension point for overdue reminders. Sends nothing today."""
        if self.notification_service is None:
            return
        # borrowed books are not enumerated here; see LibrarySystem.report_overdue

    def notify_reservation(self, user: User, isbn: str) -> None:
        if self.notification_service is None:
            return

        book = self.store.find_book_by_isbn(isbn)
        if book is not None and book.available:
            self.notification_service.notify_reservation_available(user, book)
