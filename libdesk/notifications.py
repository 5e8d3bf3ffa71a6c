from __future__ import annotations
import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .domain import Book, User

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """One-way messages to patrons. Callers get nothing back."""

    @abstractmethod
    def notify_overdue(self, user: User, book: Book) -> None:
        pass

    @abstractmethod
    def notify_reservation_available(self, user: User, book: Book) -> None:
        pass

    @abstractmethod
    def notify_book_borrowed(self, user: User, book: Book) -> None:
        pass


class EmailNotificationService(NotificationService):
    """
    Writes one "EMAIL:" line per notification to a text sink (stdout unless
    told otherwise). Stands in for a real mail gateway.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def _send(self, message: str) -> None:
        logger.info("sending notification: %s", message)
        print(f"EMAIL: {message}", file=self.out or sys.stdout)

    def notify_overdue(self, user: User, book: Book) -> None:
        self._send(f"Dear {user.name}, your book '{book.title}' is overdue!")

    def notify_reservation_available(self, user: User, book: Book) -> None:
        self._send(
            f"Dear {user.name}, your reserved book '{book.title}' is now available!"
        )

    def notify_book_borrowed(self, user: User, book: Book) -> None:
        self._send(f"Dear {user.name}, you have successfully borrowed '{book.title}'.")
