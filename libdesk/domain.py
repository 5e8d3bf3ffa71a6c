from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class User:
    id: str
    name: str
    is_admin: bool = False


@dataclass
class Book:
    isbn: str
    title: str
    available: bool = True
    borrowed_by: Optional[User] = None
    due_date: Optional[date] = None

    def borrow_by(self, user: User, due_date: date) -> None:
        self.borrowed_by = user
        self.due_date = due_date
        self.available = False

    def return_book(self) -> None:
        self.borrowed_by = None
        self.due_date = None
        self.available = True

    def is_overdue(self, current_date: date) -> bool:
        return (
            self.due_date is not None
            and current_date > self.due_date
            and not self.available
        )
