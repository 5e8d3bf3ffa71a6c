from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from libdesk.domain import Book, User


def test_new_book_is_available_with_no_borrower():
    book = Book("111", "Clean Code")
    assert book.isbn == "111"
    assert book.title == "Clean Code"
    assert book.available
    assert book.borrowed_by is None
    assert book.due_date is None


def test_borrow_and_return_round_trip():
    user = User("u1", "Alice")
    book = Book("111", "Clean Code")

    book.borrow_by(user, date(2024, 1, 15))
    assert not book.available
    assert book.borrowed_by == user
    assert book.due_date == date(2024, 1, 15)

    book.return_book()
    assert book.available
    assert book.borrowed_by is None
    assert book.due_date is None


def test_is_overdue_only_after_due_date():
    book = Book("111", "Clean Code")
    book.borrow_by(User("u1", "Alice"), date(2024, 1, 15))

    assert not book.is_overdue(date(2024, 1, 14))
    assert not book.is_overdue(date(2024, 1, 15))
    assert book.is_overdue(date(2024, 1, 16))


def test_available_book_is_never_overdue():
    book = Book("111", "Clean Code", due_date=date(2024, 1, 1))
    assert not book.is_overdue(date(2024, 6, 1))


def test_user_defaults_and_immutability():
    user = User("u1", "Alice")
    assert not user.is_admin
    assert User("u2", "Bob", is_admin=True).is_admin

    with pytest.raises(FrozenInstanceError):
        user.name = "Mallory"
