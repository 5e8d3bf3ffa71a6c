import io
import logging

from libdesk.domain import Book, User
from libdesk.notifications import EmailNotificationService


def _user_and_book():
    return User("u1", "Alice"), Book("111", "Clean Code")


def test_borrowed_message():
    out = io.StringIO()
    user, book = _user_and_book()
    EmailNotificationService(out).notify_book_borrowed(user, book)
    assert out.getvalue() == (
        "EMAIL: Dear Alice, you have successfully borrowed 'Clean Code'.\n"
    )


def test_reservation_message():
    out = io.StringIO()
    user, book = _user_and_book()
    EmailNotificationService(out).notify_reservation_available(user, book)
    assert out.getvalue() == (
        "EMAIL: Dear Alice, your reserved book 'Clean Code' is now available!\n"
    )


def test_overdue_message_defaults_to_stdout(capsys):
    user, book = _user_and_book()
    EmailNotificationService().notify_overdue(user, book)
    assert capsys.readouterr().out == (
        "EMAIL: Dear Alice, your book 'Clean Code' is overdue!\n"
    )


def test_messages_are_logged(caplog):
    user, book = _user_and_book()
    with caplog.at_level(logging.INFO, logger="libdesk.notifications"):
        EmailNotificationService(io.StringIO()).notify_overdue(user, book)
    assert "is overdue" in caplog.text
