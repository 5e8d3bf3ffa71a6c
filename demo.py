from __future__ import annotations
import logging

from libdesk import EmailNotificationService, LibrarySystem, seed_demo_data


def demo_flow() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    sys = LibrarySystem(notifier=EmailNotificationService())
    alice, bob = seed_demo_data(sys)

    # Checkout (sends a borrow confirmation)
    print("\n[demo] Bob checks out Clean Code:", sys.checkout(bob, "111"))
    print("[demo] Alice tries the same copy:", sys.checkout(alice, "111"))

    # Reservation notice is only sent for books on the shelf
    print("\n[demo] reservation notices for 111 (out) and 333 (on shelf):")
    sys.reserve_notice(alice, "111")
    sys.reserve_notice(alice, "333")

    # Report inventory
    print("\n[demo] inventory:")
    for book, available in sys.report_inventory():
        print(f"  - {book.title}: {'available' if available else 'issued'}")

    # Overdue report, then return the overdue book
    overdue = sys.report_overdue()
    print("\n[demo] overdue:", [b.title for b in overdue])
    for book in overdue:
        print(f"[demo] returning {book.title}:", sys.return_book(book.borrowed_by, book.isbn))

    print("\n[demo] overdue after returns:", [b.title for b in sys.report_overdue()])


if __name__ == "__main__":
    demo_flow()
