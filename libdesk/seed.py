from __future__ import annotations
import logging
from datetime import date, timedelta
from typing import List

from .api import LibrarySystem
from .domain import User

logger = logging.getLogger(__name__)


def seed_demo_data(system: LibrarySystem) -> List[User]:
    # users
    alice = User("u1", "Alice Reader")
    bob = User("u2", "Bob Librarian", is_admin=True)

    # books
    system.add_book("111", "Clean Code")
    system.add_book("222", "Effective Java")
    system.add_book("333", "Refactoring")

    # checkout already past its due date (overdue by 3 days)
    system.checkout(alice, "222", due_date=date.today() - timedelta(days=3))

    logger.info("seeded users: %s", [u.name for u in (alice, bob)])
    logger.info("seeded books: %s", [b.title for b, _ in system.report_inventory()])
    return [alice, bob]
