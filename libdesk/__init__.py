"""
LibDesk: book checkout over an injected store and an optional notifier.
"""

from .domain import (
    User,
    Book,
)

from .repositories import (
    DataStore,
    DatabaseStore,
    StubDataStore,
)

from .notifications import (
    NotificationService,
    EmailNotificationService,
)

from .services import LibraryService

from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # domain
    "User",
    "Book",
    # stores
    "DataStore",
    "DatabaseStore",
    "StubDataStore",
    # notifications
    "NotificationService",
    "EmailNotificationService",
    # services
    "LibraryService",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
