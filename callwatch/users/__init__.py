"""User records: the storage collaborator wrapped by the call interceptor."""

from callwatch.users.models import ApplicationUser
from callwatch.users.store import UserStore
from callwatch.users.stores import InMemoryUserStore, InstrumentedUserStore

__all__ = [
    "ApplicationUser",
    "UserStore",
    "InMemoryUserStore",
    "InstrumentedUserStore",
]
