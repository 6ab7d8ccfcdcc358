"""User stores."""

from callwatch.users.store import UserStore
from callwatch.users.stores.inmemory import InMemoryUserStore
from callwatch.users.stores.instrumented import InstrumentedUserStore

__all__ = [
    "UserStore",
    "InMemoryUserStore",
    "InstrumentedUserStore",
]
