"""In-memory implementation of UserStore."""

import re
import threading
from itertools import count

from callwatch.users.models import ApplicationUser
from callwatch.users.store import UserStore

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InMemoryUserStore(UserStore):
    """In-memory implementation of UserStore for testing and development.

    Invalid input is rejected with ValueError.
    """

    def __init__(self) -> None:
        self._users: dict[int, ApplicationUser] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def create(self, user: ApplicationUser) -> ApplicationUser:
        """Store a new user and return it with its assigned id."""
        if not user.name.strip():
            raise ValueError("name must not be blank")
        if not EMAIL_PATTERN.match(user.email):
            raise ValueError(f"invalid email: {user.email!r}")

        with self._lock:
            if any(existing.email == user.email for existing in self._users.values()):
                raise ValueError(f"email already registered: {user.email!r}")
            stored = user.model_copy(update={"id": next(self._ids)})
            self._users[stored.id] = stored
        return stored

    def find_by_name(self, name: str) -> list[ApplicationUser]:
        """Find users by exact name, in creation order."""
        with self._lock:
            return [user for user in self._users.values() if user.name == name]

    def find_by_id(self, user_id: int) -> ApplicationUser | None:
        """Get user by identifier."""
        if user_id < 1:
            raise ValueError(f"user id must be positive, got {user_id}")
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> ApplicationUser | None:
        """Get user by email."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def find_by_active_flag(self, active_flag: bool) -> list[ApplicationUser]:
        """Find users by active flag, in creation order."""
        with self._lock:
            return [user for user in self._users.values() if user.active_flag == active_flag]
