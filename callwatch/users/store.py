"""UserStore abstract interface."""

from abc import ABC, abstractmethod

from callwatch.users.models import ApplicationUser


class UserStore(ABC):
    """Abstract interface for user record storage.

    Lookups are exact-match on a single field.
    """

    @abstractmethod
    def create(self, user: ApplicationUser) -> ApplicationUser:
        """Store a new user and return it with its assigned id."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> list[ApplicationUser]:
        """Find users by exact name."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> ApplicationUser | None:
        """Get user by identifier."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> ApplicationUser | None:
        """Get user by email."""
        pass

    @abstractmethod
    def find_by_active_flag(self, active_flag: bool) -> list[ApplicationUser]:
        """Find users by active flag."""
        pass
