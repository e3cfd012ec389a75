from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for the user directory, keyed by email."""
    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if a user with this email is registered."""
        ...

    def save(self, user: User) -> User:
        """Insert or update a user by ID and return the stored User.

        Raises DuplicateError if another user already owns the email.
        """
        ...
