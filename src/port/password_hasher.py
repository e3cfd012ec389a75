"""Port definition for one-way password hashing."""

from typing import Protocol


class PasswordHasher(Protocol):
    def hash(self, plaintext: str) -> str:
        """Return a salted one-way hash. Raises TypeError for None."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if plaintext matches hashed. Never raises."""
        ...
