"""Port definition for signed identity tokens."""

from typing import Protocol


class TokenProvider(Protocol):
    def issue(self, email: str) -> str:
        """Create a signed, time-bounded token carrying the email."""
        ...

    def verify(self, token: str) -> bool:
        """Return True if signature and expiry are valid. Never raises."""
        ...

    def extract_email(self, token: str) -> str | None:
        """Read the email claim WITHOUT verifying. Call verify() first."""
        ...

    def verify_and_extract(self, token: str) -> str | None:
        """Verify the token and return its email claim, or None if invalid."""
        ...
