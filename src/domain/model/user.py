# domain/model/user.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


# ── Value Objects ────────────────────────────────────────


@dataclass(frozen=True)
class Phone:
    """Phone number owned by a user. No identity outside its user."""
    number: int
    city_code: int
    country_code: str


# ── User Domain Model ────────────────────────────────────


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    email: str
    password_hash: str
    created: datetime
    name: str | None = None
    phones: list[Phone] = field(default_factory=list)
    last_login: datetime | None = None
    active: bool = True

    # ── factory ───────────────────────────────────────────

    @staticmethod
    def create(
        email: str,
        password_hash: str,
        name: str | None = None,
        phones: list[Phone] | None = None,
    ) -> 'User':
        """Create a new active User with a generated ID.

        created and last_login share the same instant.
        """
        now = datetime.now(timezone.utc)
        return User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            created=now,
            name=name,
            phones=list(phones or []),
            last_login=now,
            active=True,
        )

    # ── state transitions ─────────────────────────────────

    def record_login(self) -> None:
        """Stamp a successful authentication."""
        self.last_login = datetime.now(timezone.utc)
