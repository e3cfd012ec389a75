"""In-memory implementation of UserRepository for testing and local runs."""

import copy
import threading

from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User:
        with self._lock:
            existing = self.store.get(user.email)
            if existing and existing.id != user.id:
                raise DuplicateError(f"User with email {user.email} already exists")

            self.store[user.email] = copy.deepcopy(user)
            return copy.deepcopy(user)

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            user = self.store.get(email)
            return copy.deepcopy(user) if user else None

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return email in self.store
