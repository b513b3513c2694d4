from __future__ import annotations

from threading import Lock

from registry.models.schemas import User


class UserStore:
    """Thread-safe, process-local ordered collection of users (resets on restart)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: list[User] = []
        self._keys: set[tuple[str, str]] = set()

    def snapshot(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def add_if_absent(self, user: User) -> bool:
        # Uniqueness check and append share one critical section.
        with self._lock:
            if user.key in self._keys:
                return False
            self._keys.add(user.key)
            self._users.append(user)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
