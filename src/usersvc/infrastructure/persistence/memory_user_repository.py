"""In-memory implementation of UserRepository."""

import logging
import threading
from collections.abc import Iterable

from usersvc.domain.entities import User
from usersvc.domain.exceptions import RepositoryUnavailableError

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """In-memory UserRepository implementation.

    Keeps users in a dict keyed by user ID. All access is serialized with a
    lock, so one instance can be shared between threads.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize.

        Args:
            users: Initial users. Later entries overwrite earlier ones
                with the same ID.
        """
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._closed = False
        for user in users or ():
            self._users[user.id] = user

    def save(self, user: User) -> None:
        """Save a user (upsert).

        Args:
            user: User to save.

        Raises:
            RepositoryUnavailableError: The repository has been closed.
        """
        with self._lock:
            self._ensure_open()
            if user.id in self._users:
                logger.debug("Overwriting user %s", user.id)
            self._users[user.id] = user

    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID.

        Args:
            user_id: User ID.

        Returns:
            The user, or None if no user has this ID.

        Raises:
            RepositoryUnavailableError: The repository has been closed.
        """
        with self._lock:
            self._ensure_open()
            return self._users.get(user_id)

    def find_all(self) -> list[User]:
        """Return all users ordered by ID."""
        with self._lock:
            self._ensure_open()
            return [self._users[user_id] for user_id in sorted(self._users)]

    def close(self) -> None:
        """Close the repository.

        Subsequent reads and writes raise RepositoryUnavailableError.
        Stored users are kept, and len() still reports their count.
        """
        with self._lock:
            self._closed = True

    def __len__(self) -> int:
        """Return the number of stored users.

        Unlike the other methods, this keeps working after close() so the
        final state can still be inspected.
        """
        with self._lock:
            return len(self._users)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RepositoryUnavailableError("In-memory user repository is closed")
