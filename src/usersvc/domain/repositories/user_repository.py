"""User repository protocol."""

from typing import Protocol

from usersvc.domain.entities import User


class UserRepository(Protocol):
    """Abstract interface for user storage.

    Hides the storage technology from the service layer. Implementations
    signal storage failures by raising (see ``usersvc.domain.exceptions``);
    a missing user is not a failure.
    """

    def save(self, user: User) -> None:
        """Save a user.

        Overwrites the stored record when a user with the same id exists.
        Saving the same value twice leaves the same state as saving it once.

        Args:
            user: User to save.
        """
        ...

    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID.

        Args:
            user_id: User ID.

        Returns:
            The user, or None if no user has this ID.
        """
        ...
