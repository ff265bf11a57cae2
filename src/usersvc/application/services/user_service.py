"""UserService for looking up and saving users."""

import logging

from usersvc.domain.entities import User
from usersvc.domain.repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """User service.

    Delegates every operation to the injected UserRepository with exactly
    one repository call. Errors raised by the repository propagate to the
    caller unchanged.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize UserService.

        Args:
            user_repository: Repository for user persistence.
        """
        self._user_repository = user_repository

    def get_username(self, user_id: int) -> str | None:
        """Get the name of a user.

        Args:
            user_id: User ID.

        Returns:
            The user's name, or None if the user does not exist.
        """
        logger.debug("Looking up user %s", user_id)
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            return None
        return user.name

    def save_user(self, user: User) -> None:
        """Save a user as given.

        Args:
            user: User to save.
        """
        logger.debug("Saving user %s", user.id)
        self._user_repository.save(user)
