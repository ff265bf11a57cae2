"""Domain repositories."""

from usersvc.domain.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
