"""Application services."""

from usersvc.application.services.user_service import UserService

__all__ = ["UserService"]
