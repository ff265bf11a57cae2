"""Domain entities."""

from usersvc.domain.entities.user import User

__all__ = ["User"]
