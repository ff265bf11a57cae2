"""Persistence infrastructure."""

from usersvc.infrastructure.persistence.memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
