"""Logging setup and service wiring."""

import logging

from usersvc.application.services import UserService
from usersvc.config import Config, LoggingConfig
from usersvc.domain.entities import User
from usersvc.domain.repositories import UserRepository
from usersvc.infrastructure.persistence import InMemoryUserRepository

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, logging is left as is.
    """
    if config is None:
        return

    root_logger = logging.getLogger()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Update handler format if specified
    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def create_user_service(
    config: Config | None = None,
    user_repository: UserRepository | None = None,
) -> UserService:
    """Build a UserService.

    Args:
        config: Application configuration. Its ``users`` seed the in-memory
            repository when no repository is given.
        user_repository: Repository to inject. Takes precedence over config.

    Returns:
        UserService bound to the repository.
    """
    if user_repository is None:
        seeds = config.users if config is not None else []
        user_repository = InMemoryUserRepository(
            User(id=seed.id, name=seed.name) for seed in seeds
        )
        logger.info("Using in-memory user repository with %d users", len(seeds))
    return UserService(user_repository)
