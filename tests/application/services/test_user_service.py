"""Tests for UserService."""

import logging
from unittest.mock import Mock

import pytest

from usersvc.application.services import UserService
from usersvc.domain.entities import User
from usersvc.domain.exceptions import RepositoryUnavailableError
from usersvc.domain.repositories import UserRepository
from usersvc.infrastructure.persistence import InMemoryUserRepository


@pytest.fixture
def mock_user_repository() -> Mock:
    """Create mock user repository."""
    repo = Mock(spec=UserRepository)
    repo.find_by_id.return_value = None
    repo.save.return_value = None
    return repo


@pytest.fixture
def service(mock_user_repository: Mock) -> UserService:
    """Create service instance."""
    return UserService(mock_user_repository)


class TestGetUsername:
    """get_username method tests."""

    def test_returns_name_of_existing_user(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that the name of a found user is returned."""
        mock_user_repository.find_by_id.return_value = User(1, "Alice")

        username = service.get_username(1)

        assert username == "Alice"
        mock_user_repository.find_by_id.assert_called_once_with(1)

    def test_returns_none_for_missing_user(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that a missing user yields None, not an error."""
        username = service.get_username(99)

        assert username is None
        mock_user_repository.find_by_id.assert_called_once_with(99)

    def test_returns_empty_name(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that an empty name is distinct from a missing user."""
        mock_user_repository.find_by_id.return_value = User(5, "")

        username = service.get_username(5)

        assert username == ""

    def test_does_not_save(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that lookups never write to the repository."""
        mock_user_repository.find_by_id.return_value = User(1, "Alice")

        service.get_username(1)

        mock_user_repository.save.assert_not_called()

    def test_no_caching_between_calls(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that every call goes to the repository."""
        mock_user_repository.find_by_id.side_effect = [
            User(1, "Alice"),
            User(1, "Alicia"),
        ]

        assert service.get_username(1) == "Alice"
        assert service.get_username(1) == "Alicia"
        assert mock_user_repository.find_by_id.call_count == 2

    def test_propagates_repository_error(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that repository errors reach the caller unchanged."""
        error = RepositoryUnavailableError("connection refused")
        mock_user_repository.find_by_id.side_effect = error

        with pytest.raises(RepositoryUnavailableError) as exc_info:
            service.get_username(1)

        assert exc_info.value is error
        mock_user_repository.find_by_id.assert_called_once_with(1)

    def test_propagates_arbitrary_error(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that errors outside the repository taxonomy also propagate."""
        error = OSError("disk failure")
        mock_user_repository.find_by_id.side_effect = error

        with pytest.raises(OSError) as exc_info:
            service.get_username(1)

        assert exc_info.value is error

    def test_logs_missing_user(
        self,
        service: UserService,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that a miss is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="usersvc.application"):
            service.get_username(99)

        assert "User 99 not found" in caplog.text

    def test_logs_lookup(
        self,
        service: UserService,
        mock_user_repository: Mock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that every lookup is logged at DEBUG level."""
        mock_user_repository.find_by_id.return_value = User(1, "Alice")

        with caplog.at_level(logging.DEBUG, logger="usersvc.application"):
            service.get_username(1)

        assert "Looking up user 1" in caplog.text
        assert "not found" not in caplog.text


class TestSaveUser:
    """save_user method tests."""

    def test_delegates_to_repository(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that save is called once with the given user."""
        user = User(2, "Bob")

        result = service.save_user(user)

        assert result is None
        mock_user_repository.save.assert_called_once_with(user)

    def test_forwards_same_object(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that the user is forwarded without transformation."""
        user = User(2, "Bob")

        service.save_user(user)

        saved = mock_user_repository.save.call_args.args[0]
        assert saved is user
        assert saved.id == 2
        assert saved.name == "Bob"

    def test_does_not_look_up(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that saving does not read from the repository."""
        service.save_user(User(2, "Bob"))

        mock_user_repository.find_by_id.assert_not_called()

    def test_propagates_repository_error(
        self, service: UserService, mock_user_repository: Mock
    ) -> None:
        """Test that save errors reach the caller unchanged."""
        error = RepositoryUnavailableError()
        mock_user_repository.save.side_effect = error

        with pytest.raises(RepositoryUnavailableError) as exc_info:
            service.save_user(User(2, "Bob"))

        assert exc_info.value is error


class TestWithInMemoryRepository:
    """UserService tests against a stateful repository."""

    @pytest.fixture
    def repository(self) -> InMemoryUserRepository:
        """Create repository containing Alice."""
        return InMemoryUserRepository([User(1, "Alice")])

    def test_round_trip(self, repository: InMemoryUserRepository) -> None:
        """Test that a saved user can be looked up by name."""
        service = UserService(repository)

        service.save_user(User(2, "Bob"))

        assert service.get_username(1) == "Alice"
        assert service.get_username(2) == "Bob"
        assert service.get_username(99) is None

    def test_save_twice_is_idempotent(
        self, repository: InMemoryUserRepository
    ) -> None:
        """Test that saving the same user twice equals saving it once."""
        service = UserService(repository)
        user = User(2, "Bob")

        service.save_user(user)
        once = repository.find_all()
        service.save_user(user)

        assert repository.find_all() == once
        assert len(repository) == 2

    def test_closed_repository_error_propagates(
        self, repository: InMemoryUserRepository
    ) -> None:
        """Test that an unavailable store surfaces through the service."""
        service = UserService(repository)
        repository.close()

        with pytest.raises(RepositoryUnavailableError):
            service.get_username(1)
        with pytest.raises(RepositoryUnavailableError):
            service.save_user(User(2, "Bob"))
