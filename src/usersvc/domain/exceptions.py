"""Domain exceptions."""


class RepositoryError(Exception):
    """Base exception for failures raised by repository implementations."""


class RepositoryUnavailableError(RepositoryError):
    """The backing store cannot be reached.

    Raised by a repository whose storage is closed or disconnected.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize.

        Args:
            message: Error message (optional).
        """
        super().__init__(message or "Repository is not available")
