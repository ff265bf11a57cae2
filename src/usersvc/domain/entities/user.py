"""User entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User entity (storage-independent).

    Attributes:
        id: Identifier assigned by the caller or the storage layer.
        name: Display name. Any string is accepted, including "".
    """

    id: int
    name: str
