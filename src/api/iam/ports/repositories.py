"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations never manage transactions; the calling
application service owns the transaction boundary.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence (the credential store)."""

    async def create(
        self,
        username: str,
        display_name: str,
        password_hash: str,
        gender: str,
        location: str,
    ) -> User:
        """Insert a new user and return it with its store-assigned id.

        Args:
            username: Unique, case-sensitive login name
            display_name: Human readable name
            password_hash: Opaque one-way hash of the password
            gender: Free-form profile field
            location: Free-form profile field

        Returns:
            The created User aggregate

        Raises:
            DuplicateUsernameError: If the username already exists
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by their username.

        Absence is a normal outcome meaning "no such account".

        Args:
            username: The username to search for (exact match)

        Returns:
            The User aggregate, or None if not found
        """
        ...
