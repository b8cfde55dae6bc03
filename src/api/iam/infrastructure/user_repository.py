"""SQL implementation of IUserRepository (the credential store)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId
from iam.infrastructure.models import UserModel
from iam.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from iam.ports.exceptions import DuplicateUsernameError
from iam.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """SQLAlchemy-backed repository for User aggregates.

    Runs inside the caller's transaction and never commits on its own.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def create(
        self,
        username: str,
        display_name: str,
        password_hash: str,
        gender: str,
        location: str,
    ) -> User:
        """Insert a new user row.

        The insert is flushed immediately so a unique-index violation
        surfaces here, inside the caller's transaction.

        Raises:
            DuplicateUsernameError: If the username already exists
        """
        model = UserModel(
            username=username,
            display_name=display_name,
            password_hash=password_hash,
            gender=gender,
            location=location,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            self._probe.duplicate_username(username)
            raise DuplicateUsernameError(f"User '{username}' already exists") from e

        self._probe.user_created(model.id, username)
        return self._to_domain(model)

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(user_id.value)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by their username.

        Args:
            username: The username to search for

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.username_not_found(username)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserId(value=model.id),
            username=model.username,
            display_name=model.display_name,
            password_hash=model.password_hash,
            gender=model.gender,
            location=model.location,
        )
