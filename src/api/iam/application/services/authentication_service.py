"""Authentication application service for IAM bounded context.

Handles account registration and credential login.
"""

from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.security import (
    DEFAULT_BCRYPT_ROUNDS,
    MAX_PASSWORD_BYTES,
    burn_password_check,
    hash_password,
    verify_password,
)
from iam.domain.aggregates import User
from iam.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from iam.ports.repositories import IUserRepository
from shared_kernel.auth import JWTIssuer
from shared_kernel.exceptions import ValidationError
from shared_kernel.validation import require_fields

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthenticationService:
    """Application service for registration and login.

    The user store's unique index decides duplicate usernames; this service
    never reads before inserting.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        issuer: JWTIssuer,
        probe: AuthenticationProbe | None = None,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ):
        """Initialize AuthenticationService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            issuer: Signs session tokens for successful logins
            probe: Optional domain probe for observability
            bcrypt_rounds: Cost factor used when hashing new passwords
        """
        self._user_repository = user_repository
        self._session = session
        self._issuer = issuer
        self._probe = probe or DefaultAuthenticationProbe()
        self._bcrypt_rounds = bcrypt_rounds

    async def register(
        self,
        username: str | None,
        display_name: str | None,
        password: str | None,
        gender: str | None,
        location: str | None,
    ) -> User:
        """Register a new account.

        Args:
            username: Unique login name
            display_name: Human-readable name
            password: Plaintext password, hashed before storage
            gender: Free-form profile attribute
            location: Free-form profile attribute

        Returns:
            The created User aggregate

        Raises:
            ValidationError: If any field is missing or the password is too long
            DuplicateUsernameError: If the username is already taken
        """
        try:
            require_fields(
                username=username,
                name=display_name,
                password=password,
                gender=gender,
                location=location,
            )
            if len(password.encode()) > MAX_PASSWORD_BYTES:
                raise ValidationError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )
        except ValidationError as e:
            self._probe.registration_rejected(username=username, reason=str(e))
            raise

        password_hash = await asyncio.to_thread(
            hash_password, password, rounds=self._bcrypt_rounds
        )

        try:
            async with self._session.begin():
                user = await self._user_repository.create(
                    username=username,
                    display_name=display_name,
                    password_hash=password_hash,
                    gender=gender,
                    location=location,
                )
        except DuplicateUsernameError:
            self._probe.registration_rejected(
                username=username, reason="username_taken"
            )
            raise

        self._probe.user_registered(user_id=user.id.value, username=user.username)
        return user

    async def login(self, username: str | None, password: str | None) -> str:
        """Verify credentials and issue a session token.

        Unknown usernames and wrong passwords fail identically.

        Returns:
            Signed session token carrying the user's id and username

        Raises:
            ValidationError: If username or password is missing
            InvalidCredentialsError: If the credentials do not match an account
        """
        require_fields(username=username, password=password)

        async with self._session.begin():
            user = await self._user_repository.get_by_username(username)

        if user is None:
            await asyncio.to_thread(
                burn_password_check, password, rounds=self._bcrypt_rounds
            )
            self._probe.login_failed(username=username, reason="unknown_username")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        matches = await asyncio.to_thread(
            verify_password, password, user.password_hash
        )
        if not matches:
            self._probe.login_failed(username=username, reason="password_mismatch")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        token = self._issuer.issue_token(user.id.value, user.username)
        self._probe.login_succeeded(user_id=user.id.value, username=user.username)
        return token
