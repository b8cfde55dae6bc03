from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import AuthenticationProbe
from iam.application.services import AuthenticationService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.authentication import (
    bearer_scheme,
    get_authentication_probe,
    get_jwt_issuer,
    get_jwt_validator,
)
from iam.domain.value_objects import UserId
from iam.infrastructure.observability import DefaultUserRepositoryProbe
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import get_auth_settings
from shared_kernel.auth import (
    InvalidTokenError,
    JWTIssuer,
    JWTValidator,
    MissingTokenError,
)

MISSING_TOKEN_DETAIL = "Missing Token"
INVALID_TOKEN_DETAIL = "Invalid Token"


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> UserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session

    Returns:
        UserRepository instance
    """
    return UserRepository(session=session, probe=DefaultUserRepositoryProbe())


def get_authentication_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    issuer: Annotated[JWTIssuer, Depends(get_jwt_issuer)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> AuthenticationService:
    """Get AuthenticationService instance.

    Args:
        user_repo: User repository (shares session via FastAPI dependency caching)
        session: Database session for transaction management
        issuer: Token issuer for successful logins
        probe: Authentication probe for observability

    Returns:
        AuthenticationService instance
    """
    return AuthenticationService(
        user_repository=user_repo,
        session=session,
        issuer=issuer,
        probe=probe,
        bcrypt_rounds=get_auth_settings().bcrypt_rounds,
    )


def _extract_token(credentials: HTTPAuthorizationCredentials | None) -> str:
    if credentials is None or not credentials.credentials:
        raise MissingTokenError("Authorization header with Bearer token required")
    return credentials.credentials


async def get_current_user(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> AuthenticatedUser:
    """Authenticate the request from its bearer token.

    Rejects before any privileged work runs: an absent token is a 401,
    any verification failure is a 403.

    Args:
        validator: JWT validator for token validation
        auth_probe: Authentication probe for observability
        credentials: Parsed ``Authorization: Bearer`` header, if any

    Returns:
        AuthenticatedUser carrying the token's user id and username

    Raises:
        HTTPException 401: If no bearer token was supplied
        HTTPException 403: If the token does not validate
    """
    try:
        token = _extract_token(credentials)
    except MissingTokenError as e:
        auth_probe.authentication_failed(reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=MISSING_TOKEN_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    try:
        claims = validator.validate_token(token)
    except InvalidTokenError as e:
        auth_probe.authentication_failed(reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=INVALID_TOKEN_DETAIL,
        ) from e

    auth_probe.user_authenticated(user_id=claims.user_id, username=claims.username)
    return AuthenticatedUser(
        user_id=UserId(value=claims.user_id),
        username=claims.username,
    )
