"""HTTP routes for IAM bounded context.

Provides account registration and credential login.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import AuthenticationService
from iam.dependencies.user import get_authentication_service
from iam.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from iam.presentation.models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterUserRequest,
)
from shared_kernel.exceptions import ValidationError

USER_EXISTS_DETAIL = "User already exists"

router = APIRouter(tags=["iam"])


@router.post("/users/", status_code=status.HTTP_201_CREATED)
async def register_user(
    request: RegisterUserRequest,
    service: Annotated[AuthenticationService, Depends(get_authentication_service)],
) -> MessageResponse:
    """Register a new account.

    Raises:
        HTTPException: 400 if a field is missing or the username is taken
    """
    try:
        await service.register(
            username=request.username,
            display_name=request.name,
            password=request.password,
            gender=request.gender,
            location=request.location,
        )
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=USER_EXISTS_DETAIL,
        ) from e
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return MessageResponse(message="User registered successfully")


@router.post("/login/")
async def login(
    request: LoginRequest,
    service: Annotated[AuthenticationService, Depends(get_authentication_service)],
) -> LoginResponse:
    """Exchange username and password for a bearer token.

    Raises:
        HTTPException: 400 for missing fields or bad credentials
    """
    try:
        token = await service.login(
            username=request.username,
            password=request.password,
        )
    except (InvalidCredentialsError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return LoginResponse(jwt_token=token)
