"""Pydantic models for IAM API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Request fields are optional at the schema level so that missing values
# reach the service and fail with a uniform 400.


class RegisterUserRequest(BaseModel):
    """Request model for registering an account."""

    username: str | None = Field(default=None, description="Unique login name")
    name: str | None = Field(default=None, description="Display name")
    password: str | None = Field(default=None, description="Plaintext password")
    gender: str | None = Field(default=None, description="Gender")
    location: str | None = Field(default=None, description="Location")


class LoginRequest(BaseModel):
    """Request model for logging in."""

    username: str | None = Field(default=None, description="Login name")
    password: str | None = Field(default=None, description="Plaintext password")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class LoginResponse(BaseModel):
    """Response model carrying the issued session token."""

    jwt_token: str = Field(
        ...,
        serialization_alias="jwtToken",
        description="Signed bearer token for privileged routes",
    )
