"""Authentication shared kernel module."""

from shared_kernel.auth.jwt_validator import (
    InvalidTokenError,
    JWTIssuer,
    JWTValidator,
    MissingTokenError,
    TokenClaims,
)
from shared_kernel.auth.observability import (
    DefaultJWTValidatorProbe,
    JWTValidatorProbe,
)

__all__ = [
    "DefaultJWTValidatorProbe",
    "InvalidTokenError",
    "JWTIssuer",
    "JWTValidator",
    "JWTValidatorProbe",
    "MissingTokenError",
    "TokenClaims",
]
