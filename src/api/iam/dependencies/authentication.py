from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPBearer

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from infrastructure.observability import ObservationContext, get_observation_context
from infrastructure.settings import get_auth_settings
from shared_kernel.auth import JWTIssuer, JWTValidator
from shared_kernel.auth.observability import DefaultJWTValidatorProbe

# auto_error=False so a missing header reaches our handler and maps to 401
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached JWT validator.

    Returns:
        JWTValidator instance configured from auth settings.
    """
    settings = get_auth_settings()
    return JWTValidator(
        secret=settings.jwt_secret.get_secret_value(),
        probe=DefaultJWTValidatorProbe(),
        algorithm=settings.jwt_algorithm,
    )


@lru_cache
def get_jwt_issuer() -> JWTIssuer:
    """Get cached JWT issuer.

    Returns:
        JWTIssuer instance signing with the same key the validator checks.
    """
    settings = get_auth_settings()
    return JWTIssuer(
        secret=settings.jwt_secret.get_secret_value(),
        probe=DefaultJWTValidatorProbe(),
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.token_ttl_minutes),
    )


def get_authentication_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> AuthenticationProbe:
    """Get AuthenticationProbe bound to the request's observation context."""
    return DefaultAuthenticationProbe().with_context(context)
