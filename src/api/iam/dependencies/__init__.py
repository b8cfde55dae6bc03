"""Dependency injection for IAM bounded context.

Composes infrastructure resources (database sessions, settings) with
IAM-specific components (repositories, services, token handling).
"""

from iam.dependencies.authentication import (
    bearer_scheme,
    get_authentication_probe,
    get_jwt_issuer,
    get_jwt_validator,
)
from iam.dependencies.user import (
    get_authentication_service,
    get_current_user,
    get_user_repository,
)

__all__ = [
    "bearer_scheme",
    "get_authentication_probe",
    "get_authentication_service",
    "get_current_user",
    "get_jwt_issuer",
    "get_jwt_validator",
    "get_user_repository",
]
