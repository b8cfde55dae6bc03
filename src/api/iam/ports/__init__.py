"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories without specifying
implementation details. This allows for dependency inversion and makes
the domain layer independent of infrastructure.
"""

from iam.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from iam.ports.repositories import IUserRepository

__all__ = [
    "DuplicateUsernameError",
    "IUserRepository",
    "InvalidCredentialsError",
]
