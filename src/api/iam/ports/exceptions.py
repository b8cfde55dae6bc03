"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
registration and login. They are raised by the application layer and
translated to HTTP responses by the presentation layer.
"""

from shared_kernel.exceptions import ConflictError, DomainError


class DuplicateUsernameError(ConflictError):
    """Raised when registering a username that already exists.

    The unique index on ``users.username`` is the single source of truth
    for this rule; the repository translates the integrity violation.
    """

    pass


class InvalidCredentialsError(DomainError):
    """Raised when login fails.

    Deliberately used for both an unknown username and a wrong password
    so responses do not reveal which accounts exist.
    """

    pass
