"""Base error taxonomy shared by all bounded contexts.

Each context derives its specific errors from these bases so the
presentation layer can map a whole family to one HTTP status.
"""


class DomainError(Exception):
    """Base class for expected, client-caused failures."""

    pass


class ValidationError(DomainError):
    """Raised when request input is missing or malformed."""

    pass


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    pass
