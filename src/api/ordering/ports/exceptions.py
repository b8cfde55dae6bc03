"""Domain exceptions for the ordering bounded context."""

from shared_kernel.exceptions import DomainError


class InsufficientStockError(DomainError):
    """Raised when stock on hand does not cover the requested quantity.

    The order is not recorded and stock is left untouched. Callers may
    resubmit; nothing is retried automatically.
    """

    pass
