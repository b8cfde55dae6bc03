"""Domain exceptions for the catalogue bounded context."""

from shared_kernel.exceptions import NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when an operation references a product id that does not exist."""

    pass
