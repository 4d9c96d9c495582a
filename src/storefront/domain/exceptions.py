"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """The requested cart quantity exceeds the product's current stock."""

    def __init__(
        self, product_id: str, product_name: str, requested: int, available: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for {product_name}. Only {available} available."
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available


class AuthenticationError(DomainException):
    """The caller's identity could not be established."""


class AuthorizationError(DomainException):
    """The caller is known but not allowed to perform the operation."""


class ConcurrencyError(DomainException):
    """A write lost an optimistic version check against a concurrent write."""


class StorageError(DomainException):
    """The underlying document store could not be read or written."""

    def __init__(self, message: str, original_exception: Exception | None = None) -> None:
        super().__init__(message)
        self.original_exception = original_exception

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.args[0]} (Original error: {self.original_exception})"
        return self.args[0]
