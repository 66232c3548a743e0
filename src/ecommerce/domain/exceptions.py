"""Domain-level exceptions.

Every failure the use-case layer reports is a subclass of DomainException
so the CLI layer can catch them uniformly and display the message.
Repository and validator errors are raised as-is and travel up through
the use cases unwrapped.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request or invariant failed validation."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PermissionDeniedError(DomainException):
    """The caller does not own the entity it tried to modify."""

    def __init__(self, message: str = "permission denied") -> None:
        super().__init__(message)


class InvalidOrderStatusError(DomainException):
    """The order is in a terminal status and cannot transition."""

    def __init__(self, message: str = "invalid order status") -> None:
        super().__init__(message)


class InvalidStatusError(ValidationError):
    """A raw status string does not name a known order status."""

    def __init__(self, message: str = "invalid status") -> None:
        super().__init__(message)


class RepositoryContractError(DomainException):
    """A repository returned data inconsistent with what it was given."""


class OperationCancelledError(DomainException):
    """The request context was cancelled before the operation finished."""
