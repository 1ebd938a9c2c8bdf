class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a mutating operation targets an id that does not exist."""


class ConflictError(DomainError):
    """Raised when an operation would break a relationship between records."""


class InvalidTransitionError(DomainError):
    """Raised when a record is asked to move to a state it cannot reach."""
