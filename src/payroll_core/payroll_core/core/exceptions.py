class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError, ValueError):
    """Raised when input data is malformed or violates domain rules."""


class RepositoryError(DomainError):
    """Raised when the storage layer fails to answer a lookup."""
