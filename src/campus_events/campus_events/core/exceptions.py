class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a referenced college, student, event or registration is absent."""

    code = "not_found"


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness constraint."""

    code = "conflict"


class StoreError(DomainError):
    """Raised when the underlying database fails."""

    code = "store_error"
