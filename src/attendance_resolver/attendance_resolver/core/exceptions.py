class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"


class InvalidDateError(ValidationError):
    """Raised when a date-like value cannot be parsed into a civil day."""

    code = "INVALID_DATE"


class MissingDateError(ValidationError):
    """Raised when status resolution is requested without a date."""

    code = "MISSING_DATE"


class InvariantViolationError(DomainError):
    """Raised when a resolved status breaks a hard output invariant."""

    code = "INVARIANT_VIOLATION"


class RangeTooLargeError(ValidationError):
    """Raised when a requested date range spans more days than allowed."""

    code = "RANGE_TOO_LARGE"
