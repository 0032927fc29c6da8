class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SpreadsheetReadError(DomainError):
    """Raised when an uploaded spreadsheet cannot be opened or read."""


class ResultNotFoundError(DomainError):
    """Raised when no computed salary result exists for an employee."""
