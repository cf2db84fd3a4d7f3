"""Exception hierarchy for the credit system."""


class CreditSystemError(Exception):
    """Base exception for all credit system errors."""


class ValidationError(CreditSystemError):
    """Raised when a request references a missing entity or one the caller does not own."""
