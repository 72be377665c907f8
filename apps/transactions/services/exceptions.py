"""
Domain exceptions for transactions app services.
"""


class TransactionsServiceError(Exception):
    """Base exception for transactions service errors."""
    pass


class InvalidDateRangeError(TransactionsServiceError):
    """Raised when a report range ends before it starts."""
    pass
