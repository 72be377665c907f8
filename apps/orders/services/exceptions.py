"""
Domain-specific exceptions for orders app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class OrdersServiceError(Exception):
    """Base exception for all orders service errors."""
    pass


class OrderValidationError(OrdersServiceError):
    """Raised when required order fields are missing or invalid."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when an order does not exist or belongs to another user."""
    pass


class ProductNotFoundError(OrdersServiceError):
    """Raised when the referenced product is not in the user's catalog."""
    pass


class OrderPersistenceError(OrdersServiceError):
    """Raised when the database rejects a save, delete or lookup."""
    pass
