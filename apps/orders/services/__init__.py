"""
Orders app services layer.

Services contain business logic and orchestrate operations across models.
Views stay thin and only translate exceptions into HTTP responses.
"""

from .exceptions import (
    OrdersServiceError,
    OrderValidationError,
    OrderNotFoundError,
    ProductNotFoundError,
    OrderPersistenceError,
)

from .tracking import generate_tracking_number

from .order_workflow import (
    NOT_FOUND,
    TrackingResult,
    UPDATABLE_FIELDS,
    build_created_message,
    build_updated_message,
    validate_required_fields,
    create_order,
    update_order,
    delete_order,
    get_order,
    list_orders,
    lookup_tracking_number,
)


__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderValidationError',
    'OrderNotFoundError',
    'ProductNotFoundError',
    'OrderPersistenceError',

    # Tracking numbers
    'generate_tracking_number',

    # Order workflow
    'NOT_FOUND',
    'TrackingResult',
    'UPDATABLE_FIELDS',
    'build_created_message',
    'build_updated_message',
    'validate_required_fields',
    'create_order',
    'update_order',
    'delete_order',
    'get_order',
    'list_orders',
    'lookup_tracking_number',
]
