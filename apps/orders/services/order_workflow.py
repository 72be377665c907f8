"""
Order workflow service.

Every create/update runs the same pipeline:

1. Validate required fields (product and customer name)
2. Generate a tracking number if the order ends up ``dikirim`` without one
3. Persist inside a transaction
4. After commit, hand a WhatsApp message to the notification dispatcher
   when the order has a customer phone

A failed save never notifies, and a failed notification never fails the
save.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.apps import apps
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction

from apps.accounts.models import User
from apps.orders.models import Order, OrderStatus
from apps.products.models import Product

from .exceptions import (
    OrderValidationError,
    OrderNotFoundError,
    ProductNotFoundError,
    OrderPersistenceError,
)
from .tracking import generate_tracking_number

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Product and customer name are required"

UPDATABLE_FIELDS = (
    'product_id',
    'quantity',
    'customer_name',
    'customer_phone',
    'address',
    'status',
    'tracking_number',
    'note',
)


@dataclass(frozen=True)
class TrackingResult:
    """Public view of an order, as shown on the tracking page."""
    tracking_number: str
    customer_name: str
    product_name: str
    quantity: int
    status: str
    updated_at: datetime


# Returned by lookup_tracking_number when nothing matches
NOT_FOUND = None


# =============================================================================
# Validation helpers
# =============================================================================

def validate_required_fields(product_id, customer_name) -> None:
    """
    Product and customer name checked together, before anything else.

    Raises:
        OrderValidationError: If either is missing or blank
    """
    if not product_id or not isinstance(customer_name, str) or not customer_name.strip():
        raise OrderValidationError(REQUIRED_FIELDS_MESSAGE)


def _validate_quantity(quantity) -> int:
    try:
        quantity = int(quantity)
    except (TypeError, ValueError):
        raise OrderValidationError("Quantity must be a positive integer")
    if quantity < 1:
        raise OrderValidationError("Quantity must be a positive integer")
    return quantity


def _validate_status(status) -> str:
    if status not in OrderStatus.values:
        raise OrderValidationError(f"Unknown order status: {status}")
    return status


def _resolve_product(user: User, product_id) -> Product:
    try:
        return Product.objects.get(id=product_id, user=user)
    except (Product.DoesNotExist, ValueError, DjangoValidationError):
        raise ProductNotFoundError(f"Product {product_id} not found")


def _apply_tracking_policy(status: str, tracking_number: Optional[str]) -> Optional[str]:
    """Keep a supplied tracking number; generate one when shipping without."""
    tracking_number = (tracking_number or '').strip() or None
    if tracking_number is None and status == OrderStatus.SHIPPED:
        tracking_number = generate_tracking_number()
    return tracking_number


# =============================================================================
# Notification helpers
# =============================================================================

def _message_details(order: Order, wa_note: str) -> str:
    details = ''
    if order.tracking_number:
        details += f"\nResi: {order.tracking_number}"
    if wa_note:
        details += f"\nCatatan: {wa_note}"
    return details


def build_created_message(order: Order, wa_note: str = '') -> str:
    """WhatsApp text sent to the customer when an order is recorded."""
    return (
        f"Terima kasih {order.customer_name}. "
        f"Pesanan: {order.product.name} x{order.quantity}. "
        f"Status: {order.status}"
        f"{_message_details(order, wa_note)}"
    )


def build_updated_message(order: Order, wa_note: str = '') -> str:
    """WhatsApp text sent to the customer when an order changes."""
    return (
        f"Pesanan Anda ({order.product.name}) status: {order.status}"
        f"{_message_details(order, wa_note)}"
    )


def _dispatch(dispatcher, phone: str, message: str) -> None:
    try:
        dispatcher.submit(phone, message)
    except Exception:
        logger.exception("Could not queue WhatsApp notification to %s", phone)


def _schedule_notification(order: Order, message: str, dispatcher=None) -> bool:
    """
    Queue a customer notification to run once the transaction commits.

    Returns:
        True if a notification was scheduled (customer phone present)
    """
    phone = (order.customer_phone or '').strip()
    if not phone:
        return False

    if dispatcher is None:
        dispatcher = apps.get_app_config('orders').get_dispatcher()

    transaction.on_commit(lambda: _dispatch(dispatcher, phone, message))
    return True


# =============================================================================
# Queries
# =============================================================================

def _get_owned_order(order_id: UUID, user: User, for_update: bool = False) -> Order:
    queryset = Order.objects.select_related('product')
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=order_id, user=user)
    except (Order.DoesNotExist, ValueError, DjangoValidationError):
        raise OrderNotFoundError(f"Order with ID {order_id} not found")


def get_order(*, order_id: UUID, user: User) -> Order:
    """
    Get one of the user's orders.

    Raises:
        OrderNotFoundError: If the order doesn't exist or isn't the user's
    """
    return _get_owned_order(order_id, user)


def list_orders(*, user: User, status: Optional[str] = None):
    """Return the user's orders, newest first."""
    queryset = Order.objects.filter(user=user).select_related('product')
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-created_at')


def lookup_tracking_number(*, tracking_number: str) -> Optional[TrackingResult]:
    """
    Public shipment lookup across all tenants.

    Matching is exact and case-sensitive. When generated numbers collide
    the most recently updated order wins.

    Returns:
        TrackingResult, or NOT_FOUND when no order carries the number

    Raises:
        OrderPersistenceError: If the query itself fails
    """
    if not tracking_number:
        return NOT_FOUND

    try:
        candidates = list(
            Order.objects
            .select_related('product')
            .filter(tracking_number=tracking_number)
            .order_by('-updated_at')[:5]
        )
    except DatabaseError as e:
        logger.error("Tracking lookup for %s failed: %s", tracking_number, e)
        raise OrderPersistenceError("Tracking lookup failed") from e

    for order in candidates:
        # Some collations compare case-insensitively
        if order.tracking_number == tracking_number:
            return TrackingResult(
                tracking_number=order.tracking_number,
                customer_name=order.customer_name,
                product_name=order.product.name,
                quantity=order.quantity,
                status=order.status,
                updated_at=order.updated_at,
            )
    return NOT_FOUND


# =============================================================================
# Commands
# =============================================================================

def create_order(
    *,
    user: User,
    product_id,
    customer_name: str,
    quantity: int = 1,
    customer_phone: str = '',
    address: str = '',
    note: str = '',
    status: str = OrderStatus.PENDING,
    tracking_number: Optional[str] = None,
    wa_note: str = '',
    dispatcher=None
) -> Order:
    """
    Record a new order for the user.

    Args:
        user: Owning tenant
        product_id: ID of one of the user's products
        customer_name: Required customer name
        quantity: Positive item count (default 1)
        customer_phone: WhatsApp number; enables the notification
        address: Delivery address
        note: Stored free-text note
        status: Initial status (default ``pending``)
        tracking_number: Explicit tracking number, kept as given
        wa_note: Extra line for the WhatsApp message only (not stored)
        dispatcher: Notification dispatcher (defaults to the app's)

    Returns:
        Created Order instance

    Raises:
        OrderValidationError: Product or customer name missing, bad quantity/status
        ProductNotFoundError: Product isn't in the user's catalog
        OrderPersistenceError: The database rejected the insert
    """
    validate_required_fields(product_id, customer_name)
    quantity = _validate_quantity(1 if quantity is None else quantity)
    status = _validate_status(status or OrderStatus.PENDING)
    product = _resolve_product(user, product_id)
    tracking_number = _apply_tracking_policy(status, tracking_number)

    try:
        with transaction.atomic():
            order = Order.objects.create(
                user=user,
                product=product,
                quantity=quantity,
                customer_name=customer_name.strip(),
                customer_phone=(customer_phone or '').strip(),
                address=address or '',
                note=note or '',
                status=status,
                tracking_number=tracking_number,
            )
            _schedule_notification(order, build_created_message(order, wa_note), dispatcher)
    except DatabaseError as e:
        logger.error("Saving new order for user %s failed: %s", user.pk, e)
        raise OrderPersistenceError("Failed to save order") from e

    logger.info("Created order %s (status=%s, tracking=%s)", order.id, order.status, order.tracking_number)
    return order


def update_order(
    *,
    order_id: UUID,
    user: User,
    changes: dict,
    wa_note: str = '',
    dispatcher=None
) -> Order:
    """
    Apply a partial update to one of the user's orders.

    Any status may be set from any other status. If the resulting order
    is ``dikirim`` and has no tracking number (omitted, or cleared by
    this patch) one is generated.

    Args:
        order_id: Order to update
        user: Owning tenant
        changes: Field -> new value, keys from ``UPDATABLE_FIELDS``
        wa_note: Extra line for the WhatsApp message only (not stored)
        dispatcher: Notification dispatcher (defaults to the app's)

    Returns:
        Updated Order instance

    Raises:
        OrderNotFoundError: If the order doesn't exist or isn't the user's
        OrderValidationError: If the resulting order is invalid
        ProductNotFoundError: If a new product isn't in the user's catalog
        OrderPersistenceError: The database rejected the update
    """
    unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
    if unknown:
        raise OrderValidationError(f"Unknown order fields: {', '.join(unknown)}")

    try:
        with transaction.atomic():
            order = _get_owned_order(order_id, user, for_update=True)

            product_id = changes.get('product_id', order.product_id)
            customer_name = changes.get('customer_name', order.customer_name)
            validate_required_fields(product_id, customer_name)

            if str(product_id) != str(order.product_id):
                order.product = _resolve_product(user, product_id)
            if 'quantity' in changes:
                order.quantity = _validate_quantity(changes['quantity'])
            if 'status' in changes:
                order.status = _validate_status(changes['status'])

            order.customer_name = customer_name.strip()
            for name in ('customer_phone', 'address', 'note'):
                if name in changes:
                    setattr(order, name, (changes[name] or '').strip())

            order.tracking_number = _apply_tracking_policy(
                order.status,
                changes.get('tracking_number', order.tracking_number),
            )

            order.save()
            _schedule_notification(order, build_updated_message(order, wa_note), dispatcher)
    except DatabaseError as e:
        logger.error("Updating order %s failed: %s", order_id, e)
        raise OrderPersistenceError("Failed to save order") from e

    logger.info("Updated order %s (status=%s, tracking=%s)", order.id, order.status, order.tracking_number)
    return order


@transaction.atomic
def delete_order(*, order_id: UUID, user: User) -> None:
    """
    Delete one of the user's orders. No notification is sent.

    Raises:
        OrderNotFoundError: If the order doesn't exist or isn't the user's
        OrderPersistenceError: The database rejected the delete
    """
    order = _get_owned_order(order_id, user, for_update=True)
    try:
        order.delete()
    except DatabaseError as e:
        logger.error("Deleting order %s failed: %s", order_id, e)
        raise OrderPersistenceError("Failed to delete order") from e

    logger.info("Deleted order %s", order_id)
