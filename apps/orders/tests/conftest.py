import pytest
from decimal import Decimal
from unittest.mock import MagicMock
from django.apps import apps as django_apps
from apps.orders.models import Order, OrderStatus
from apps.orders.notifications import SendResult, SynchronousDispatcher
from apps.products.models import Product


@pytest.fixture
def product(db, user):
    """Create and return a product owned by the test user."""
    return Product.objects.create(
        user=user,
        name='Kopi Susu',
        category='Minuman',
        price=Decimal('18000.00'),
        stock=25,
    )


@pytest.fixture
def second_product(db, user):
    """Another product in the test user's catalog."""
    return Product.objects.create(
        user=user,
        name='Es Teh',
        category='Minuman',
        price=Decimal('5000.00'),
        stock=40,
    )


@pytest.fixture
def other_product(db, other_user):
    """Create and return a product owned by another tenant."""
    return Product.objects.create(
        user=other_user,
        name='Roti Bakar',
        category='Makanan',
        price=Decimal('15000.00'),
        stock=10,
    )


@pytest.fixture
def fake_gateway():
    """Gateway double that accepts every message."""
    gateway = MagicMock()
    gateway.send.return_value = SendResult(ok=True, data={'status': True})
    return gateway


@pytest.fixture
def dispatcher(fake_gateway):
    """Inline dispatcher around the fake gateway."""
    return SynchronousDispatcher(fake_gateway)


@pytest.fixture
def app_dispatcher(fake_gateway, monkeypatch):
    """Replace the orders app dispatcher used by the views."""
    config = django_apps.get_app_config('orders')
    replacement = SynchronousDispatcher(fake_gateway)
    monkeypatch.setattr(config, '_dispatcher', replacement)
    return replacement


@pytest.fixture
def app_gateway(fake_gateway, monkeypatch):
    """Replace the orders app gateway used by the notify endpoint."""
    config = django_apps.get_app_config('orders')
    monkeypatch.setattr(config, '_gateway', fake_gateway)
    return fake_gateway


@pytest.fixture
def order(db, user, product):
    """A pending order with a customer phone."""
    return Order.objects.create(
        user=user,
        product=product,
        quantity=2,
        customer_name='Budi',
        customer_phone='081234567890',
        address='Jl. Merdeka 1',
        status=OrderStatus.PENDING,
    )


@pytest.fixture
def shipped_order(db, user, product):
    """An order already shipped with a known tracking number."""
    return Order.objects.create(
        user=user,
        product=product,
        quantity=1,
        customer_name='Siti',
        status=OrderStatus.SHIPPED,
        tracking_number='FM-ABC123-654321',
    )


@pytest.fixture
def other_order(db, other_user, other_product):
    """An order belonging to another tenant."""
    return Order.objects.create(
        user=other_user,
        product=other_product,
        quantity=3,
        customer_name='Andi',
        status=OrderStatus.SHIPPED,
        tracking_number='FM-OTHER1-000001',
    )
