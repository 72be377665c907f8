import pytest
from decimal import Decimal
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
def other_product(db, other_user):
    """Create and return a product owned by another tenant."""
    return Product.objects.create(
        user=other_user,
        name='Roti Bakar',
        category='Makanan',
        price=Decimal('15000.00'),
        stock=10,
    )
