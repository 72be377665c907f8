import pytest
from datetime import date
from decimal import Decimal
from apps.transactions.models import Transaction, TransactionType


@pytest.fixture
def make_transaction(db):
    """Factory creating transactions with sensible defaults."""
    def _make(user, type=TransactionType.INCOME, amount='100000.00', day=None, **extra):
        return Transaction.objects.create(
            user=user,
            type=type,
            amount=Decimal(amount),
            date=day or date.today(),
            **extra
        )
    return _make


@pytest.fixture
def ledger(user, make_transaction):
    """A small ledger for March 2025 owned by the test user."""
    return [
        make_transaction(user, TransactionType.INCOME, '500000.00', date(2025, 3, 1), category='Penjualan'),
        make_transaction(user, TransactionType.INCOME, '250000.00', date(2025, 3, 10), category='Penjualan'),
        make_transaction(user, TransactionType.EXPENSE, '150000.00', date(2025, 3, 5),
                         category='Bahan Baku', description='Beli gula'),
        make_transaction(user, TransactionType.EXPENSE, '50000.00', date(2025, 3, 20)),
        make_transaction(user, TransactionType.DEBT, '1000000.00', date(2025, 3, 15),
                         counterparty_name='Pak Joko', whatsapp='0812'),
        make_transaction(user, TransactionType.RECEIVABLE, '75000.00', date(2025, 3, 25),
                         counterparty_name='Bu Sri'),
    ]
