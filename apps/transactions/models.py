from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class TransactionType(models.TextChoices):
    INCOME = 'income', 'Pemasukan'
    EXPENSE = 'expense', 'Pengeluaran'
    DEBT = 'debt', 'Hutang'
    RECEIVABLE = 'receivable', 'Piutang'


class Transaction(models.Model):
    """
    One ledger entry of a tenant.

    Debts and receivables carry the counterparty's name and WhatsApp
    number so reminders can be sent.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='transactions'
    )

    type = models.CharField(max_length=20, choices=TransactionType.choices)
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    category = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    date = models.DateField()

    counterparty_name = models.CharField(max_length=200, blank=True)
    whatsapp = models.CharField(max_length=30, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['user', 'date']),
            models.Index(fields=['user', 'type']),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.get_type_display()} {self.amount} ({self.date})"
