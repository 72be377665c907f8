from django.db import models
from django.core.validators import MinValueValidator
import uuid


class OrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PROCESSING = 'diproses', 'Diproses'
    SHIPPED = 'dikirim', 'Dikirim'
    DONE = 'selesai', 'Selesai'


class Order(models.Model):
    """
    Customer order for one product.

    Status may be set to any value on update; only entering
    ``dikirim`` has a side effect (tracking number generation,
    handled by the order workflow service).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Tenant
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='orders'
    )

    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='orders'
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)]
    )

    # Customer
    customer_name = models.CharField(max_length=200)
    customer_phone = models.CharField(max_length=30, blank=True)
    address = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING
    )

    # Not unique: generated numbers accept a small collision risk
    tracking_number = models.CharField(max_length=64, null=True, blank=True)
    note = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['user', 'created_at']),
            models.Index(fields=['tracking_number']),
            models.Index(fields=['status']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.customer_name} - {self.product.name} x{self.quantity} ({self.status})"
