from rest_framework import serializers
from .models import Order, OrderStatus


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for the owner's order list and details."""

    product_name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'product',
            'product_name',
            'quantity',
            'customer_name',
            'customer_phone',
            'address',
            'status',
            'tracking_number',
            'note',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class OrderInputSerializer(serializers.Serializer):
    """
    Input for creating or updating an order.

    Product and customer name are deliberately lenient here: the workflow
    service reports both with a single combined error.
    """

    product = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    customer_name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    quantity = serializers.IntegerField(required=False, min_value=1)
    customer_phone = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=30)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    tracking_number = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)
    note = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    wa_note = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text='Extra line for the WhatsApp message; not stored.'
    )

    def to_changes(self):
        """Map validated data onto order field names (without wa_note)."""
        data = dict(self.validated_data)
        data.pop('wa_note', None)
        if 'product' in data:
            data['product_id'] = data.pop('product')
        return data


class OrderFilterSerializer(serializers.Serializer):
    """Validate query parameters for order list filtering."""

    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)


class TrackingResultSerializer(serializers.Serializer):
    """Public tracking page payload."""

    tracking_number = serializers.CharField()
    customer_name = serializers.CharField()
    product_name = serializers.CharField()
    quantity = serializers.IntegerField()
    status = serializers.CharField()
    updated_at = serializers.DateTimeField()


class NotifyInputSerializer(serializers.Serializer):
    phone = serializers.CharField(required=False, allow_blank=True)
    message = serializers.CharField(required=False, allow_blank=True)
