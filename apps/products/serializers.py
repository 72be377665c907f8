from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Full product serializer; owner is taken from the request."""

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'category',
            'price',
            'stock',
            'description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Product name is required')
        return value


class ProductFilterSerializer(serializers.Serializer):
    """Validate query parameters for product list filtering."""

    category = serializers.CharField(required=False)
    search = serializers.CharField(required=False)
