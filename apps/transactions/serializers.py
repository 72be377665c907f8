"""
Serializers for transactions app.

Input Serializers:
    TransactionFilterSerializer - List filters
    SummaryQuerySerializer - Dashboard window
    ReportQuerySerializer - Report/export date range

Response Serializers:
    SummarySerializer - Dashboard figures
    ReportSerializer - Period report
"""

from datetime import date
from rest_framework import serializers
from .models import Transaction, TransactionType


class TransactionSerializer(serializers.ModelSerializer):
    """Full transaction serializer; owner is taken from the request."""

    class Meta:
        model = Transaction
        fields = [
            'id',
            'type',
            'amount',
            'category',
            'description',
            'date',
            'counterparty_name',
            'whatsapp',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class TransactionFilterSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=TransactionType.choices, required=False)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    search = serializers.CharField(required=False)


class SummaryQuerySerializer(serializers.Serializer):
    months = serializers.IntegerField(required=False, default=6, min_value=1, max_value=24)


class ReportQuerySerializer(serializers.Serializer):
    """
    Validate the report date range.

    Missing bounds default to the current month so far: the first of the
    month through today.
    """

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        today = date.today()
        attrs.setdefault('date_from', today.replace(day=1))
        attrs.setdefault('date_to', today)
        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class MonthlyTotalsSerializer(serializers.Serializer):
    month = serializers.CharField(help_text='YYYY-MM')
    income = serializers.DecimalField(max_digits=15, decimal_places=2)
    expense = serializers.DecimalField(max_digits=15, decimal_places=2)


class SummarySerializer(serializers.Serializer):
    total_income = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_expense = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_debt = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_receivable = serializers.DecimalField(max_digits=15, decimal_places=2)
    balance = serializers.DecimalField(max_digits=15, decimal_places=2)
    monthly = MonthlyTotalsSerializer(many=True)


class CategoryTotalsSerializer(serializers.Serializer):
    category = serializers.CharField()
    income = serializers.DecimalField(max_digits=15, decimal_places=2)
    expense = serializers.DecimalField(max_digits=15, decimal_places=2)
    balance = serializers.DecimalField(max_digits=15, decimal_places=2)


class ReportSerializer(serializers.Serializer):
    date_from = serializers.DateField()
    date_to = serializers.DateField()
    total_income = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_expense = serializers.DecimalField(max_digits=15, decimal_places=2)
    balance = serializers.DecimalField(max_digits=15, decimal_places=2)
    income_count = serializers.IntegerField()
    expense_count = serializers.IntegerField()
    transaction_count = serializers.IntegerField()
    by_category = CategoryTotalsSerializer(many=True)
