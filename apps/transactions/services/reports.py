"""
Ledger aggregation for the dashboard, period report and CSV export.

All functions are read-only and return plain dicts/lists (or CSV text)
ready to be serialized by the views.
"""

import csv
import io
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce, TruncMonth

from apps.accounts.models import User
from apps.transactions.models import Transaction, TransactionType

from .exceptions import InvalidDateRangeError

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')
UNCATEGORIZED = 'Lainnya'
CSV_HEADERS = ['Tanggal', 'Jenis', 'Kategori', 'Deskripsi', 'Jumlah']


def _sum_of(transaction_type):
    return Coalesce(
        Sum('amount', filter=Q(type=transaction_type)),
        Value(ZERO),
        output_field=DecimalField(max_digits=15, decimal_places=2),
    )


def _shift_month(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def _check_range(date_from: date, date_to: date) -> None:
    if date_from > date_to:
        raise InvalidDateRangeError("date_from must not be after date_to")


def filter_transactions(
    *,
    user: User,
    type: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    search: Optional[str] = None
):
    """Return the user's transactions, newest first, narrowed by the given filters."""
    queryset = Transaction.objects.filter(user=user)
    if type:
        queryset = queryset.filter(type=type)
    if date_from:
        queryset = queryset.filter(date__gte=date_from)
    if date_to:
        queryset = queryset.filter(date__lte=date_to)
    if search:
        queryset = queryset.filter(
            Q(description__icontains=search) |
            Q(category__icontains=search) |
            Q(counterparty_name__icontains=search)
        )
    return queryset


def summarize(*, user: User, months: int = 6, today: Optional[date] = None) -> dict:
    """
    Dashboard figures for a user.

    Args:
        user: Owning tenant
        months: How many calendar months (including the current one)
            the monthly breakdown covers
        today: Reference date (defaults to ``date.today()``)

    Returns:
        dict with ``total_income``, ``total_expense``, ``total_debt``,
        ``total_receivable``, ``balance`` (income minus expense) and
        ``monthly``: one ``{month, income, expense}`` entry per month,
        oldest first, months without entries included as zeros.
    """
    today = today or date.today()

    totals = Transaction.objects.filter(user=user).aggregate(
        total_income=_sum_of(TransactionType.INCOME),
        total_expense=_sum_of(TransactionType.EXPENSE),
        total_debt=_sum_of(TransactionType.DEBT),
        total_receivable=_sum_of(TransactionType.RECEIVABLE),
    )
    totals['balance'] = totals['total_income'] - totals['total_expense']

    start = _shift_month(today, -(months - 1))
    rows = (
        Transaction.objects
        .filter(user=user, date__gte=start, date__lte=today)
        .annotate(month=TruncMonth('date'))
        .values('month')
        .annotate(
            income=_sum_of(TransactionType.INCOME),
            expense=_sum_of(TransactionType.EXPENSE),
        )
        .order_by('month')
    )
    by_month = {(row['month'].year, row['month'].month): row for row in rows}

    monthly = []
    for offset in range(months):
        month = _shift_month(start, offset)
        row = by_month.get((month.year, month.month), {})
        monthly.append({
            'month': month.strftime('%Y-%m'),
            'income': row.get('income', ZERO),
            'expense': row.get('expense', ZERO),
        })

    totals['monthly'] = monthly
    return totals


def build_report(*, user: User, date_from: date, date_to: date) -> dict:
    """
    Period report: totals, entry counts and per-category income/expense.

    Entries without a category are grouped under ``Lainnya``.

    Raises:
        InvalidDateRangeError: If ``date_from`` is after ``date_to``
    """
    _check_range(date_from, date_to)
    queryset = filter_transactions(user=user, date_from=date_from, date_to=date_to)

    totals = queryset.aggregate(
        total_income=_sum_of(TransactionType.INCOME),
        total_expense=_sum_of(TransactionType.EXPENSE),
        income_count=Count('id', filter=Q(type=TransactionType.INCOME)),
        expense_count=Count('id', filter=Q(type=TransactionType.EXPENSE)),
        transaction_count=Count('id'),
    )

    categories = {}
    for row in (
        queryset
        .values('category')
        .annotate(
            income=_sum_of(TransactionType.INCOME),
            expense=_sum_of(TransactionType.EXPENSE),
        )
        .order_by('category')
    ):
        name = row['category'] or UNCATEGORIZED
        entry = categories.setdefault(name, {'category': name, 'income': ZERO, 'expense': ZERO})
        entry['income'] += row['income']
        entry['expense'] += row['expense']

    by_category = []
    for entry in categories.values():
        if entry['income'] or entry['expense']:
            entry['balance'] = entry['income'] - entry['expense']
            by_category.append(entry)

    return {
        'date_from': date_from,
        'date_to': date_to,
        **totals,
        'balance': totals['total_income'] - totals['total_expense'],
        'by_category': by_category,
    }


def export_csv(*, user: User, date_from: date, date_to: date) -> str:
    """
    Render the user's transactions in the range as CSV text, oldest first.

    Raises:
        InvalidDateRangeError: If ``date_from`` is after ``date_to``
    """
    _check_range(date_from, date_to)
    queryset = (
        filter_transactions(user=user, date_from=date_from, date_to=date_to)
        .order_by('date', 'created_at')
    )

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADERS)
    count = 0
    for entry in queryset:
        writer.writerow([
            entry.date.isoformat(),
            entry.get_type_display(),
            entry.category or '-',
            entry.description or '-',
            entry.amount,
        ])
        count += 1

    logger.info("Exported %d transactions for user %s (%s..%s)", count, user.pk, date_from, date_to)
    return buffer.getvalue()


def export_filename(date_from: date, date_to: date) -> str:
    return f"laporan-{date_from.isoformat()}-{date_to.isoformat()}.csv"
