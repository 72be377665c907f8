"""
Transactions app services layer.

Read-side aggregation lives here; plain CRUD goes through the ViewSet.
"""

from .exceptions import (
    TransactionsServiceError,
    InvalidDateRangeError,
)

from .reports import (
    filter_transactions,
    summarize,
    build_report,
    export_csv,
    export_filename,
)


__all__ = [
    # Exceptions
    'TransactionsServiceError',
    'InvalidDateRangeError',

    # Reports
    'filter_transactions',
    'summarize',
    'build_report',
    'export_csv',
    'export_filename',
]
