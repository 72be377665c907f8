"""Income, expense, debt and receivable ledger with dashboard and report queries."""
