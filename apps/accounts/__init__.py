"""
Accounts App - Tenants and Authentication

Every registered user is a tenant: products, orders and transactions are
scoped to exactly one user. Staff users act as administrators for the
settings panel and the update checker.
"""
