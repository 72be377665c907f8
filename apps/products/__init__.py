"""
Products App - Per-tenant product catalog

Orders reference products by id; a product referenced by any order
cannot be deleted.
"""
