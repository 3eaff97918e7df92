"""
                        Services Module

Business logic services for the ordering demo.

Services:
    - store: document persistence (in-memory for development, MongoDB otherwise)
    - catalog: menu seeding and listing
    - ledger: customers, orders and totals
"""

from restaurant_orders.services.catalog import DEFAULT_MENU, Catalog, SeedResult
from restaurant_orders.services.ledger import Ledger, LedgerOutcome, LedgerResult

__all__ = [
    "Catalog",
    "SeedResult",
    "DEFAULT_MENU",
    "Ledger",
    "LedgerOutcome",
    "LedgerResult",
]
