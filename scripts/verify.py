"""
Stored Total Verification Script

Recomputes every customer's total from the current menu and compares
it with the totalAmount held in the store.
Run from project root: python scripts/verify.py

Exit status is 1 when any customer's stored total is stale.

Author: Khalil Bannouri
Version: 1.0.0
"""

import os
import sys
from datetime import datetime
from typing import Any

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from restaurant_orders.core.config import get_settings, setup_logging
from restaurant_orders.database import open_store
from restaurant_orders.services.catalog import Catalog
from restaurant_orders.services.ledger import Ledger, calculate_total
from restaurant_orders.services.store import BaseStore, StoreError


def find_mismatches(catalog: Catalog, ledger: Ledger) -> list[dict[str, Any]]:
    """Customers whose stored total differs from a fresh recomputation."""
    prices: dict[str, float] = {}
    for item in catalog.list_menu():
        # First document wins, like a find-one lookup
        prices.setdefault(item.name, item.price)

    mismatches = []
    for customer in ledger.list_customers():
        expected = calculate_total(customer.ordered_items, prices)
        if abs(expected - customer.total_amount) >= 0.005:
            mismatches.append({
                "name": customer.name,
                "stored": customer.total_amount,
                "expected": expected,
                "orders": len(customer.ordered_items),
            })
    return mismatches


def verify_totals(store: BaseStore) -> bool:
    """Print an integrity report for the store's customers."""
    settings = get_settings()
    catalog = Catalog(store)
    ledger = Ledger(store, catalog)
    currency = settings.currency_symbol

    print("=" * 60)
    print("🔍 ORDER TOTAL VERIFICATION REPORT")
    print("=" * 60)
    print(f"⏰ Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🗄️  Store: {store.provider_name}")
    print("=" * 60)

    menu = catalog.list_menu()
    customers = ledger.list_customers()

    print(f"\n📊 STATISTICS:")
    print(f"   Menu Items: {len(menu)}")
    print(f"   Customers: {len(customers)}")

    names = [item.name for item in menu]
    duplicates = len(names) - len(set(names))
    if duplicates:
        print(f"\n⚠️ {duplicates} duplicate menu entries (menu seeded more than once)")
    else:
        print(f"✅ No duplicate menu entries")

    revenue = sum(c.total_amount for c in customers)
    print(f"\n💰 REVENUE:")
    print(f"   Total: {currency} {revenue:.2f}")

    mismatches = find_mismatches(catalog, ledger)
    if mismatches:
        print(f"\n❌ {len(mismatches)} customer(s) with stale totals:")
        print("-" * 60)
        for m in mismatches:
            print(
                f"   {m['name']}: stored {currency} {m['stored']:.2f}, "
                f"expected {currency} {m['expected']:.2f} ({m['orders']} items)"
            )
    else:
        print(f"\n✅ All stored totals match the menu")

    print("\n" + "=" * 60)
    print("✅ VERIFICATION COMPLETE")
    print("=" * 60)

    return not mismatches


if __name__ == "__main__":
    setup_logging()
    try:
        with open_store() as store:
            ok = verify_totals(store)
    except StoreError as e:
        print(f"\n❌ Could not read store: {e}")
        sys.exit(1)
    sys.exit(0 if ok else 1)
