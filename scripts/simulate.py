"""
Ordering Session Simulation Script

Plays a scripted ordering session through the console workflow:
a random customer orders random dishes, with a share of made-up dish
names mixed in, then the stored totals are verified.
Run from project root: python scripts/simulate.py

Author: Khalil_Bannouri
Version: 1.0.0
"""

import argparse
import os
import random
import sys
import time
from datetime import datetime
from typing import Any

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from restaurant_orders.console import ConsoleWorkflow, FatalError
from restaurant_orders.core.config import get_settings, setup_logging
from restaurant_orders.database import open_store
from restaurant_orders.services.catalog import DEFAULT_MENU, Catalog
from restaurant_orders.services.ledger import Ledger, LedgerOutcome, LedgerResult
from restaurant_orders.services.store import BaseStore, StoreError

from verify import verify_totals

TOTAL_ORDERS = 10

# Sample data for random customers
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Taylor"]
UNKNOWN_ITEMS = ["Waffles", "Ramen", "Burrito", "pizza", "Dumplings"]


def generate_random_customer() -> dict[str, str]:
    """Generate random customer info."""
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    return {
        "name": f"{first} {last}",
        "phone": f"555{random.randint(100, 999)}{random.randint(1000, 9999)}",
    }


def generate_item_names(num_orders: int, unknown_rate: float) -> list[str]:
    """Random dish names; roughly unknown_rate of them are not on the menu."""
    names = []
    for _ in range(num_orders):
        if random.random() < unknown_rate:
            names.append(random.choice(UNKNOWN_ITEMS))
        else:
            names.append(random.choice(DEFAULT_MENU).name)
    return names


def run_simulation(
    store: BaseStore,
    num_orders: int = TOTAL_ORDERS,
    unknown_rate: float = 0.2,
    seed_menu: bool = True,
) -> dict[str, Any]:
    """
    Run one scripted session against an open store.

    Returns:
        dict: customer, per-outcome counts, stored total, elapsed time
    """
    settings = get_settings()
    catalog = Catalog(store)
    ledger = Ledger(store, catalog)
    customer = generate_random_customer()
    script = generate_item_names(num_orders, unknown_rate) + [settings.order_sentinel]
    lines = iter(script)

    print("=" * 70)
    print("🍽️  ORDERING SESSION SIMULATION")
    print("=" * 70)
    print(f"📋 Orders: {num_orders}")
    print(f"👤 Customer: {customer['name']}")
    print(f"🗄️  Store: {store.provider_name}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    if seed_menu:
        seeded = catalog.seed_menu()
        if not seeded.success:
            raise FatalError(seeded.error_message)

    registered = ledger.register_customer(customer["name"], customer["phone"])
    if not registered.success:
        raise FatalError(registered.message)

    outcomes: dict[str, int] = {}
    order_item = ledger.order_item

    def counted_order_item(customer_name: str, item_name: str) -> LedgerResult:
        result = order_item(customer_name, item_name)
        outcomes[result.outcome.value] = outcomes.get(result.outcome.value, 0) + 1
        return result

    ledger.order_item = counted_order_item

    # The session transcript is not shown; the tally replaces it
    workflow = ConsoleWorkflow(
        catalog,
        ledger,
        settings,
        reader=lambda: next(lines),
        writer=lambda message="": None,
    )
    result = workflow.place_order(customer["name"])
    total_time = round(time.time() - start_time, 3)

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Ordered: {outcomes.get(LedgerOutcome.ORDERED.value, 0)}/{num_orders}")
    print(f"❌ Not on menu: {outcomes.get(LedgerOutcome.ITEM_NOT_FOUND.value, 0)}/{num_orders}")
    print(f"⏱️  Total Time: {total_time}s")
    print(f"💰 Total Amount: {settings.currency_symbol} {result.total_amount:.2f}")
    print("=" * 70)

    return {
        "customer": customer["name"],
        "outcomes": outcomes,
        "total_amount": result.total_amount,
        "total_time": total_time,
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Ordering Session Simulation Script")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of order inputs")
    parser.add_argument("--unknown-rate", type=float, default=0.2, help="Share of dish names not on the menu")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable session")
    parser.add_argument("--skip-seed", action="store_true", help="Do not insert the menu first")
    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)

    setup_logging()
    try:
        with open_store() as store:
            run_simulation(
                store,
                num_orders=args.orders,
                unknown_rate=args.unknown_rate,
                seed_menu=not args.skip_seed,
            )
            ok = verify_totals(store)
    except (FatalError, StoreError) as e:
        print(f"\n❌ Simulation aborted: {e}")
        sys.exit(1)

    sys.exit(0 if ok else 1)
