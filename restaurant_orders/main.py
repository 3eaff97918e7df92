"""
Command-Line Application Entry Point

Restaurant Ordering System - Hybrid Architecture
Runs against MongoDB by default, or the in-memory store when ENV_MODE=development.

Flow:
    1. Open the store and verify connectivity
    2. Seed the menu (unless --skip-seed / SEED_MENU=false)
    3. Register the customer
    4. Interactive ordering session
    5. Print every customer with their orders

Any store failure aborts with a diagnostic on stderr and exit status 1.
Records written before the failure are left in place.

Usage:
    python -m restaurant_orders --customer-name "Ana" --phone 5550100

Author: Khalil Bannouri
Version: 1.0.0
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from restaurant_orders.console import ConsoleWorkflow, FatalError
from restaurant_orders.core.config import Settings, get_settings, setup_logging
from restaurant_orders.database import open_store
from restaurant_orders.services.catalog import Catalog
from restaurant_orders.services.ledger import Ledger
from restaurant_orders.services.store import BaseStore, StoreError

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restaurant-orders",
        description="Seed a menu, register a customer and take their order.",
    )
    parser.add_argument(
        "--customer-name",
        default=settings.default_customer_name,
        help=f"Customer to register and order for (default: {settings.default_customer_name})",
    )
    parser.add_argument(
        "--phone",
        default=settings.default_customer_phone,
        help="Customer phone number",
    )
    parser.add_argument(
        "--skip-seed",
        action="store_true",
        help="Do not insert the menu (it is duplicated on every seeding)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def run(
    args: argparse.Namespace,
    settings: Settings,
    store: BaseStore,
    reader: Callable[[], str] = input,
    writer: Callable[[str], None] = print,
) -> None:
    """
    Run one ordering session against an open store.

    Raises:
        FatalError: If seeding, registration or an order write fails
        StoreError: If the store cannot be read
    """
    catalog = Catalog(store)
    ledger = Ledger(store, catalog)
    workflow = ConsoleWorkflow(catalog, ledger, settings, reader=reader, writer=writer)

    if settings.seed_menu and not args.skip_seed:
        seeded = catalog.seed_menu()
        if not seeded.success:
            raise FatalError(seeded.error_message)
        writer("Menu items added to the database!")

    registered = ledger.register_customer(args.customer_name, args.phone)
    if not registered.success:
        raise FatalError(registered.message)
    writer(registered.message)

    writer("")
    writer(f"Welcome to the {settings.app_name}!")
    workflow.place_order(args.customer_name)

    workflow.show_customers()


def main(
    argv: Optional[list[str]] = None,
    store: Optional[BaseStore] = None,
    reader: Callable[[], str] = input,
    writer: Callable[[str], None] = print,
) -> int:
    """Console script entry point. Returns the process exit status."""
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    setup_logging(debug=args.debug)

    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info("=" * 60)

    try:
        with open_store(store) as opened:
            run(args, settings, opened, reader=reader, writer=writer)
    except (FatalError, StoreError) as e:
        logger.critical(f"❌ Aborting: {e}")
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    logger.info("✅ Session complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
