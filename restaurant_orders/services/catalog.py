"""
Menu Catalog Service

Seeds the fixed menu and reads it back from the store.
Holds no menu state of its own: every call goes to the store.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from restaurant_orders.schemas import MenuItem
from restaurant_orders.services.store import BaseStore, Collection, parse_document

logger = logging.getLogger(__name__)


DEFAULT_MENU: tuple[MenuItem, ...] = (
    MenuItem(name="Pizza", price=829.17),
    MenuItem(name="Burger", price=497.17),
    MenuItem(name="Pasta", price=663.17),
    MenuItem(name="Salad", price=414.17),
    MenuItem(name="Sushi", price=1078.17),
    MenuItem(name="Sandwich", price=331.17),
    MenuItem(name="Tacos", price=580.17),
    MenuItem(name="Steak", price=1327.17),
    MenuItem(name="Fries", price=248.17),
    MenuItem(name="Ice Cream", price=290.50),
)


@dataclass
class SeedResult:
    """Outcome of seeding the menu."""
    success: bool
    inserted: int = 0
    error_message: Optional[str] = None


class Catalog:
    """Menu operations against the store."""

    def __init__(self, store: BaseStore):
        self.store = store

    def seed_menu(self, items: Iterable[MenuItem] = DEFAULT_MENU) -> SeedResult:
        """
        Insert every item, one document each.

        No uniqueness check: seeding twice lists every dish twice.
        Stops at the first rejected write; items already inserted stay.
        """
        inserted = 0
        for item in items:
            result = self.store.insert(Collection.MENU, item.to_document())
            if not result.success:
                logger.error(f"Error adding menu item {item.name}: {result.error_message}")
                return SeedResult(
                    success=False,
                    inserted=inserted,
                    error_message=f"Error adding menu item {item.name}: {result.error_message}",
                )
            inserted += 1

        logger.info(f"Seeded {inserted} menu items")
        return SeedResult(success=True, inserted=inserted)

    def list_menu(self) -> list[MenuItem]:
        """All menu items in store order."""
        return [parse_document(MenuItem, doc) for doc in self.store.find_all(Collection.MENU)]

    def find_item(self, name: str) -> Optional[MenuItem]:
        """Exact, case-sensitive lookup by name."""
        document = self.store.find_one(Collection.MENU, {"name": name})
        if document is None:
            return None
        return parse_document(MenuItem, document)
