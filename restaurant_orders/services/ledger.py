"""
Customer Ledger Service

Registers customers, records ordered items and computes order totals.

Every operation returns a LedgerResult instead of raising, so the
caller decides what is fatal:
    - ITEM_NOT_FOUND / CUSTOMER_NOT_FOUND are reported and the session goes on
    - STORE_ERROR means the database rejected a write; the entry point aborts

Totals are never maintained incrementally. compute_and_store_total()
recounts the customer's ordered items against current menu prices and
overwrites totalAmount, so running it twice gives the same answer.

Author: Khalil Bannouri
Version: 1.0.0
"""

import enum
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from restaurant_orders.schemas import Customer
from restaurant_orders.services.catalog import Catalog
from restaurant_orders.services.store import (
    PUSH,
    SET,
    BaseStore,
    Collection,
    parse_document,
)

logger = logging.getLogger(__name__)


class LedgerOutcome(str, enum.Enum):
    """What a ledger operation did."""
    REGISTERED = "registered"
    ORDERED = "ordered"
    TOTAL_STORED = "total_stored"
    ITEM_NOT_FOUND = "item_not_found"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    STORE_ERROR = "store_error"


@dataclass
class LedgerResult:
    """
    Standardized result from a ledger operation.

    Attributes:
        outcome: What happened
        message: Operator-facing line describing it
        customer_name: Customer the operation targeted
        item_name: Menu item, for order operations
        total_amount: Stored total, for total computation
    """
    outcome: LedgerOutcome
    message: str
    customer_name: str
    item_name: Optional[str] = None
    total_amount: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.outcome in (
            LedgerOutcome.REGISTERED,
            LedgerOutcome.ORDERED,
            LedgerOutcome.TOTAL_STORED,
        )

    @property
    def is_fatal(self) -> bool:
        return self.outcome == LedgerOutcome.STORE_ERROR


def calculate_total(ordered_items: list[str], prices: dict[str, float]) -> float:
    """
    Sum price × count over distinct item names.

    Names missing from ``prices`` contribute nothing.
    """
    counts = Counter(ordered_items)
    total = sum(
        prices[name] * count
        for name, count in counts.items()
        if name in prices
    )
    return round(total, 2)


class Ledger:
    """Customer and order operations against the store."""

    def __init__(self, store: BaseStore, catalog: Optional[Catalog] = None):
        self.store = store
        self.catalog = catalog or Catalog(store)

    # =========================================================================
    # CUSTOMERS
    # =========================================================================

    def register_customer(self, name: str, phone: str) -> LedgerResult:
        """Insert a customer with no orders and a zero total."""
        customer = Customer(name=name, phone=phone)
        result = self.store.insert(Collection.CUSTOMERS, customer.to_document())

        if not result.success:
            logger.error(f"Error adding customer {name}: {result.error_message}")
            return LedgerResult(
                outcome=LedgerOutcome.STORE_ERROR,
                message=f"Error adding customer: {result.error_message}",
                customer_name=name,
            )

        logger.info(f"Registered customer {name} ({result.inserted_id})")
        return LedgerResult(
            outcome=LedgerOutcome.REGISTERED,
            message=f"Customer added: {name}",
            customer_name=name,
        )

    def get_customer(self, name: str) -> Optional[Customer]:
        """First customer with this name, or None."""
        document = self.store.find_one(Collection.CUSTOMERS, {"name": name})
        if document is None:
            return None
        return parse_document(Customer, document)

    def list_customers(self) -> list[Customer]:
        """All customers in store order."""
        return [
            parse_document(Customer, doc)
            for doc in self.store.find_all(Collection.CUSTOMERS)
        ]

    # =========================================================================
    # ORDERING
    # =========================================================================

    def order_item(self, customer_name: str, item_name: str) -> LedgerResult:
        """
        Append ``item_name`` to the customer's ordered items.

        The item must be on the menu; nothing is written otherwise.
        """
        if self.catalog.find_item(item_name) is None:
            logger.info(f"Rejected order for unknown item {item_name!r}")
            return LedgerResult(
                outcome=LedgerOutcome.ITEM_NOT_FOUND,
                message=f"Item {item_name} not found in menu",
                customer_name=customer_name,
                item_name=item_name,
            )

        result = self.store.update_field(
            Collection.CUSTOMERS,
            {"name": customer_name},
            {PUSH: {"orderedItems": item_name}},
        )

        if not result.success:
            logger.error(f"Error ordering item {item_name}: {result.error_message}")
            return LedgerResult(
                outcome=LedgerOutcome.STORE_ERROR,
                message=f"Error ordering item: {result.error_message}",
                customer_name=customer_name,
                item_name=item_name,
            )

        if result.matched_count == 0:
            logger.info(f"Order for unknown customer {customer_name!r} dropped")
            return LedgerResult(
                outcome=LedgerOutcome.CUSTOMER_NOT_FOUND,
                message=f"No customer found with name: {customer_name}",
                customer_name=customer_name,
                item_name=item_name,
            )

        logger.info(f"{customer_name} ordered {item_name}")
        return LedgerResult(
            outcome=LedgerOutcome.ORDERED,
            message=f"Customer {customer_name} ordered item: {item_name}",
            customer_name=customer_name,
            item_name=item_name,
        )

    # =========================================================================
    # TOTALS
    # =========================================================================

    def compute_and_store_total(self, customer_name: str) -> LedgerResult:
        """
        Recompute the customer's total from current menu prices and store it.

        Items that have left the menu count as zero.
        """
        customer = self.get_customer(customer_name)
        if customer is None:
            return LedgerResult(
                outcome=LedgerOutcome.CUSTOMER_NOT_FOUND,
                message="Customer not found.",
                customer_name=customer_name,
            )

        prices: dict[str, float] = {}
        for name in set(customer.ordered_items):
            item = self.catalog.find_item(name)
            if item is None:
                logger.warning(f"{name!r} is no longer on the menu; not charged")
                continue
            prices[name] = item.price

        total = calculate_total(customer.ordered_items, prices)

        result = self.store.update_field(
            Collection.CUSTOMERS,
            {"name": customer_name},
            {SET: {"totalAmount": total}},
        )
        if not result.success:
            logger.error(f"Error updating total amount: {result.error_message}")
            return LedgerResult(
                outcome=LedgerOutcome.STORE_ERROR,
                message=f"Error updating total amount: {result.error_message}",
                customer_name=customer_name,
            )

        logger.info(f"Stored total {total:.2f} for {customer_name}")
        return LedgerResult(
            outcome=LedgerOutcome.TOTAL_STORED,
            message=(
                f"Thank you, {customer_name}! Your order has been received. "
                f"Please wait while we prepare your meal...!"
            ),
            customer_name=customer_name,
            total_amount=total,
        )
