"""
Console Ordering Workflow

Drives one customer's ordering session over line-oriented stdin/stdout:

    show menu → read item name → order it → repeat
    until the sentinel ("done", any case) or end of input,
    then compute and store the total.

Reading and writing go through injectable callables so the
session can be scripted.
"""

import logging
from typing import Callable, Optional

from restaurant_orders.core.config import Settings, get_settings
from restaurant_orders.schemas import Customer, MenuItem
from restaurant_orders.services.catalog import Catalog
from restaurant_orders.services.ledger import Ledger, LedgerResult

logger = logging.getLogger(__name__)

PROMPT = "Enter the name of the item you want to order (or type '{sentinel}' to finish):"


class FatalError(Exception):
    """A store write failed mid-session; the process must stop."""


def format_amount(amount: float, currency: str) -> str:
    return f"{currency} {amount:.2f}"


def format_menu_line(item: MenuItem, currency: str) -> str:
    return f"{item.name}, Price: {format_amount(item.price, currency)}"


def format_customer_line(customer: Customer, currency: str) -> str:
    orders = "[" + " ".join(customer.ordered_items) + "]"
    return (
        f"Name: {customer.name}, Phone: {customer.phone}, "
        f"Orders: {orders}, "
        f"Total Amount: {format_amount(customer.total_amount, currency)}"
    )


class ConsoleWorkflow:
    """Interactive ordering loop for a single customer."""

    def __init__(
        self,
        catalog: Catalog,
        ledger: Ledger,
        settings: Optional[Settings] = None,
        reader: Callable[[], str] = input,
        writer: Callable[[str], None] = print,
    ):
        self.catalog = catalog
        self.ledger = ledger
        self.settings = settings or get_settings()
        self.reader = reader
        self.writer = writer

    def show_menu(self) -> list[MenuItem]:
        items = self.catalog.list_menu()
        self.writer("Menu:")
        for item in items:
            self.writer(format_menu_line(item, self.settings.currency_symbol))
        return items

    def show_customers(self) -> list[Customer]:
        customers = self.ledger.list_customers()
        self.writer("Total Customers:")
        for customer in customers:
            self.writer(format_customer_line(customer, self.settings.currency_symbol))
        return customers

    def is_sentinel(self, line: str) -> bool:
        return line.strip().lower() == self.settings.order_sentinel.lower()

    def _read_line(self) -> Optional[str]:
        try:
            return self.reader()
        except EOFError:
            logger.info("Input closed; finishing order")
            return None

    def place_order(self, customer_name: str) -> LedgerResult:
        """
        Run the ordering loop, then compute and store the total.

        Raises:
            FatalError: If the store rejects a write
        """
        prompt = PROMPT.format(sentinel=self.settings.order_sentinel)

        while True:
            self.show_menu()
            self.writer(prompt)

            line = self._read_line()
            if line is None:
                break

            item_name = line.strip()
            if self.is_sentinel(item_name):
                break

            result = self.ledger.order_item(customer_name, item_name)
            if result.is_fatal:
                raise FatalError(result.message)
            self.writer(result.message)

        result = self.ledger.compute_and_store_total(customer_name)
        if result.is_fatal:
            raise FatalError(result.message)
        self.writer(result.message)
        return result
