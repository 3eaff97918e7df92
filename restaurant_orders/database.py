"""
Database Connection Module
Opens the configured document store and guarantees it is closed again.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from restaurant_orders.services.store import BaseStore, StoreError, get_store, reset_store

logger = logging.getLogger(__name__)


@contextmanager
def open_store(store: Optional[BaseStore] = None) -> Iterator[BaseStore]:
    """
    Acquire the store for the lifetime of the process.

    Verifies connectivity before yielding and closes the store
    on exit, including when the body raises.

    Raises:
        StoreError: If the store is unreachable
    """
    owned = store is None
    store = store or get_store()

    if not store.health_check():
        store.close()
        if owned:
            reset_store()
        raise StoreError(f"Failed to connect to {store.provider_name} store")

    logger.info(f"✅ Connected to {store.provider_name} store")
    try:
        yield store
    finally:
        store.close()
        if owned:
            reset_store()
        logger.info("✅ Store connection closed")
