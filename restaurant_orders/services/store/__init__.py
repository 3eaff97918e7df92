"""
Store Factory

Provides a single entry point for obtaining a document store instance.
The factory pattern allows the rest of the application to remain agnostic
about which implementation is being used.

Usage:
    from restaurant_orders.services.store import get_store

    # Returns InMemoryStore or MongoStore based on ENV_MODE
    store = get_store()

Environment Switching:
    - ENV_MODE=development → InMemoryStore (no database needed)
    - ENV_MODE=staging → MongoStore
    - ENV_MODE=production → MongoStore (default)

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache

from restaurant_orders.core.config import get_settings
from restaurant_orders.services.store.base import (
    PUSH,
    SET,
    BaseStore,
    Collection,
    StoreError,
    WriteResult,
    parse_document,
)
from restaurant_orders.services.store.mock import InMemoryStore
from restaurant_orders.services.store.mongo import MongoStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_store() -> BaseStore:
    """
    Get the configured store instance.

    The instance is cached so every caller in the process shares
    the same connection (and, in development, the same data).

    Returns:
        BaseStore: Configured store instance
    """
    settings = get_settings()

    if settings.is_development:
        logger.info("Store: Using InMemoryStore (development mode)")
        return InMemoryStore()
    else:
        logger.info(f"Store: Using MongoStore ({settings.env_mode.value} mode)")
        return MongoStore(settings)


def reset_store() -> None:
    """
    Clear the cached store instance.

    The next call to get_store() will create a new instance.
    """
    get_store.cache_clear()
    logger.debug("Store cache cleared")


__all__ = [
    "get_store",
    "reset_store",
    "BaseStore",
    "Collection",
    "StoreError",
    "WriteResult",
    "parse_document",
    "InMemoryStore",
    "MongoStore",
    "PUSH",
    "SET",
]
