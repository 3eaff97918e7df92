"""
MongoDB Store Implementation

Production implementation using the official PyMongo driver.
Used when ENV_MODE=production or ENV_MODE=staging.

Requirements:
    - MONGO_URL must point to a reachable MongoDB server
    - MONGO_DATABASE selects the database (default: restaurant)

Notes:
    - Calls are synchronous and block until the server answers
    - Driver errors on writes become failed WriteResults
    - Driver errors on reads become StoreError

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from typing import Any, Iterator, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from restaurant_orders.core.config import Settings, get_settings
from restaurant_orders.services.store.base import (
    BaseStore,
    Collection,
    StoreError,
    WriteResult,
    validate_update,
)

logger = logging.getLogger(__name__)


class MongoStore(BaseStore):
    """
    Production MongoDB store implementation.

    Maps each Collection to a MongoDB collection named in settings
    and forwards equality filters and $push/$set updates unchanged.

    Example:
        >>> store = MongoStore()
        >>> store.health_check()
        True
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[MongoClient] = None,
    ):
        """
        Create the driver client.

        Args:
            settings: Store configuration (defaults to get_settings())
            client: Pre-built client, mainly for tests

        Raises:
            StoreError: If the connection URL is malformed
        """
        self._settings = settings or get_settings()
        try:
            self._client = client or MongoClient(
                self._settings.mongo_url,
                serverSelectionTimeoutMS=self._settings.mongo_timeout_ms,
            )
        except PyMongoError as e:
            raise StoreError(f"Invalid MongoDB configuration: {e}") from e
        self._db = self._client[self._settings.mongo_database]
        self._collection_names = {
            Collection.MENU: self._settings.menu_collection,
            Collection.CUSTOMERS: self._settings.customers_collection,
        }

        logger.info(
            f"MongoStore initialized "
            f"(database={self._settings.mongo_database})"
        )

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "mongodb"

    def _collection(self, collection: Collection):
        return self._db[self._collection_names[Collection(collection)]]

    def insert(self, collection: Collection, record: dict) -> WriteResult:
        # insert_one adds "_id" to the dict it is given
        document = dict(record)
        try:
            result = self._collection(collection).insert_one(document)
        except PyMongoError as e:
            logger.error(f"MongoDB insert into {Collection(collection).value} failed: {e}")
            return WriteResult(success=False, error_message=str(e))

        return WriteResult(success=True, inserted_id=str(result.inserted_id))

    def find_one(self, collection: Collection, filter: dict) -> Optional[dict]:
        try:
            return self._collection(collection).find_one(filter)
        except PyMongoError as e:
            raise StoreError(
                f"Error reading {Collection(collection).value}: {e}"
            ) from e

    def find_all(
        self,
        collection: Collection,
        filter: Optional[dict] = None,
    ) -> Iterator[dict]:
        try:
            with self._collection(collection).find(filter or {}) as cursor:
                for document in cursor:
                    yield document
        except PyMongoError as e:
            raise StoreError(
                f"Error retrieving {Collection(collection).value}: {e}"
            ) from e

    def update_field(
        self,
        collection: Collection,
        filter: dict,
        update: dict[str, dict[str, Any]],
    ) -> WriteResult:
        validate_update(update)
        try:
            result = self._collection(collection).update_one(filter, update)
        except PyMongoError as e:
            logger.error(f"MongoDB update on {Collection(collection).value} failed: {e}")
            return WriteResult(success=False, error_message=str(e))

        return WriteResult(success=True, matched_count=result.matched_count)

    def health_check(self) -> bool:
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    def close(self) -> None:
        self._client.close()
        logger.debug("MongoDB client closed")
