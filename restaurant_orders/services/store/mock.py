"""
In-Memory Store Implementation

Stores documents in process memory with MongoDB-like semantics.
Used in development mode (ENV_MODE=development) to:
    - Run the ordering demo without a MongoDB server
    - Back the test-suite
    - Reproduce write failures on demand

Behavior:
    - Documents keep insertion order
    - Each inserted document gets a 24-hex-digit "_id"
    - Reads return copies, never the stored documents themselves
    - fail_writes=True makes every insert/update report failure

Author: Khalil Bannouri
Version: 1.0.0
"""

import copy
import logging
import uuid
from typing import Any, Iterator, Optional

from restaurant_orders.services.store.base import (
    PUSH,
    SET,
    BaseStore,
    Collection,
    StoreError,
    WriteResult,
    validate_update,
)

logger = logging.getLogger(__name__)


class InMemoryStore(BaseStore):
    """
    Mock implementation of the document store.

    Attributes:
        fail_writes: Simulate a database that rejects every write
        available: Simulate a reachable server (health_check result)

    Example:
        >>> store = InMemoryStore()
        >>> store.insert(Collection.CUSTOMERS, {"name": "Ana", "orderedItems": []})
        >>> store.update_field(
        ...     Collection.CUSTOMERS, {"name": "Ana"}, {"$push": {"orderedItems": "Pizza"}}
        ... ).matched_count
        1
    """

    def __init__(self, fail_writes: bool = False, available: bool = True):
        self.fail_writes = fail_writes
        self.available = available
        self._collections: dict[Collection, list[dict]] = {
            kind: [] for kind in Collection
        }
        self._closed = False

        logger.info(f"InMemoryStore initialized (fail_writes={fail_writes})")

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "memory"

    def _generate_id(self) -> str:
        """Generate an ObjectId-like identifier."""
        return uuid.uuid4().hex[:24]

    def _documents(self, collection: Collection) -> list[dict]:
        if self._closed:
            raise StoreError("Store is closed")
        return self._collections[Collection(collection)]

    @staticmethod
    def _matches(document: dict, filter: Optional[dict]) -> bool:
        if not filter:
            return True
        return all(
            key in document and document[key] == value
            for key, value in filter.items()
        )

    def _rejected(self, operation: str) -> WriteResult:
        message = f"Simulated write failure during {operation}"
        logger.warning(message)
        return WriteResult(success=False, error_message=message)

    def insert(self, collection: Collection, record: dict) -> WriteResult:
        if self.fail_writes:
            return self._rejected("insert")

        document = copy.deepcopy(record)
        document.setdefault("_id", self._generate_id())
        self._documents(collection).append(document)

        logger.debug(f"Inserted {document['_id']} into {Collection(collection).value}")
        return WriteResult(success=True, matched_count=0, inserted_id=document["_id"])

    def find_one(self, collection: Collection, filter: dict) -> Optional[dict]:
        for document in self._documents(collection):
            if self._matches(document, filter):
                return copy.deepcopy(document)
        return None

    def find_all(
        self,
        collection: Collection,
        filter: Optional[dict] = None,
    ) -> Iterator[dict]:
        # Snapshot so inserts during iteration don't affect the cursor
        documents = list(self._documents(collection))
        for document in documents:
            if self._matches(document, filter):
                yield copy.deepcopy(document)

    def update_field(
        self,
        collection: Collection,
        filter: dict,
        update: dict[str, dict[str, Any]],
    ) -> WriteResult:
        validate_update(update)
        if self.fail_writes:
            return self._rejected("update")

        for document in self._documents(collection):
            if not self._matches(document, filter):
                continue

            for field, value in update.get(PUSH, {}).items():
                current = document.setdefault(field, [])
                if not isinstance(current, list):
                    return WriteResult(
                        success=False,
                        matched_count=1,
                        error_message=f"Cannot apply $push to non-array field '{field}'",
                    )
                current.append(copy.deepcopy(value))

            for field, value in update.get(SET, {}).items():
                document[field] = copy.deepcopy(value)

            return WriteResult(success=True, matched_count=1)

        return WriteResult(success=True, matched_count=0)

    def health_check(self) -> bool:
        return self.available and not self._closed

    def close(self) -> None:
        self._closed = True
        logger.debug("InMemoryStore closed")

