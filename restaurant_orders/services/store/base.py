"""
Document Store Abstract Base Class

Defines the interface contract for all store implementations.
Both InMemoryStore and MongoStore must implement these methods, so the
catalog and ledger behave identically whichever one is active.

Design Pattern: Strategy Pattern
    - Allows runtime switching between the in-memory store and MongoDB
    - Facilitates testing with the in-memory implementation

Error model:
    - Writes never raise; they return a WriteResult the caller inspects
    - Reads raise StoreError when the backend fails
    - find_one returns None when nothing matches

Author: Khalil Bannouri
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, TypeVar

from pydantic import BaseModel, ValidationError


class Collection(str, Enum):
    """Record kinds held by the store."""
    MENU = "menu"
    CUSTOMERS = "customers"


# Update operators a store must understand
PUSH = "$push"
SET = "$set"
SUPPORTED_OPERATORS = (PUSH, SET)


ModelT = TypeVar("ModelT", bound=BaseModel)


class StoreError(Exception):
    """Raised when the backing database cannot be reached or read."""


@dataclass
class WriteResult:
    """
    Standardized result from an insert or update.

    Attributes:
        success: Whether the backend accepted the write
        matched_count: Documents matched by an update filter
        inserted_id: Identifier assigned to an inserted document
        error_message: Error description if the write failed
    """
    success: bool
    matched_count: int = 0
    inserted_id: Optional[str] = None
    error_message: Optional[str] = None


def validate_update(update: dict) -> None:
    """
    Reject update documents using anything but $push and $set.

    Raises:
        ValueError: If an operator is unsupported or the document is empty
    """
    if not update:
        raise ValueError("Update document must not be empty")
    unsupported = [op for op in update if op not in SUPPORTED_OPERATORS]
    if unsupported:
        raise ValueError(f"Unsupported update operators: {unsupported}")


def parse_document(model: type[ModelT], document: dict) -> ModelT:
    """
    Build a pydantic model from a stored document.

    Raises:
        StoreError: If the document cannot be read as the model
    """
    try:
        return model.model_validate(document)
    except ValidationError as e:
        raise StoreError(
            f"Malformed {model.__name__} document {document.get('_id')}: {e}"
        ) from e


class BaseStore(ABC):
    """
    Abstract base class for document stores.

    Filters are equality predicates on top-level fields, e.g.
    ``{"name": "Pizza"}``. Updates are ``{"$push": {field: value}}`` or
    ``{"$set": {field: value}}`` and apply to the first matching document.

    Example:
        >>> store = get_store()
        >>> store.insert(Collection.MENU, {"name": "Pizza", "price": 829.17})
        >>> store.find_one(Collection.MENU, {"name": "Pizza"})
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the store backend.

        Returns:
            str: Provider name (e.g., "memory", "mongodb")
        """
        pass

    @abstractmethod
    def insert(self, collection: Collection, record: dict) -> WriteResult:
        """
        Insert a single document.

        Args:
            collection: Target record kind
            record: Document to store (not mutated)

        Returns:
            WriteResult: inserted_id set on success
        """
        pass

    @abstractmethod
    def find_one(self, collection: Collection, filter: dict) -> Optional[dict]:
        """
        Fetch the first document matching ``filter``.

        Returns:
            dict or None: The document, or None when nothing matches

        Raises:
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    def find_all(
        self,
        collection: Collection,
        filter: Optional[dict] = None,
    ) -> Iterator[dict]:
        """
        Lazily iterate documents matching ``filter`` in store order.

        Raises:
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    def update_field(
        self,
        collection: Collection,
        filter: dict,
        update: dict[str, dict[str, Any]],
    ) -> WriteResult:
        """
        Apply a $push or $set update to the first matching document.

        Returns:
            WriteResult: matched_count is 0 when no document matched
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Verify connectivity to the store.

        Returns:
            bool: True if the store is reachable
        """
        pass

    def close(self) -> None:
        """Release backend resources."""
