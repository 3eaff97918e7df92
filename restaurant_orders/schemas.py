"""
Pydantic Schemas for Stored Documents

Menu items and customers as they live in the document store.
Stored field names keep the camelCase wire format (orderedItems,
totalAmount); Python code uses the snake_case attributes.

Documents read back from the store may be missing fields or carry
null. Those fields come back as zero values ("", 0.0, []).

Author: Khalil Bannouri
Version: 1.0.0
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StoredDocument(BaseModel):
    """Common handling for documents kept in the store."""

    id: Optional[str] = Field(default=None, alias="_id", exclude=True)

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        # Null fields fall back to their defaults
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def coerce_object_id(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    def to_document(self) -> dict:
        """Document written to the store."""
        return self.model_dump(by_alias=True)


# =============================================================================
# MENU
# =============================================================================

class MenuItem(StoredDocument):
    """A dish on the menu. Name is the lookup key."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(default="", examples=["Pizza"])
    price: float = Field(default=0.0, ge=0, examples=[829.17])


# =============================================================================
# CUSTOMERS
# =============================================================================

class Customer(StoredDocument):
    """
    A customer and everything they have ordered.

    ordered_items keeps one entry per order action, duplicates included,
    in the order they were placed. total_amount is only as fresh as the
    last recomputation.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", examples=["Gadapa Raghavendra"])
    phone: str = Field(default="", examples=["1234567890"])
    ordered_items: List[str] = Field(default_factory=list, alias="orderedItems")
    total_amount: float = Field(default=0.0, ge=0, alias="totalAmount")
