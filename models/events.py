"""
Data models for events published by a store after it mutates its inventory.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .enums import InventoryEventType


class InventoryEvent(BaseModel):
    """Notification emitted once an inventory mutation has succeeded."""

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_type: InventoryEventType
    store_name: str
    payload: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=datetime.now)


class ProductAdded(InventoryEvent):
    """Event for a record appended to the inventory"""

    event_type: InventoryEventType = InventoryEventType.PRODUCT_ADDED
    product_name: str


class DiscountApplied(InventoryEvent):
    """Event for a bulk price reduction over the inventory"""

    event_type: InventoryEventType = InventoryEventType.DISCOUNT_APPLIED
    discount_fraction: float
    affected_count: int


class QuantityUpdated(InventoryEvent):
    """Event for a bulk quantity overwrite by product name"""

    event_type: InventoryEventType = InventoryEventType.QUANTITY_UPDATED
    product_name: str
    new_quantity: int
    affected_count: int
