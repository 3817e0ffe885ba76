"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class ProductKind(str, Enum):
    """Variant tag of a product record"""

    REGULAR = "Regular"
    PERISHABLE = "Perishable"


class InventoryEventType(str, Enum):
    """Types of inventory events"""

    PRODUCT_ADDED = "PRODUCT_ADDED"  # Record appended to a store
    DISCOUNT_APPLIED = "DISCOUNT_APPLIED"  # Bulk price reduction
    QUANTITY_UPDATED = "QUANTITY_UPDATED"  # Bulk quantity overwrite by name
