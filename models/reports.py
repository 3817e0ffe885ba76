"""
Reporting models derived from a product collection.
Includes the SalesReport summary and a pandas view of the inventory.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pandas as pd

from .product import Product

FRAME_COLUMNS = ["name", "price", "quantity", "total_value", "expiration_date", "type"]


@dataclass(frozen=True)
class SalesReport:
    """
    Summary statistics over an inventory snapshot.
    ``highest_value_product`` and ``lowest_value_product`` are None for an empty inventory.
    """

    total_products: int
    total_value: float
    average_price: float
    highest_value_product: Product | None
    lowest_value_product: Product | None
    perishable_count: int
    regular_count: int

    def to_dict(self) -> dict[str, Any]:
        """Mapping with the report's fixed camelCase keys."""
        return {
            "totalProducts": self.total_products,
            "totalValue": self.total_value,
            "averagePrice": self.average_price,
            "highestValueProduct": self.highest_value_product,
            "lowestValueProduct": self.lowest_value_product,
            "perishableCount": self.perishable_count,
            "regularCount": self.regular_count,
        }


def build_sales_report(products: Sequence[Product]) -> SalesReport:
    """Summarise ``products`` without mutating them."""
    total_products = len(products)
    if total_products == 0:
        return SalesReport(
            total_products=0,
            total_value=0,
            average_price=0,
            highest_value_product=None,
            lowest_value_product=None,
            perishable_count=0,
            regular_count=0,
        )

    # max/min keep the first element among equals
    highest = max(products, key=lambda p: p.total_value)
    lowest = min(products, key=lambda p: p.total_value)
    perishable_count = sum(1 for p in products if p.is_perishable)
    return SalesReport(
        total_products=total_products,
        total_value=sum(p.total_value for p in products),
        average_price=sum(p.price for p in products) / total_products,
        highest_value_product=highest,
        lowest_value_product=lowest,
        perishable_count=perishable_count,
        regular_count=total_products - perishable_count,
    )


def inventory_frame(products: Sequence[Product]) -> pd.DataFrame:
    """One row per product in insertion order; regular products have no expiration date."""
    rows = [
        {
            "name": p.name,
            "price": p.price,
            "quantity": p.quantity,
            "total_value": p.total_value,
            "expiration_date": p.expiration_date,
            "type": p.kind.value,
        }
        for p in products
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
