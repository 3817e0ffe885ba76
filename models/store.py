"""
Data model for a store and the queries, reports and exports derived from its inventory.

The bulk helpers defined ahead of ``Store`` work on any list of products a
caller hands them, not only a store's own inventory. ``apply_discount`` and
``bulk_update_quantity`` mutate the records they are given in place;
``remove_out_of_stock`` returns a new list.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pandas as pd

from config.config import StoreConfig
from utils.event_bus import EventBus
from utils.formatting import build_csv, render_inventory_html, render_sales_report_html

from .errors import ValidationError
from .events import DiscountApplied, InventoryEvent, ProductAdded, QuantityUpdated
from .payloads import parse_product
from .product import Product
from .reports import SalesReport, build_sales_report, inventory_frame

logger = logging.getLogger(__name__)


# --- Bulk helpers ---


def apply_discount(products: list[Product], discount_fraction: float) -> int:
    """
    Reduce the price of every Product in ``products`` by ``discount_fraction``, in place.
    Entries that are not products are skipped. All arguments are checked
    before any price changes.

    Args:
        products: List or tuple of records to discount
        discount_fraction: Fraction of the price to take off, within [0, 1]

    Returns:
        int: Number of products discounted

    Raises:
        ValidationError: if ``products`` is not a list/tuple or the fraction is
            non-numeric or outside [0, 1]
    """
    if not isinstance(products, list | tuple):
        logger.warning(f"apply_discount called with {type(products).__name__} instead of a list")
        raise ValidationError("Products must be provided as a list")
    if isinstance(discount_fraction, bool) or not isinstance(discount_fraction, int | float):
        raise ValidationError(f"Discount must be a number, got {discount_fraction!r}")
    if not 0 <= discount_fraction <= 1:
        logger.warning(f"Rejected discount fraction {discount_fraction}")
        raise ValidationError("Discount must be between 0 and 1")

    affected = 0
    for product in products:
        if isinstance(product, Product):
            product.price = product.price * (1 - discount_fraction)
            affected += 1
    logger.info(f"Applied discount of {discount_fraction} to {affected} product(s)")
    return affected


def bulk_update_quantity(products: list[Product], name: str, new_quantity: int) -> int:
    """
    Set ``quantity`` on every product named exactly ``name`` (case-sensitive), in place.
    Entries that are not products are skipped.

    Returns:
        int: Number of products updated, 0 when nothing matches
    """
    updated = 0
    for product in products:
        if isinstance(product, Product) and product.name == name:
            product.quantity = new_quantity
            updated += 1
    logger.info(f"Updated quantity of '{name}' to {new_quantity} on {updated} product(s)")
    return updated


def remove_out_of_stock(products: list[Product], threshold: int = 0) -> list[Product]:
    """Return a new list holding only products with quantity above ``threshold``; non-products are dropped."""
    return [p for p in products if isinstance(p, Product) and p.quantity > threshold]


@dataclass
class Store:
    """
    Represents a store holding an ordered inventory of products.
    Insertion order is the iteration order of every query.
    """

    name: str = "Store"
    inventory: list[Product] = field(default_factory=list)
    config: StoreConfig = field(default_factory=StoreConfig)
    event_bus: EventBus | None = None

    apply_discount = staticmethod(apply_discount)
    bulk_update_quantity = staticmethod(bulk_update_quantity)
    remove_out_of_stock = staticmethod(remove_out_of_stock)

    # --- Mutation ---

    def add_product(self, product: Product) -> None:
        """
        Append a product to the inventory.

        Raises:
            ValidationError: if ``product`` is not a Product; the inventory is left unchanged.
        """
        if not isinstance(product, Product):
            logger.warning(f"Rejected non-product record of type {type(product).__name__}")
            raise ValidationError("Only Product or PerishableProduct records can be added")
        self.inventory.append(product)
        logger.info(f"Added: {product.name} to inventory")
        self._notify(ProductAdded(store_name=self.name, product_name=product.name))

    def load_products(self, rows: Iterable[Mapping[str, Any]]) -> int:
        """
        Validate raw product mappings and add them in order.
        Stops at the first invalid row; rows before it stay added.

        Returns:
            int: Number of products added
        """
        added = 0
        for row in rows:
            self.add_product(parse_product(row))
            added += 1
        return added

    def discount_inventory(self, discount_fraction: float) -> int:
        """Apply ``apply_discount`` to this store's own inventory."""
        affected = apply_discount(self.inventory, discount_fraction)
        self._notify(
            DiscountApplied(
                store_name=self.name,
                discount_fraction=discount_fraction,
                affected_count=affected,
            )
        )
        return affected

    def update_quantity(self, name: str, new_quantity: int) -> int:
        """Apply ``bulk_update_quantity`` to this store's own inventory."""
        affected = bulk_update_quantity(self.inventory, name, new_quantity)
        if affected:
            self._notify(
                QuantityUpdated(
                    store_name=self.name,
                    product_name=name,
                    new_quantity=new_quantity,
                    affected_count=affected,
                )
            )
        return affected

    def prune_out_of_stock(self, threshold: int | None = None) -> list[Product]:
        """In-stock view of the inventory; the inventory itself is not changed."""
        if threshold is None:
            threshold = self.config.out_of_stock_threshold
        return remove_out_of_stock(self.inventory, threshold)

    # --- Lookup & filtering ---

    def get_inventory_value(self) -> float:
        """Sum of total value over all products, 0 when the inventory is empty."""
        return sum((product.total_value for product in self.inventory), 0)

    def find_product_by_name(self, name: str) -> Product | None:
        """Case-insensitive exact match; first match in insertion order or None."""
        if not isinstance(name, str):
            return None
        wanted = name.lower()
        return next((p for p in self.inventory if p.name.lower() == wanted), None)

    def search_products(self, term: str) -> list[Product]:
        """Case-insensitive substring match on product names."""
        if not isinstance(term, str) or not term:
            return []
        needle = term.lower()
        return [p for p in self.inventory if needle in p.name.lower()]

    def filter_by_price_range(self, min_price: float, max_price: float) -> list[Product]:
        """Products priced within [min_price, max_price]; empty when min_price > max_price."""
        return [p for p in self.inventory if min_price <= p.price <= max_price]

    def get_low_stock_products(self, threshold: int | None = None) -> list[Product]:
        """Products whose quantity is strictly below ``threshold``."""
        if threshold is None:
            threshold = self.config.low_stock_threshold
        low = [p for p in self.inventory if p.quantity < threshold]
        logger.debug(f"{len(low)} product(s) below stock threshold {threshold}")
        return low

    def get_expired_products(self, as_of: date | None = None) -> list[Product]:
        """Perishables whose expiration date lies before ``as_of`` (today by default)."""
        return [p for p in self.inventory if p.is_expired(as_of)]

    def get_expiring_soon_products(
        self, as_of: date | None = None, horizon_days: int | None = None
    ) -> list[Product]:
        """Perishables expiring within ``horizon_days`` of ``as_of``; horizon defaults to the store config."""
        if horizon_days is None:
            horizon_days = self.config.expiring_soon_days
        return [p for p in self.inventory if p.is_expiring_soon(as_of, horizon_days)]

    # --- Reporting ---

    def generate_sales_report(self) -> SalesReport:
        return build_sales_report(self.inventory)

    def to_dataframe(self) -> pd.DataFrame:
        return inventory_frame(self.inventory)

    # --- Export & presentation ---

    def export_to_csv(self) -> str:
        return build_csv(self.inventory, self.config.csv_line_separator)

    def display_inventory(self) -> str:
        return render_inventory_html(self.inventory, self.config.currency_symbol)

    def display_sales_report(self) -> str:
        return render_sales_report_html(self.generate_sales_report(), self.config.currency_symbol)

    def _notify(self, event: InventoryEvent) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)

    def __len__(self) -> int:
        return len(self.inventory)

    def __str__(self) -> str:
        return f"Store(name={self.name}, products={len(self.inventory)})"


