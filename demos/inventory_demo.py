"""
Demonstration of the inventory tracker.

Builds a small grocery store from regular and perishable products, then runs
every query, report and export against it and prints the results.
"""

from datetime import date

from config.config import StoreConfig
from models.events import InventoryEvent
from models.product import Product
from models.store import Store, apply_discount, bulk_update_quantity, remove_out_of_stock
from utils.event_bus import EventBus
from utils.logger import get_logger

logger = get_logger("demos.inventory_demo")


def create_sample_products() -> list[Product]:
    """Sample regular and perishable products used throughout the demo."""
    return [
        Product.regular("Apple", 0.99, 150),
        Product.regular("Bread", 2.49, 30),
        Product.regular("Potato Chips", 3.99, 45),
        Product.perishable("Milk", 1.99, 20, "2024-12-31"),
        Product.perishable("Yogurt", 0.89, 50, "2024-11-15"),
        Product.perishable("Cheese", 4.99, 15, "2025-01-20"),
    ]


def build_store(products: list[Product], config: StoreConfig | None = None) -> Store:
    bus = EventBus()
    events: list[InventoryEvent] = []
    for event_type in ("PRODUCT_ADDED", "DISCOUNT_APPLIED", "QUANTITY_UPDATED"):
        bus.subscribe(event_type, events.append)
    store = Store(name="Demo Grocery", config=config or StoreConfig(), event_bus=bus)
    for product in products:
        store.add_product(product)
    logger.info(f"{len(events)} inventory event(s) recorded while stocking {store.name}")
    return store


def run_demo(as_of: date | None = None) -> dict[str, object]:
    """
    Run every store operation once and return the results keyed by operation name.
    ``as_of`` fixes the date used for expiry checks.
    """
    as_of = as_of or date(2024, 11, 10)
    store = build_store(create_sample_products(), StoreConfig.from_env())

    results: dict[str, object] = {
        "inventory_value": store.get_inventory_value(),
        "find_milk": store.find_product_by_name("milk"),
        "search_ch": store.search_products("ch"),
        "price_1_to_3": store.filter_by_price_range(1, 3),
        "low_stock": store.get_low_stock_products(20),
        "expired": store.get_expired_products(as_of),
        "expiring_soon": store.get_expiring_soon_products(as_of),
        "report": store.generate_sales_report(),
        "csv": store.export_to_csv(),
        "inventory_html": store.display_inventory(),
        "report_html": store.display_sales_report(),
    }

    # Bulk helpers operate on a caller-owned copy so the store stays untouched
    promo = [Product.regular(p.name, p.price, p.quantity) for p in store.inventory if not p.is_perishable]
    results["discounted"] = apply_discount(promo, 0.1)
    results["restocked"] = bulk_update_quantity(promo, "Bread", 0)
    results["in_stock"] = remove_out_of_stock(promo)
    return results


if __name__ == "__main__":
    for key, value in run_demo().items():
        if isinstance(value, list):
            print(f"{key}:")
            for item in value:
                print(f"  {item}")
        else:
            print(f"{key}: {value}")
