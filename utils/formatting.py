"""
String production for inventory exports: currency display, CSV text and HTML fragments.
Nothing here writes files or touches a UI; callers decide where the text goes.
"""

from collections.abc import Iterable
from html import escape

from models.enums import ProductKind
from models.product import Product
from models.reports import SalesReport

CSV_HEADER = "Name,Price,Quantity,Total Value,Expiration Date,Type"
CSV_MISSING_DATE = "N/A"
EMPTY_INVENTORY_HTML = '<p class="empty-inventory">No products in inventory.</p>'

_TABLE_COLUMNS = ("Name", "Price", "Quantity", "Total Value", "Expiration Date", "Type")


def format_money(amount: float) -> str:
    """Two-decimal rendering used by CSV export."""
    return f"{amount:.2f}"


def format_currency(amount: float, symbol: str = "$") -> str:
    return f"{symbol}{format_money(amount)}"


def format_expiration(product: Product) -> str:
    if product.kind == ProductKind.PERISHABLE:
        return product.expiration_date.isoformat()
    return CSV_MISSING_DATE


def csv_row(product: Product) -> str:
    """
    One CSV line for a product.

    The name is wrapped in double quotes as-is; embedded quotes or commas are
    not escaped, so such names produce rows that strict CSV readers split
    differently.
    """
    return ",".join(
        [
            f'"{product.name}"',
            format_money(product.price),
            str(product.quantity),
            format_money(product.total_value),
            format_expiration(product),
            product.kind.value,
        ]
    )


def build_csv(products: Iterable[Product], line_separator: str = "\n") -> str:
    """Header plus one row per product, without a trailing separator."""
    rows = [CSV_HEADER]
    rows.extend(csv_row(product) for product in products)
    return line_separator.join(rows)


def render_inventory_html(products: list[Product], currency_symbol: str = "$") -> str:
    """HTML table of the inventory, or the empty fragment when there is nothing to show."""
    if not products:
        return EMPTY_INVENTORY_HTML

    header = "".join(f"<th>{column}</th>" for column in _TABLE_COLUMNS)
    lines = ['<table class="inventory">', f"<thead><tr>{header}</tr></thead>", "<tbody>"]
    for product in products:
        cells = (
            escape(product.name),
            format_currency(product.price, currency_symbol),
            str(product.quantity),
            format_currency(product.total_value, currency_symbol),
            format_expiration(product),
            product.kind.value,
        )
        lines.append("<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>")
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def _describe_product(product: Product | None, currency_symbol: str) -> str:
    if product is None:
        return CSV_MISSING_DATE
    return f"{escape(product.name)} ({format_currency(product.total_value, currency_symbol)})"


def render_sales_report_html(report: SalesReport, currency_symbol: str = "$") -> str:
    """HTML definition list of a sales report; empty fragment for an empty inventory."""
    if report.total_products == 0:
        return EMPTY_INVENTORY_HTML

    entries = [
        ("Total Products", str(report.total_products)),
        ("Total Inventory Value", format_currency(report.total_value, currency_symbol)),
        ("Average Price", format_currency(report.average_price, currency_symbol)),
        ("Highest Value Product", _describe_product(report.highest_value_product, currency_symbol)),
        ("Lowest Value Product", _describe_product(report.lowest_value_product, currency_symbol)),
        ("Perishable Products", str(report.perishable_count)),
        ("Regular Products", str(report.regular_count)),
    ]
    lines = ['<dl class="sales-report">']
    for label, value in entries:
        lines.append(f"<dt>{label}</dt><dd>{value}</dd>")
    lines.append("</dl>")
    return "\n".join(lines)
