"""
Product data model for the inventory tracker.
A single tagged dataclass covers both the regular and the perishable variant.
"""

from dataclasses import dataclass
from datetime import date

from .enums import ProductKind
from .errors import ValidationError

# Fields that may only be assigned while the record is being constructed
_FIXED_FIELDS = ("kind", "expiration_date")


@dataclass
class Product:
    """
    Data model for a stocked product.

    ``kind`` discriminates the variant: ``expiration_date`` is set if and only
    if the product is perishable. Both are fixed once the record exists, while
    ``price`` and ``quantity`` stay mutable for the bulk helpers in
    ``models.store``.
    """

    name: str
    price: float
    quantity: int
    kind: ProductKind = ProductKind.REGULAR
    expiration_date: date | None = None

    def __post_init__(self):
        try:
            kind = ProductKind(self.kind)
        except ValueError as exc:
            raise ValidationError(f"Unknown product kind: {self.kind!r}") from exc
        expiration = self.expiration_date
        if isinstance(expiration, str):
            try:
                expiration = date.fromisoformat(expiration)
            except ValueError as exc:
                raise ValidationError(
                    f"Expiration date for '{self.name}' is not an ISO date: {expiration!r}"
                ) from exc

        if kind == ProductKind.PERISHABLE and expiration is None:
            raise ValidationError(f"Perishable product '{self.name}' needs an expiration date")
        if kind == ProductKind.REGULAR and expiration is not None:
            raise ValidationError(f"Regular product '{self.name}' cannot carry an expiration date")

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "expiration_date", expiration)

    def __setattr__(self, name, value):
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"'{name}' is fixed at creation")
        super().__setattr__(name, value)

    @classmethod
    def regular(cls, name: str, price: float, quantity: int) -> "Product":
        return cls(name=name, price=price, quantity=quantity)

    @classmethod
    def perishable(
        cls, name: str, price: float, quantity: int, expiration_date: date | str
    ) -> "Product":
        return cls(
            name=name,
            price=price,
            quantity=quantity,
            kind=ProductKind.PERISHABLE,
            expiration_date=expiration_date,
        )

    @property
    def is_perishable(self) -> bool:
        return self.kind == ProductKind.PERISHABLE

    @property
    def total_value(self) -> float:
        """Value of the units in stock (price * quantity)."""
        return self.price * self.quantity

    def days_until_expiry(self, as_of: date | None = None) -> int | None:
        """Return whole days from ``as_of`` (today by default) to expiry, None for regular products."""
        if self.kind == ProductKind.REGULAR:
            return None
        reference = as_of or date.today()
        return (self.expiration_date - reference).days

    def is_expired(self, as_of: date | None = None) -> bool:
        """True when the expiration date lies strictly before ``as_of``."""
        days = self.days_until_expiry(as_of)
        return days is not None and days < 0

    def is_expiring_soon(self, as_of: date | None = None, horizon_days: int = 7) -> bool:
        """True when the product expires within ``horizon_days`` of ``as_of``, inclusive."""
        days = self.days_until_expiry(as_of)
        return days is not None and 0 <= days <= horizon_days

    def __str__(self) -> str:
        text = f"Product: {self.name}, Price: ${self.price:.2f}, Quantity: {self.quantity}"
        if self.kind == ProductKind.PERISHABLE:
            text += f", Expiration Date: {self.expiration_date.isoformat()}"
        return text
