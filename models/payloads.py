"""
Boundary models for untyped product input (e.g. rows decoded from JSON).
"""

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .enums import ProductKind
from .errors import ValidationError
from .product import Product


class ProductPayload(BaseModel):
    """Validated shape of a product coming from outside the process."""

    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    expiration_date: date | None = None

    def to_product(self) -> Product:
        if self.expiration_date is None:
            return Product.regular(self.name, self.price, self.quantity)
        return Product.perishable(self.name, self.price, self.quantity, self.expiration_date)


def parse_product(data: Mapping[str, Any]) -> Product:
    """
    Build a Product from a raw mapping.

    Accepts ``expirationDate`` as an alias of ``expiration_date``. A ``kind``
    entry, when given, must agree with the presence of the expiration date.
    Any failure is raised as ``models.errors.ValidationError``.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(f"Product data must be a mapping, got {type(data).__name__}")

    fields = dict(data)
    if "expirationDate" in fields and "expiration_date" not in fields:
        fields["expiration_date"] = fields.pop("expirationDate")
    kind = fields.pop("kind", None)

    try:
        payload = ProductPayload.model_validate(fields)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid product data: {exc}") from exc

    if kind is not None:
        try:
            expected = ProductKind(kind)
        except ValueError as exc:
            raise ValidationError(f"Unknown product kind: {kind!r}") from exc
        actual = ProductKind.REGULAR if payload.expiration_date is None else ProductKind.PERISHABLE
        if expected != actual:
            raise ValidationError(
                f"Product '{payload.name}' declared as {expected.value} but data describes {actual.value}"
            )

    return payload.to_product()
