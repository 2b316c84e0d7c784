"""Value types the cart works with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
from uuid import uuid4


@dataclass(frozen=True)
class Product:
    """Minimal product contract the cart depends on.

    ``price`` is kept as the catalog's decimal string; the cart only parses it
    when computing totals.
    """

    id: str
    name: str
    price: str
    image_url: str = ""
    origin: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image_url": self.image_url,
            "origin": self.origin,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        if not isinstance(data, dict):
            raise ValueError("product must be an object")
        product_id = str(data.get("id") or "").strip()
        if not product_id:
            raise ValueError("product id required")
        return cls(
            id=product_id,
            name=str(data.get("name", "")),
            price=str(data.get("price", "0")),
            image_url=str(data.get("image_url", "")),
            origin=str(data.get("origin", "")),
        )


@dataclass(frozen=True)
class CartLineItem:
    """One product in the cart and how many of it."""

    product: Product
    quantity: int = 1
    id: str = field(default_factory=lambda: str(uuid4()))

    def with_quantity(self, quantity: int) -> "CartLineItem":
        return CartLineItem(product=self.product, quantity=quantity, id=self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product": self.product.to_dict(),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartLineItem":
        if not isinstance(data, dict):
            raise ValueError("line item must be an object")
        quantity = data.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError("line item quantity must be a positive integer")
        line_id = str(data.get("id") or "").strip() or str(uuid4())
        return cls(product=Product.from_dict(data.get("product")), quantity=quantity, id=line_id)


@dataclass(frozen=True)
class CartState:
    items: Tuple[CartLineItem, ...] = ()
    is_open: bool = False
