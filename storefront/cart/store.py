"""Cart state manager.

A ``CartStore`` owns the visitor's line items, persists them to a
session-scoped key-value storage after every change and notifies
subscribers synchronously so that every view of the cart stays in step.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from ..config import DEFAULT_CART_STORAGE_KEY
from ..services.logging import log_event
from ..utils.pricing import format_price, parse_decimal
from .models import CartLineItem, CartState, Product
from .storage import CartStorage, MemoryStorage


STORAGE_VERSION = 1

Listener = Callable[[CartState], None]


class CartStore:
    """In-process cart with persistence and change notification."""

    def __init__(
        self,
        storage: Optional[CartStorage] = None,
        *,
        storage_key: str = DEFAULT_CART_STORAGE_KEY,
    ) -> None:
        self._storage = storage if storage is not None else MemoryStorage()
        self._storage_key = storage_key
        self._items: List[CartLineItem] = self._rehydrate()
        # visibility is transient, every load starts closed
        self._is_open = False
        self._listeners: List[Listener] = []

    # -- queries -----------------------------------------------------------

    @property
    def items(self) -> Tuple[CartLineItem, ...]:
        return tuple(self._items)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def state(self) -> CartState:
        return CartState(items=tuple(self._items), is_open=self._is_open)

    def get_item(self, product_id: str) -> Optional[CartLineItem]:
        index = self._index_of(product_id)
        return None if index is None else self._items[index]

    def get_total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    def get_total_price(self) -> Decimal:
        total = Decimal("0")
        for item in self._items:
            price = parse_decimal(item.product.price)
            if price is None:
                log_event(
                    "warning",
                    "cart.price.unparseable",
                    product_id=item.product.id,
                    price=item.product.price,
                )
                continue
            total += price * item.quantity
        return total

    # -- mutations ---------------------------------------------------------

    def add_item(self, product: Product) -> None:
        index = self._index_of(product.id)
        if index is None:
            self._items.append(CartLineItem(product=product, quantity=1))
        else:
            current = self._items[index]
            self._items[index] = current.with_quantity(current.quantity + 1)
        self._commit()

    def remove_item(self, product_id: str) -> None:
        index = self._index_of(product_id)
        if index is None:
            return
        del self._items[index]
        self._commit()

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        if new_quantity < 1:
            self.remove_item(product_id)
            return
        index = self._index_of(product_id)
        if index is None:
            return
        current = self._items[index]
        if current.quantity == new_quantity:
            return
        self._items[index] = current.with_quantity(new_quantity)
        self._commit()

    def clear_cart(self) -> None:
        self._items = []
        self._commit()

    def open_cart(self) -> None:
        self._set_open(True)

    def close_cart(self) -> None:
        self._set_open(False)

    # -- subscriptions -----------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; it is called with the new state after each change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- serialization -----------------------------------------------------

    def serialize(self) -> str:
        payload = {
            "state": {"items": [item.to_dict() for item in self._items]},
            "version": STORAGE_VERSION,
        }
        return json.dumps(payload, ensure_ascii=False)

    @staticmethod
    def deserialize(raw: str) -> List[CartLineItem]:
        """Parse a stored payload; raises ValueError when it is malformed."""
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError("stored cart is not valid JSON") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("state"), dict):
            raise ValueError("stored cart has no state object")
        raw_items = payload["state"].get("items", [])
        if not isinstance(raw_items, list):
            raise ValueError("stored cart items must be a list")
        items: List[CartLineItem] = []
        seen = set()
        for entry in raw_items:
            item = CartLineItem.from_dict(entry)
            if item.product.id in seen:
                raise ValueError(f"duplicate line for product {item.product.id}")
            seen.add(item.product.id)
            items.append(item)
        return items

    def to_dict(self) -> Dict:
        return {
            "items": [item.to_dict() for item in self._items],
            "is_open": self._is_open,
            "total_items": self.get_total_items(),
            "total_price": format_price(self.get_total_price()),
        }

    # -- internals ---------------------------------------------------------

    def _index_of(self, product_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.product.id == product_id:
                return index
        return None

    def _rehydrate(self) -> List[CartLineItem]:
        try:
            raw = self._storage.get_item(self._storage_key)
        except OSError as exc:
            log_event("warning", "cart.storage.read_failed", key=self._storage_key, error=str(exc))
            return []
        except ValueError as exc:
            log_event("warning", "cart.storage.corrupt", key=self._storage_key, error=str(exc))
            self._discard_stored()
            return []
        if raw is None:
            return []
        try:
            return self.deserialize(raw)
        except ValueError as exc:
            log_event("warning", "cart.storage.corrupt", key=self._storage_key, error=str(exc))
            self._discard_stored()
            return []

    def _discard_stored(self) -> None:
        try:
            self._storage.remove_item(self._storage_key)
        except (OSError, ValueError) as exc:
            log_event("warning", "cart.storage.write_failed", key=self._storage_key, error=str(exc))

    def _persist(self) -> None:
        try:
            self._storage.set_item(self._storage_key, self.serialize())
        except (OSError, ValueError) as exc:
            # writes are fire-and-forget; the in-memory state stays authoritative
            log_event("warning", "cart.storage.write_failed", key=self._storage_key, error=str(exc))

    def _set_open(self, value: bool) -> None:
        if self._is_open == value:
            return
        self._is_open = value
        self._notify()

    def _commit(self) -> None:
        self._persist()
        self._notify()

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            listener(state)
