"""Shopping cart state manager."""

from .models import CartLineItem, CartState, Product
from .storage import CartStorage, JsonFileStorage, MemoryStorage, SessionStorage
from .store import CartStore

__all__ = [
    "CartLineItem",
    "CartState",
    "CartStorage",
    "CartStore",
    "JsonFileStorage",
    "MemoryStorage",
    "Product",
    "SessionStorage",
]
