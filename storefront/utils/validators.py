from typing import Any


def parse_quantity(value: Any) -> int:
    """Quantity from a JSON body: integers only, sign is left to the cart."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("quantity must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("quantity must be an integer")
    return int(value)


def require_text(value: Any, field: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError(f"{field} required")
    return text
