from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Optional


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse a price given as a numeric string (or number) into a Decimal.

    Returns None when the value cannot be read as a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def format_price(value: Decimal) -> str:
    """Two-decimal string for any finite amount, however large."""
    with localcontext() as ctx:
        # room for every integer digit plus the two cents digits
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return f"{value.quantize(Decimal('0.01')):f}"
