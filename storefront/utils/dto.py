from typing import Any, Dict, Optional

from ..cart.models import Product as CartProduct


def _money(value: Any) -> Optional[str]:
    # Numeric columns come back as Decimal already scaled to the column
    return None if value is None else str(value)


def to_product_dto(row: Any) -> Dict:
    return {
        "id": getattr(row, "id", None),
        "name": getattr(row, "name", None),
        "description": getattr(row, "description", None),
        "short_description": getattr(row, "short_description", None),
        "price": _money(getattr(row, "price", None)),
        "origin": getattr(row, "origin", None),
        "category": getattr(row, "category", None),
        "rating": _money(getattr(row, "rating", None)),
        "review_count": getattr(row, "review_count", 0) or 0,
        "image_url": getattr(row, "image_url", None),
        "qr_code": getattr(row, "qr_code", None),
        "scientific_name": getattr(row, "scientific_name", None),
        "extraction_method": getattr(row, "extraction_method", None),
        "bioactive_compounds": getattr(row, "bioactive_compounds", None) or [],
        "certifications": getattr(row, "certifications", None) or [],
        "sustainability_story": getattr(row, "sustainability_story", None),
        "community_impact": getattr(row, "community_impact", None),
        "research_papers": getattr(row, "research_papers", None) or [],
        "in_stock": bool(getattr(row, "in_stock", True)),
    }


def to_product_snapshot(row: Any) -> CartProduct:
    """Reduce a catalog row to the fields the cart depends on."""
    return CartProduct(
        id=str(row.id),
        name=row.name,
        price=_money(row.price) or "0",
        image_url=row.image_url or "",
        origin=row.origin or "",
    )


def to_supply_chain_dto(row: Any) -> Dict:
    return {
        "id": row.id,
        "step_number": row.step_number,
        "title": row.title,
        "description": row.description,
        "image_url": row.image_url,
        "details": row.details,
        "location": row.location,
        "certifications": row.certifications or [],
    }


def to_impact_dto(row: Any) -> Dict:
    return {
        "id": row.id,
        "schools_built": row.schools_built,
        "families_supported": row.families_supported,
        "hectares_protected": row.hectares_protected,
        "amount_reinvested": _money(row.amount_reinvested),
        "research_papers": row.research_papers,
        "clinical_trials": row.clinical_trials,
        "patents": row.patents,
    }
