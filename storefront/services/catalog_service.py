from typing import Dict, Optional, Tuple
import time
from sqlalchemy import or_
from ..cart.models import Product as CartProduct
from ..db.session import get_session
from ..models.product import Product
from ..utils.pagination import normalize_paging
from ..utils.dto import to_product_dto, to_product_snapshot
from .logging import log_event


class CatalogService:
    """Read-only product catalog.

    Responsibilities:
    - List/search products with pagination and optional category filter
    - Get single product detail
    - Hand the cart a minimal product snapshot by id
    """

    def __init__(self, session_factory=get_session, cache_ttl_seconds: int = 60, max_cache_entries: int = 256):
        self._session_factory = session_factory
        # naive in-process cache: key -> (ts, result), oldest first
        self._cache: Dict[Tuple, Tuple[float, Dict]] = {}
        self._cache_ttl_seconds = cache_ttl_seconds
        self._max_cache_entries = max(1, max_cache_entries)

    def list_products(
        self,
        *,
        query: Optional[str] = None,
        category: Optional[str] = None,
        in_stock_only: bool = False,
        page: int = 1,
        page_size: int = 12,
    ) -> Dict:
        """Return dict: { items: [ProductDTO], page, page_size, total }"""
        p, ps = normalize_paging(page, page_size)
        cache_key = ((query or "").strip().lower(), category or "", bool(in_stock_only), p, ps)
        now = time.time()
        cached = self._cache.get(cache_key)
        if cached and now - cached[0] <= self._cache_ttl_seconds:
            return cached[1]

        with self._session_factory() as session:
            q = session.query(Product)
            if in_stock_only:
                q = q.filter(Product.in_stock.is_(True))
            if query and query.strip():
                like = f"%{query.strip()}%"
                q = q.filter(
                    or_(
                        Product.name.ilike(like),
                        Product.short_description.ilike(like),
                        Product.scientific_name.ilike(like),
                        Product.origin.ilike(like),
                    )
                )
            if category:
                q = q.filter(Product.category == category)
            total = q.count()
            rows = (
                q.order_by(Product.name.asc(), Product.id.asc())
                .offset((p - 1) * ps)
                .limit(ps)
                .all()
            )
            items = [to_product_dto(r) for r in rows]
        result = {"items": items, "page": p, "page_size": ps, "total": total}
        self._store_cached(cache_key, now, result)
        return result

    def get_product(self, product_id: str) -> Optional[Dict]:
        """Return ProductDTO for given product id, or None."""
        if not product_id:
            return None
        with self._session_factory() as session:
            r = session.query(Product).filter(Product.id == product_id).first()
            return to_product_dto(r) if r else None

    def get_product_snapshot(self, product_id: str) -> Optional[CartProduct]:
        """Return the cart-facing product value for ``product_id``, or None."""
        if not product_id:
            return None
        with self._session_factory() as session:
            r = session.query(Product).filter(Product.id == product_id).first()
            return to_product_snapshot(r) if r else None

    def _store_cached(self, key: Tuple, now: float, result: Dict) -> None:
        stale = [k for k, (ts, _) in self._cache.items() if now - ts > self._cache_ttl_seconds]
        for k in stale:
            del self._cache[k]
        self._cache.pop(key, None)
        while len(self._cache) >= self._max_cache_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[key] = (now, result)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def invalidate_cache(self) -> None:
        self._cache.clear()
        log_event("info", "catalog.cache.invalidated")
