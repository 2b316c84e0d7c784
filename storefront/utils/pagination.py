from typing import Any, Tuple


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def normalize_paging(page: Any, page_size: Any, max_page_size: int = 50) -> Tuple[int, int]:
    p = _as_int(page)
    ps = _as_int(page_size)
    p = p if p > 0 else 1
    ps = min(ps if ps > 0 else 12, max_page_size)
    return p, ps
